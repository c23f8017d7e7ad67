"""Module entrypoint for ``python -m tunnelroutes``."""

from tunnelroutes.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
