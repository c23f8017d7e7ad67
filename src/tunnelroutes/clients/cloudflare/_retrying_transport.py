"""httpx async transport wrapper that retries transient Cloudflare API failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

logger = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

_MAX_BACKOFF_SECONDS = 30.0


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with retry on transient failures.

    - Retries transport-level errors (connection reset, timeout, ...)
    - Retries 429, 502, 503 and 504 responses, sleeping for ``Retry-After``
      when the API provides it and an exponential backoff otherwise
    - Gives up after *max_retries* retries and hands back the last response
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        min_backoff: float = 1.0,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._min_backoff = min_backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise
                logger.warning("%s %s failed (%s), retrying", request.method, request.url.path, exc)
                await self._sleep(self._backoff(attempt))
                attempt += 1
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= self._max_retries:
                return response

            delay = self._parse_retry_after(response)
            if delay is None:
                delay = self._backoff(attempt)
            logger.warning(
                "%s %s returned %d, retrying in %.1fs (attempt %d)",
                request.method,
                request.url.path,
                response.status_code,
                delay,
                attempt + 1,
            )
            await response.aclose()
            await self._sleep(delay)
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    def _backoff(self, attempt: int) -> float:
        seconds = min(_MAX_BACKOFF_SECONDS, self._min_backoff * float(2**attempt))
        return seconds + random.uniform(0.0, 0.25)

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float | None:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return None
        try:
            return min(_MAX_BACKOFF_SECONDS, max(0.0, float(raw)))
        except ValueError:
            return None

    @staticmethod
    async def _sleep(seconds: float) -> None:
        await asyncio.sleep(seconds)
