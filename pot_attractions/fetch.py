# pot_attractions/fetch.py
"""
HTTP layer: one GET, JSON body, retries on transient trouble.

A 429 is surfaced straight away as RateLimited; connection errors, timeouts,
5xx responses and undecodable bodies are retried with a pluggable backoff.
"""
from __future__ import annotations
import time
from typing import Any, Callable, Optional

import httpx

from pot_attractions.config import MAX_RETRIES, REQUEST_TIMEOUT, RETRY_DELAY
from pot_attractions.errors import RateLimited, RequestFailed, RetriesExhausted

HEADERS = {
    "User-Agent": "pot-attractions/0.1 (+https://rit.poland.travel)",
    "Accept": "application/json",
}


# ---------- Backoff policies ----------

class FixedBackoff:
    """Same pause before every retry."""

    def __init__(self, seconds: float = RETRY_DELAY):
        self.seconds = seconds

    def delay(self, attempt: int) -> float:
        return self.seconds


class ExponentialBackoff:
    """base * factor**(attempt-1), capped."""

    def __init__(self, base: float = 1.0, factor: float = 2.0, cap: float = RETRY_DELAY):
        self.base = base
        self.factor = factor
        self.cap = cap

    def delay(self, attempt: int) -> float:
        return min(self.base * self.factor ** max(attempt - 1, 0), self.cap)


class _Retryable(Exception):
    """Internal marker for a failed attempt worth repeating."""


def _retry_after(resp: httpx.Response) -> Optional[float]:
    raw = resp.headers.get("Retry-After")
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        # HTTP-date form; not worth parsing for a fatal error
        return None


class Fetcher:
    """
    Blocking JSON fetcher.

    Args:
        client: httpx.Client to use. A private one is created (and closed by
            close()) when omitted.
        max_retries: retries after the first attempt before giving up.
        backoff: object with delay(attempt) -> seconds.
        sleep: injectable for tests.
        timeout: per-request timeout for the private client.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        max_retries: int = MAX_RETRIES,
        backoff=None,
        sleep: Callable[[float], None] = time.sleep,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout, headers=HEADERS, follow_redirects=True
        )
        self.max_retries = max_retries
        self.backoff = backoff or FixedBackoff()
        self._sleep = sleep

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self._owns_client:
            self._client.close()

    def get_json(self, url: str) -> Any:
        """GET url and return the decoded JSON body."""
        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return self._attempt(url)
            except _Retryable as e:
                print(f"  ⚠️  {e.__cause__ or e}; attempt {attempt}/{attempts}")
                if attempt == attempts:
                    print(f"  ❌ Max retries exceeded - giving up on {url}")
                    raise RetriesExhausted(url, attempts) from e.__cause__
                delay = self.backoff.delay(attempt)
                print(f"  😴 Waiting {delay:.1f}s before retry...")
                self._sleep(delay)

    def _attempt(self, url: str) -> Any:
        try:
            resp = self._client.get(url)
        except httpx.TransportError as e:
            raise _Retryable(type(e).__name__) from e

        if resp.status_code == 429:
            print(f"  🛑 429 from {url}")
            raise RateLimited(url, retry_after=_retry_after(resp))
        if resp.status_code >= 500:
            err = httpx.HTTPStatusError(
                f"{resp.status_code} from {url}", request=resp.request, response=resp
            )
            raise _Retryable(str(err)) from err
        if resp.status_code >= 400:
            raise RequestFailed(url, resp.status_code, getattr(resp, "text", ""))

        try:
            return resp.json()
        except ValueError as e:
            raise _Retryable("malformed JSON body") from e
