# pot_attractions/errors.py
"""Errors raised by the harvester. Every one of them aborts a run."""
from __future__ import annotations
from typing import Optional


class HarvestError(Exception):
    """Base class for all harvester failures."""


class RateLimited(HarvestError):
    """The API answered 429. Never retried by the fetcher itself."""

    def __init__(self, url: str, retry_after: Optional[float] = None):
        self.url = url
        self.retry_after = retry_after
        hint = f" (retry after {retry_after:.0f}s)" if retry_after is not None else ""
        super().__init__(f"rate limited by {url}{hint}")


class TransientError(HarvestError):
    """Network-level trouble that may go away on its own."""


class RetriesExhausted(TransientError):
    def __init__(self, url: str, attempts: int):
        self.url = url
        self.attempts = attempts
        super().__init__(f"giving up on {url} after {attempts} attempts")


class RequestFailed(HarvestError):
    """Non-retryable HTTP status (anything 4xx except 429)."""

    def __init__(self, url: str, status_code: int, body: str = ""):
        self.url = url
        self.status_code = status_code
        msg = f"{status_code} from {url}"
        if body:
            msg += f"\n--- Response body ---\n{body[:1000]}"
        super().__init__(msg)


class MalformedResponse(HarvestError):
    """Response parsed, but not into the shape we expect."""


class MissingField(MalformedResponse, KeyError):
    def __init__(self, field: str, where: str = "record"):
        self.field = field
        self.where = where
        super().__init__(f"{where} is missing field '{field}'")

    def __str__(self):
        # KeyError would repr() the message otherwise
        return self.args[0]


class CacheCorrupt(HarvestError):
    """The on-disk cache exists but cannot be read back."""
