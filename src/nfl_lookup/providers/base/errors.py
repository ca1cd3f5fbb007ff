from __future__ import annotations

from enum import StrEnum

from nfl_lookup.core.errors import NflLookupError


class UpstreamReason(StrEnum):
    INVALID_CREDENTIALS = "invalid_credentials"
    FORBIDDEN = "forbidden"
    NOT_AVAILABLE = "not_available"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status_code: int) -> UpstreamReason:
        if status_code == 401:
            return cls.INVALID_CREDENTIALS
        if status_code == 403:
            return cls.FORBIDDEN
        if status_code == 404:
            return cls.NOT_AVAILABLE
        if status_code == 429:
            return cls.RATE_LIMITED
        if status_code == 500:
            return cls.SERVER_ERROR
        if status_code in {502, 503, 504}:
            return cls.UNAVAILABLE
        return cls.UNKNOWN

    @property
    def message(self) -> str:
        return _REASON_MESSAGES[self]


_REASON_MESSAGES: dict[UpstreamReason, str] = {
    UpstreamReason.INVALID_CREDENTIALS: "API key is invalid or expired. Check NFL_API_KEY.",
    UpstreamReason.FORBIDDEN: (
        "Access forbidden. The API plan may not include this data, or the rate limit was exceeded."
    ),
    UpstreamReason.NOT_AVAILABLE: (
        "Data not found. The requested week/season may not be available yet."
    ),
    UpstreamReason.RATE_LIMITED: "Rate limit exceeded. Too many requests; try again later.",
    UpstreamReason.SERVER_ERROR: (
        "NFL data provider error. This is temporary; try again in a few minutes."
    ),
    UpstreamReason.UNAVAILABLE: "NFL data provider is unavailable. It may be down for maintenance.",
    UpstreamReason.UNKNOWN: "Unknown provider error. Check the network connection and API key.",
}


class ProviderError(NflLookupError):
    """Base exception for provider-related failures."""


class ProviderRequestError(ProviderError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx, etc.)."""


class UpstreamError(ProviderRequestError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, *, method: str = "GET", path: str = "") -> None:
        self.status_code = status_code
        self.reason = UpstreamReason.from_status(status_code)
        self.method = method
        self.path = path
        super().__init__(f"HTTP {status_code} for {method} {path}: {self.reason.message}")


class ProviderRateLimited(UpstreamError):
    """Provider throttled the request (HTTP 429)."""

    def __init__(self, *, method: str = "GET", path: str = "") -> None:
        super().__init__(429, method=method, path=path)


class ProviderParseError(ProviderError):
    """Response body was not valid JSON or did not have the expected shape."""
