from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import ProviderParseError, ProviderRateLimited, ProviderRequestError, UpstreamError

logger = logging.getLogger(__name__)

Json = Any


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic HTTP client wrapper.

    - Uses a single underlying httpx.Client for connection pooling.
    - Translates non-2xx responses into UpstreamError with a categorized reason.
    - Never retries; callers decide whether to try again later.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        Perform an HTTP request and return the decoded JSON value.
        Raises ProviderRequestError on transport issues, UpstreamError on non-2xx,
        ProviderParseError when the body is not JSON.
        """
        url = path.lstrip("/")
        # Query params carry the API key; keep them out of the logs.
        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
            )
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            raise ProviderRequestError(str(e)) from e

        if resp.status_code == 429:
            logger.warning("%s %s rate limited (HTTP 429)", method, url)
            raise ProviderRateLimited(method=method, path=url)

        if not resp.is_success:
            logger.warning("%s %s failed with HTTP %s", method, url, resp.status_code)
            raise UpstreamError(resp.status_code, method=method, path=url)

        try:
            return resp.json()
        except ValueError as e:
            raise ProviderParseError(f"Response for {method} {url} was not valid JSON.") from e

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return self.request_json("GET", path, params=params, headers=headers)
