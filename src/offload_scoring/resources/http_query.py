"""Resource query adapter reading a remote device's metrics over HTTP."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import QueryResult

RESOURCE_PATH = "/api/v1/resources/"


@dataclass(frozen=True)
class ResourceEndpointConfig:
    """Connection settings for a remote resource endpoint."""

    base_url: str
    timeout: float = 2.0
    api_key: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be provided")
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"Invalid base_url: {self.base_url}") from exc
        if url.scheme not in {"http", "https"} or not url.host:
            raise ValueError("base_url must be an absolute http(s) URL")
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than zero")


class HttpResourceQuery(IResourceQuery):
    """Resolves keys with ``GET {base_url}/api/v1/resources/{key}``.

    The endpoint answers ``{"value": <number>}``. Every failure mode
    (timeouts, transport errors, error statuses, malformed payloads) maps to
    ``QueryResult.unavailable()`` so a query never outlives ``timeout``.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        config: ResourceEndpointConfig,
        *,
        owns_client: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._http = http_client
        self._owns_client = owns_client
        self.config = config
        self._base = f"{config.base_url.rstrip('/')}{RESOURCE_PATH}"
        self._logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )

    def query(self, key: str) -> QueryResult:
        url = self._base + quote(key, safe="/")
        try:
            http_response = self._http.get(
                url, timeout=self.config.timeout, headers=self._headers()
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._logger.warning(
                "resource_query_failed",
                extra={"key": key, "url": url, "error": type(exc).__name__},
            )
            return QueryResult.unavailable()

        return self._map_response(key, http_response)

    def close(self) -> None:
        """Close the HTTP client when this query created it."""

        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "HttpResourceQuery":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _map_response(self, key: str, http_response: httpx.Response) -> QueryResult:
        status = http_response.status_code
        if status >= 400:
            self._logger.warning(
                "resource_query_rejected",
                extra={"key": key, "status_code": status},
            )
            return QueryResult.unavailable()

        try:
            raw = http_response.json()["value"]
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                raise TypeError(f"value must be a number, got {type(raw).__name__}")
            value = float(raw)
        except (ValueError, KeyError, TypeError, OverflowError) as exc:
            self._logger.warning(
                "resource_query_malformed",
                extra={"key": key, "error": type(exc).__name__},
            )
            return QueryResult.unavailable()

        self._logger.debug("resource_query", extra={"key": key, "value": value})
        return QueryResult.ok(value)
