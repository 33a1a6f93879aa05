"""Index service client.

Thin synchronous wrapper around ``httpx.Client`` for the three index
operations the pipelines need: creating the games index, upserting one
document and running a ``_search``.  Requests are issued one at a time and
never retried; callers decide what to do with a failed record.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .schemas import SearchResponse


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class IndexClientError(Exception):
    """Base exception for index service failures."""


class IndexTransportError(IndexClientError):
    """Raised when a request cannot be completed (connection, timeout, ...)."""


class SearchResponseError(IndexClientError):
    """Raised when a search response is not JSON or does not match the schema."""


class IndexClient:
    """HTTP client for an Elasticsearch-compatible index service.

    ``transport`` lets tests substitute an ``httpx.MockTransport`` for the
    network.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        search_size: int = 1000,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.search_size = search_size
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=JSON_HEADERS,
            transport=transport,
        )

    # ------------------------------------------------------------------
    def __enter__(self) -> "IndexClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = "/" + path.strip("/")
        logger.debug("%s %s%s", method, self.base_url, url)
        try:
            return self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise IndexTransportError(f"{method} {url} failed: {exc}") from exc

    def create_index(self, index_name: str, body: Dict[str, Any]) -> httpx.Response:
        """Create ``index_name`` with the given settings/mappings body."""
        return self._request("PUT", index_name, json=body)

    def put_document(
        self, index_path: str, doc_id: int | str, document: Dict[str, Any]
    ) -> httpx.Response:
        """Upsert ``document`` at ``{index_path}/{doc_id}``.

        The raw response is returned; a non-2xx status is not raised.
        """
        return self._request("PUT", f"{index_path.strip('/')}/{doc_id}", json=document)

    def search(self, index_path: str, body: Dict[str, Any]) -> SearchResponse:
        """Run ``body`` against ``{index_path}/_search`` and validate the response.

        At most ``search_size`` hits are returned; larger result sets are
        truncated by the service.
        """
        response = self._request(
            "POST",
            f"{index_path.strip('/')}/_search",
            params={"size": self.search_size},
            json=body,
        )
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SearchResponseError(
                f"search returned non-JSON body (HTTP {response.status_code})"
            ) from exc
        try:
            return SearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise SearchResponseError(
                f"unexpected search response (HTTP {response.status_code}): "
                f"{exc.error_count()} schema error(s)"
            ) from exc


__all__ = [
    "IndexClient",
    "IndexClientError",
    "IndexTransportError",
    "SearchResponseError",
]
