"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Kommo


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "Kommo") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._client.request(method, path, params=params, json=json, timeout=timeout)

    def _get(
        self,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request("GET", path, params=params, timeout=timeout)

    def _get_embedded(
        self,
        path: str,
        key: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> list[Any]:
        """GET ``path`` and return ``_embedded[key]``, or ``[]`` when absent."""
        response = self._get(path, params=params, timeout=timeout)
        if not isinstance(response, dict):
            return []
        embedded = response.get("_embedded")
        items = embedded.get(key) if isinstance(embedded, dict) else None
        if isinstance(items, list):
            return items
        return []
