"""Core Kommo client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .errors import ConfigurationError, RemoteFetchError
from .resources.leads import Leads
from .resources.tags import Tags
from .utils import normalize_domain

DOMAIN_ENV = "KOMMO_DOMAIN"
API_KEY_ENV = "KOMMO_API_KEY"
DEFAULT_TIMEOUT = 30


class Kommo:
    """Resource-grouped client for the Kommo REST API (v4)."""

    tags: Tags
    leads: Leads

    def __init__(
        self,
        *,
        domain: str,
        api_key: str,
        default_timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Create a Kommo client bound to one account.

        Parameters
        ----------
        domain
            Account hostname, e.g. ``example.kommo.com``. A leading scheme and a
            trailing slash are stripped.
        api_key
            Long-lived bearer token.
        default_timeout
            Per-request timeout in seconds.
        session
            Optional requests session to reuse connections.
        """
        self.domain = normalize_domain(domain or "")
        if not self.domain or not api_key:
            raise ConfigurationError("Kommo domain and API key are required.")
        self.default_timeout = default_timeout
        self._api_key = api_key
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.tags: Tags = Tags(self)
        self.leads: Leads = Leads(self)
        self.tags.leads = self.leads

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Kommo":
        """Build a client from ``KOMMO_DOMAIN`` and ``KOMMO_API_KEY``."""
        domain = os.environ.get(DOMAIN_ENV)
        api_key = os.environ.get(API_KEY_ENV)
        if not domain or not api_key:
            raise ConfigurationError(f"{DOMAIN_ENV} and {API_KEY_ENV} must be set")
        return cls(domain=domain, api_key=api_key, **kwargs)

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the Kommo API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path, with or without a leading ``/api/v4``.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response body is empty
            (Kommo answers ``204 No Content`` for empty collections).

        Raises
        ------
        RemoteFetchError
            On transport errors, timeouts, HTTP error statuses and non-JSON bodies.
        """
        if not path.startswith("/"):
            path = "/" + path
        if not path.startswith("/api/v4/"):
            path = "/api/v4" + path
        url = f"{self.base_url}{path}"

        requester = self._session or requests
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=self.headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            # Kommo error bodies are problem+json (title/detail)
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    if "detail" in error_body:
                        error_msg = f"{exc} (detail: {error_body['detail']})"
                    elif "title" in error_body:
                        error_msg = f"{exc} (title: {error_body['title']})"
                    elif "message" in error_body:
                        error_msg = f"{exc} (message: {error_body['message']})"
            except (ValueError, AttributeError, KeyError):
                pass  # error body was not JSON
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            raise RemoteFetchError(f"{method} {url} failed: {error_msg}") from exc
        except requests.RequestException as exc:
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            raise RemoteFetchError(f"{method} {url} failed: {exc}") from exc

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            raise RemoteFetchError(f"{method} {url} returned a non-JSON body") from exc
        if isinstance(payload, (dict, list)):
            return payload
        return None


def create_client(**kwargs: Any) -> Kommo:
    """Create a :class:`Kommo` client from environment variables."""
    return Kommo.from_env(**kwargs)
