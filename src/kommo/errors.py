"""Exceptions raised by the Kommo client."""

from __future__ import annotations


class KommoError(Exception):
    """Base exception for all Kommo client errors."""


class RemoteFetchError(KommoError):
    """Raised when a request to the Kommo API fails, times out, or returns an undecodable body."""


class ConfigurationError(KommoError, ValueError):
    """Raised when the client is missing its domain or API key."""


__all__ = ["ConfigurationError", "KommoError", "RemoteFetchError"]
