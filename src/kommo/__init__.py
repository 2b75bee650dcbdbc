"""Public package surface for the kommo Python client."""

from .client import DEFAULT_TIMEOUT, Kommo, create_client
from .errors import ConfigurationError, KommoError, RemoteFetchError
from .resources.leads_types import LeadResponse
from .resources.tags_types import TagResponse, TagStatistic, TagStatisticsReport


__all__ = [
    "ConfigurationError",
    "DEFAULT_TIMEOUT",
    "Kommo",
    "KommoError",
    "LeadResponse",
    "RemoteFetchError",
    "TagResponse",
    "TagStatistic",
    "TagStatisticsReport",
    "create_client",
]
