"""Resource module exports."""

from .leads import Leads
from .tags import Tags

__all__ = [
    "Leads",
    "Tags",
]
