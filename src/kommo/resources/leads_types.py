"""Types and decoding for the leads resource."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly

from ._common_types import TagRef, _decode_tags, _is_valid_id, _logger
from ..utils import unique_in_order


class LeadResponse(TypedDict):
    """Readonly lead dict with its embedded tags flattened to ``tags``."""
    id: ReadOnly[int]
    name: ReadOnly[str]
    tags: ReadOnly[list[TagRef]]


def _decode_lead(raw: object) -> LeadResponse | None:
    if not isinstance(raw, dict) or not _is_valid_id(raw.get("id")):
        _logger.warning("Skipping malformed lead entry: %r", raw)
        return None
    name = raw.get("name")
    embedded = raw.get("_embedded")
    tags = embedded.get("tags") if isinstance(embedded, dict) else None
    return LeadResponse(
        id=raw["id"],
        name=name if isinstance(name, str) else "",
        tags=unique_in_order(
            _decode_tags(tags if isinstance(tags, list) else None),
            key=lambda tag: tag["id"],
        ),
    )

__all__ = ["LeadResponse"]
