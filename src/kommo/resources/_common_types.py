"""Shared payload types and boundary decoders for resources.

Kommo nests related records under ``_embedded`` and omits keys rather than
sending empty values. Everything here turns raw API dicts into fully
populated records so nothing downstream has to guess about missing fields.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, TypedDict

from typing_extensions import ReadOnly

_logger = logging.getLogger(__name__)


class TagRef(TypedDict):
    """Tag as referenced from another record (id, name, color)."""
    id: ReadOnly[int]
    name: ReadOnly[str]
    color: ReadOnly[Optional[str]]


def _is_valid_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_tag(raw: object) -> TagRef | None:
    """Decode one raw tag dict, or return None when it has no usable id."""
    if not isinstance(raw, dict) or not _is_valid_id(raw.get("id")):
        _logger.warning("Skipping malformed tag entry: %r", raw)
        return None
    name = raw.get("name")
    color = raw.get("color")
    return TagRef(
        id=raw["id"],
        name=name if isinstance(name, str) else "",
        color=color if isinstance(color, str) else None,
    )


def _decode_tags(values: Iterable[Any] | None) -> list[TagRef]:
    """Decode a raw tag list, dropping malformed entries and keeping order."""
    output: list[TagRef] = []
    for raw in values or []:
        tag = _decode_tag(raw)
        if tag is not None:
            output.append(tag)
    return output


__all__ = ["TagRef"]
