"""Shared helpers for the Kommo client."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable, Hashable, Iterable, Optional, TypeVar

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

T = TypeVar("T")


def normalize_domain(domain: str) -> str:
    """Strip a leading ``http(s)://`` and one trailing slash from ``domain``."""
    domain = _SCHEME_RE.sub("", domain.strip())
    if domain.endswith("/"):
        domain = domain[:-1]
    return domain


def unique_in_order(values: Iterable[T], key: Optional[Callable[[T], Hashable]] = None) -> list[T]:
    """Return unique values (by ``key``, default the value itself) preserving the original order."""
    seen: set[Hashable] = set()
    output: list[T] = []
    for value in values:
        marker = key(value) if key else value
        if marker in seen:
            continue
        seen.add(marker)
        output.append(value)
    return output


def percentage_of(part: int, total: int) -> int:
    """Return ``part / total * 100`` rounded half up, or 0 when ``total`` is 0.

    Integer arithmetic keeps exact halves (1 of 8 -> 12.5 -> 13) from being
    nudged by float error.
    """
    if total <= 0:
        return 0
    return (part * 200 + total) // (total * 2)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: current time) as ISO-8601 UTC with milliseconds, e.g. ``2026-01-01T12:00:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
