"""Types for the tags resource and the tag statistics report."""

from __future__ import annotations

from typing import Optional, TypedDict
from typing_extensions import ReadOnly

from ._common_types import TagRef


class TagResponse(TagRef):
    """Readonly tag dict returned by ``GET /api/v4/leads/tags``."""


class TagStatistic(TypedDict):
    """Lead count for one tag; percentage is relative to leads carrying any tag."""
    id: ReadOnly[int]
    name: ReadOnly[str]
    color: ReadOnly[Optional[str]]
    leadCount: ReadOnly[int]
    percentage: ReadOnly[int]


class TagStatisticsReport(TypedDict):
    """Ranked tag summary.

    ``tags`` holds the top entries by lead count; the lead counts of every
    other tag are summed into ``othersCount``.
    """
    totalTags: ReadOnly[int]
    totalLeads: ReadOnly[int]
    tags: ReadOnly[list[TagStatistic]]
    othersCount: ReadOnly[int]
    lastUpdated: ReadOnly[str]

__all__ = ["TagResponse", "TagStatistic", "TagStatisticsReport"]
