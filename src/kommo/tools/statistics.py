"""Tag statistics helpers."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Optional, Sequence

from kommo.resources._common_types import TagRef
from kommo.resources.leads_types import LeadResponse
from kommo.resources.tags_types import TagStatistic, TagStatisticsReport
from kommo.utils import percentage_of, utc_timestamp

DEFAULT_TOP_N = 10


def count_leads_per_tag(leads: Sequence[LeadResponse]) -> tuple[Counter[int], int]:
    """Return per-tag-id lead counts and the number of leads carrying any tag."""
    counts: Counter[int] = Counter()
    tagged_leads = 0
    for lead in leads:
        if not lead["tags"]:
            continue
        tagged_leads += 1
        # a lead counts once per tag
        for tag_id in {tag["id"] for tag in lead["tags"]}:
            counts[tag_id] += 1
    return counts, tagged_leads


def build_tag_statistics(
    tags: Sequence[TagRef],
    leads: Sequence[LeadResponse],
    *,
    top_n: int = DEFAULT_TOP_N,
    now: Optional[datetime] = None,
) -> TagStatisticsReport:
    """Rank ``tags`` by how many of ``leads`` carry them.

    Parameters
    ----------
    tags
        Known tags, in listing order. Lead tag references with ids outside this
        list count toward ``totalLeads`` but get no entry of their own.
    leads
        Leads with decoded tag references.
    top_n
        Number of tags kept individually; the rest are summed into ``othersCount``.
    now
        Timestamp for ``lastUpdated``; defaults to the current UTC time.

    Returns
    -------
    TagStatisticsReport
        Tags with at least one lead, sorted by lead count descending (ties keep
        listing order). Percentages are relative to leads carrying any tag and
        are not normalized, so they can add up to more than 100.
    """
    counts, tagged_leads = count_leads_per_tag(leads)

    ranked = [(tag, counts.get(tag["id"], 0)) for tag in tags]
    ranked = [(tag, lead_count) for tag, lead_count in ranked if lead_count > 0]
    ranked.sort(key=lambda item: item[1], reverse=True)

    statistics = [
        TagStatistic(
            id=tag["id"],
            name=tag["name"],
            color=tag["color"],
            leadCount=lead_count,
            percentage=percentage_of(lead_count, tagged_leads),
        )
        for tag, lead_count in ranked
    ]

    top_n = max(top_n, 0)
    return TagStatisticsReport(
        totalTags=len(statistics),
        totalLeads=tagged_leads,
        tags=statistics[:top_n],
        othersCount=sum(stat["leadCount"] for stat in statistics[top_n:]),
        lastUpdated=utc_timestamp(now),
    )
