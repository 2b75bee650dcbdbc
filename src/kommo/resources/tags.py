"""Lead tag resource wrapper."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, cast

from .base import Resource
from .leads import DEFAULT_LEAD_LIMIT, Leads
from .tags_types import TagResponse, TagStatisticsReport
from ._common_types import _decode_tags
from ..errors import RemoteFetchError
from ..tools.statistics import DEFAULT_TOP_N, build_tag_statistics


class Tags(Resource):
    """Lead tag operations."""

    leads: Leads

    def list(self, *, timeout: Optional[int] = None) -> list[TagResponse]:
        """Fetch all lead tags.

        Parameters
        ----------
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[TagResponse]
            Tags in API order; empty when the account has none.

        Raises
        ------
        RemoteFetchError
            If the request fails or times out.
        """
        try:
            raw_tags = self._get_embedded("/leads/tags", "tags", timeout=timeout)
        except RemoteFetchError as exc:
            self._logger.error("Error fetching tags from Kommo: %s", exc)
            raise RemoteFetchError(f"Failed to fetch tags: {exc}") from exc
        return cast(list[TagResponse], _decode_tags(raw_tags))

    def search(self, query: str, *, timeout: Optional[int] = None) -> list[TagResponse]:
        """Return tags whose name contains ``query``, ignoring case.

        The tag list is fetched fresh on every call. An empty query matches
        every tag.
        """
        needle = query.casefold()
        return [tag for tag in self.list(timeout=timeout) if needle in tag["name"].casefold()]

    def statistics(
        self,
        *,
        top_n: int = DEFAULT_TOP_N,
        lead_limit: int = DEFAULT_LEAD_LIMIT,
        timeout: Optional[int] = None,
    ) -> TagStatisticsReport:
        """Count leads per tag and rank the tags.

        Tags and leads are fetched concurrently; if either fetch fails its
        ``RemoteFetchError`` is raised and the other result is dropped. When
        both fail the tag error wins.

        Parameters
        ----------
        top_n
            Number of tags reported individually; the rest go to ``othersCount``.
        lead_limit
            Lead limit forwarded to :meth:`Leads.list`.
        timeout
            Request timeout in seconds, per request.

        Returns
        -------
        TagStatisticsReport
            Ranked tags with lead counts and percentages.
        """
        with ThreadPoolExecutor(max_workers=2) as executor:
            tags_future = executor.submit(self.list, timeout=timeout)
            leads_future = executor.submit(self.leads.list, lead_limit, timeout=timeout)
            tags = tags_future.result()
            leads = leads_future.result()

        report = build_tag_statistics(tags, leads, top_n=top_n)
        self._logger.info(
            "Tag statistics: %s tags across %s tagged leads (%s leads fetched)",
            report["totalTags"],
            report["totalLeads"],
            len(leads),
        )
        return report
