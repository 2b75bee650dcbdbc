"""Lead resource wrapper."""

from __future__ import annotations

from typing import Optional

from .base import Resource
from .leads_types import LeadResponse, _decode_lead
from ..errors import RemoteFetchError

PAGE_SIZE = 50
DEFAULT_LEAD_LIMIT = 250


class Leads(Resource):
    """Lead operations."""

    def list(
        self,
        limit: int = DEFAULT_LEAD_LIMIT,
        *,
        timeout: Optional[int] = None,
    ) -> list[LeadResponse]:
        """Fetch leads with their tags embedded, one page at a time.

        Pages of ``PAGE_SIZE`` are requested from page 1 until a short page
        comes back or at least ``limit`` leads have been collected. The last
        page is kept whole, so the result can exceed ``limit`` by up to
        ``PAGE_SIZE - 1``.

        Parameters
        ----------
        limit
            Stop requesting pages once this many leads have been collected.
        timeout
            Request timeout in seconds, per page.

        Returns
        -------
        list[LeadResponse]
            Leads in API order.

        Raises
        ------
        RemoteFetchError
            If any page request fails. Leads from earlier pages are discarded.
        """
        leads: list[LeadResponse] = []
        page = 1
        has_more = True
        try:
            while has_more and len(leads) < limit:
                raw_leads = self._get_embedded(
                    "/leads",
                    "leads",
                    params={"with": "tags", "limit": PAGE_SIZE, "page": page},
                    timeout=timeout,
                )
                for raw in raw_leads:
                    lead = _decode_lead(raw)
                    if lead is not None:
                        leads.append(lead)
                self._logger.debug("Fetched lead page %s (%s leads)", page, len(raw_leads))
                has_more = len(raw_leads) == PAGE_SIZE
                page += 1
        except RemoteFetchError as exc:
            self._logger.error("Error fetching leads from Kommo: %s", exc)
            raise RemoteFetchError(f"Failed to fetch leads: {exc}") from exc
        return leads
