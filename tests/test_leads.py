import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from kommo.errors import RemoteFetchError  # noqa: E402
from kommo.resources.leads import PAGE_SIZE, Leads  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


def make_page(start, count, tag_ids=()):
    leads = []
    for lead_id in range(start, start + count):
        lead = {"id": lead_id, "name": f"Lead {lead_id}"}
        if tag_ids:
            lead["_embedded"] = {"tags": [{"id": tag_id, "name": f"T{tag_id}"} for tag_id in tag_ids]}
        leads.append(lead)
    return {"_embedded": {"leads": leads}}


class PagedClient:
    """Serves one response per page request; exceptions in ``pages`` are raised."""

    def __init__(self, pages) -> None:
        self._logger = logging.getLogger("kommo.tests")
        self.pages = list(pages)
        self.request_calls: list[tuple[str, str, object, object, object]] = []

    def request(self, method, path, params=None, json=None, timeout=None):
        self.request_calls.append((method, path, params, json, timeout))
        page = self.pages[len(self.request_calls) - 1]
        if isinstance(page, Exception):
            raise page
        return page


class LeadsTests(unittest.TestCase):
    def test_page_size(self):
        self.assertEqual(PAGE_SIZE, 50)

    def test_request_params(self):
        client = PagedClient([make_page(1, 3)])
        Leads(client).list(timeout=9)  # type: ignore[arg-type]
        method, path, params, _json, timeout = client.request_calls[0]
        self.assertEqual(method, "GET")
        self.assertEqual(path, "/leads")
        self.assertEqual(params, {"with": "tags", "limit": 50, "page": 1})
        self.assertEqual(timeout, 9)

    def test_stops_on_short_page(self):
        client = PagedClient([make_page(1, 50), make_page(51, 50), make_page(101, 20)])
        leads = Leads(client).list(250)  # type: ignore[arg-type]
        self.assertEqual(len(leads), 120)
        self.assertEqual(len(client.request_calls), 3)
        self.assertEqual([call[2]["page"] for call in client.request_calls], [1, 2, 3])
        self.assertEqual([lead["id"] for lead in leads], list(range(1, 121)))

    def test_limit_reached_keeps_whole_page(self):
        client = PagedClient([make_page(1, 50), make_page(51, 50)])
        leads = Leads(client).list(10)  # type: ignore[arg-type]
        self.assertEqual(len(leads), 50)
        self.assertEqual(len(client.request_calls), 1)

    def test_default_limit_stops_after_five_full_pages(self):
        pages = [make_page(1 + index * 50, 50) for index in range(6)]
        client = PagedClient(pages)
        leads = Leads(client).list()  # type: ignore[arg-type]
        self.assertEqual(len(leads), 250)
        self.assertEqual(len(client.request_calls), 5)

    def test_limit_exceeded_by_partial_overshoot(self):
        client = PagedClient([make_page(1, 50), make_page(51, 50), make_page(101, 50)])
        leads = Leads(client).list(60)  # type: ignore[arg-type]
        self.assertEqual(len(leads), 100)
        self.assertEqual(len(client.request_calls), 2)

    def test_empty_response(self):
        client = PagedClient([None])
        self.assertEqual(Leads(client).list(), [])  # type: ignore[arg-type]
        self.assertEqual(len(client.request_calls), 1)

    def test_missing_leads_key(self):
        client = PagedClient([{"_embedded": {}}])
        self.assertEqual(Leads(client).list(), [])  # type: ignore[arg-type]

    def test_embedded_tags_decoded(self):
        client = PagedClient([make_page(1, 2, tag_ids=(7,)), ])
        leads = Leads(client).list()  # type: ignore[arg-type]
        self.assertEqual(leads[0]["tags"], [{"id": 7, "name": "T7", "color": None}])

    def test_leads_without_tags_get_empty_list(self):
        client = PagedClient([make_page(1, 2)])
        leads = Leads(client).list()  # type: ignore[arg-type]
        self.assertEqual([lead["tags"] for lead in leads], [[], []])

    def test_page_failure_discards_results(self):
        client = PagedClient([make_page(1, 50), RemoteFetchError("GET /leads failed: 500")])
        with self.assertRaises(RemoteFetchError) as ctx:
            Leads(client).list()  # type: ignore[arg-type]
        self.assertEqual(str(ctx.exception), "Failed to fetch leads: GET /leads failed: 500")
        self.assertIsInstance(ctx.exception.__cause__, RemoteFetchError)
        self.assertEqual(len(client.request_calls), 2)

    def test_short_raw_page_counts_malformed_entries(self):
        page = make_page(1, 49)
        page["_embedded"]["leads"].append({"name": "missing id"})
        client = PagedClient([page, make_page(50, 5)])
        leads = Leads(client).list()  # type: ignore[arg-type]
        self.assertEqual(len(client.request_calls), 2)
        self.assertEqual(len(leads), 54)


if __name__ == "__main__":
    unittest.main()
