"""CLI demo that prints a tag statistics report for a Kommo account.

Run with the virtual environment activated::

    KOMMO_DOMAIN=example.kommo.com KOMMO_API_KEY=... python examples/demo_tag_statistics.py [search]

With a search argument, matching tags are listed before the report.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from kommo import KommoError, create_client

logging.basicConfig(level=logging.INFO)


def main() -> int:
    try:
        kommo = create_client()
        if len(sys.argv) > 1:
            matches = kommo.tags.search(sys.argv[1])
            print(f"{len(matches)} tags match {sys.argv[1]!r}:")
            for tag in matches:
                print(f"  [{tag['id']}] {tag['name']}")
            print()

        report = kommo.tags.statistics()
    except KommoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{report['totalTags']} tags on {report['totalLeads']} tagged leads (as of {report['lastUpdated']})")
    for rank, tag in enumerate(report["tags"], start=1):
        print(f"{rank:>3}. {tag['name']:<30} {tag['leadCount']:>6} leads  {tag['percentage']:>3}%")
    if report["othersCount"]:
        print(f"     {'(others)':<30} {report['othersCount']:>6} leads")
    return 0


if __name__ == "__main__":
    sys.exit(main())
