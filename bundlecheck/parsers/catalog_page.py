"""
Parser for titles scraped from a bundle page.

Each record is a mapping produced by the page script:
    {"title": "Portal 2", "platform_id": 620}
    {"title": "Portal 2", "url": "https://store.steampowered.com/app/620/"}
    {"title": "Some DLC"}
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from bundlecheck.config import MIN_TITLE_LENGTH
from bundlecheck.models.library import CatalogEntry

logger = logging.getLogger(__name__)

# Store links look like ".../app/620/Portal_2/"
STORE_APP_PATTERN = re.compile(r"/app/(\d+)")


def parse_platform_id(url: str | None) -> int | None:
    """Extract the app id from a store URL, or None if the URL has none."""
    if not url:
        return None
    match = STORE_APP_PATTERN.search(url)
    if match:
        return int(match.group(1))
    return None


def _explicit_platform_id(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    logger.warning("Ignoring unparseable platform id %r", value)
    return None


def parse_catalog_records(records: Iterable[Mapping[str, Any]]) -> list[CatalogEntry]:
    """
    Build catalog entries from scraped records.

    - Titles are trimmed; titles shorter than MIN_TITLE_LENGTH are skipped
    - Repeated titles keep their first occurrence (pages list items in several widgets)
    - An explicit platform_id wins over one parsed from url

    Returns:
        Catalog entries in page order
    """
    entries: list[CatalogEntry] = []
    seen: set[str] = set()

    for record in records:
        title = record.get("title")
        if not isinstance(title, str):
            logger.warning("Skipping catalog record without a title: %r", record)
            continue

        title = title.strip()
        if len(title) < MIN_TITLE_LENGTH or title in seen:
            continue
        seen.add(title)

        platform_id = _explicit_platform_id(record.get("platform_id"))
        if platform_id is None:
            platform_id = parse_platform_id(record.get("url"))

        entries.append(CatalogEntry(title=title, platform_id=platform_id))

    return entries
