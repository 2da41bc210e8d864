"""
Parsers for library service payloads.

Supports:
- Owned games response: {"response": {"games": [{"appid": 620, "name": "Portal 2"}]}}
- Wishlist data pages: {"620": {"name": "Portal 2", ...}, ...}, one page per request

Fetching is the caller's job; these functions only read documents
that were already retrieved.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bundlecheck.models.failure import FailureKind, KnownError
from bundlecheck.models.library import LibraryEntry

logger = logging.getLogger(__name__)


def _coerce_app_id(value: Any) -> int | None:
    """Accept non-negative ints and digit strings; reject everything else (bools included)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _entry_from(app_id: Any, name: Any) -> LibraryEntry | None:
    platform_id = _coerce_app_id(app_id)
    if platform_id is None or not isinstance(name, str) or not name.strip():
        logger.warning("Skipping library item with app id %r and name %r", app_id, name)
        return None
    return LibraryEntry(title=name.strip(), platform_id=platform_id)


def parse_owned_games(payload: Any) -> list[LibraryEntry]:
    """
    Parse the owned games API response.

    A response without a games list (new or private account) yields an
    empty library. Malformed items are skipped.

    Raises:
        KnownError: If the payload is not a JSON object or games is not a list
    """
    if not isinstance(payload, Mapping):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Owned games payload must be a JSON object.",
            detail=f"Got {type(payload).__name__}",
        )

    response = payload.get("response") or {}
    games = response.get("games") if isinstance(response, Mapping) else None
    if games is None:
        return []
    if not isinstance(games, list):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Owned games payload has an invalid games list.",
            detail=f"Expected list, got {type(games).__name__}",
        )

    entries: list[LibraryEntry] = []
    for game in games:
        if not isinstance(game, Mapping):
            logger.warning("Skipping non-object owned game item: %r", game)
            continue
        entry = _entry_from(game.get("appid"), game.get("name"))
        if entry is not None:
            entries.append(entry)
    return entries


def parse_wishlist_page(text: str) -> list[LibraryEntry]:
    """
    Parse one wishlist data page.

    The store answers with HTML, null, or an empty list or object when
    the wishlist is private or the page is past the end. All of these
    yield no entries.

    Raises:
        KnownError: If the page is neither of those nor a JSON object
    """
    stripped = text.strip() if text else ""
    if not stripped or stripped.startswith("<"):
        return []

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Wishlist page is not valid JSON.",
            detail=str(e),
        ) from e

    if data is None or data == [] or data == {}:
        return []
    if not isinstance(data, dict):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Wishlist page must be a JSON object keyed by app id.",
            detail=f"Got {type(data).__name__}",
        )

    entries: list[LibraryEntry] = []
    for app_id, info in data.items():
        name = info.get("name") if isinstance(info, Mapping) else None
        entry = _entry_from(app_id, name)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_wishlist_pages(pages: Iterable[str]) -> list[LibraryEntry]:
    """
    Parse consecutive wishlist pages, stopping at the first empty one.

    Pages are consumed lazily so a generator that fetches on demand
    is not asked for more pages than needed.
    """
    entries: list[LibraryEntry] = []
    for page_number, text in enumerate(pages):
        page_entries = parse_wishlist_page(text)
        if not page_entries:
            logger.debug("Wishlist ended at page %d", page_number)
            break
        entries.extend(page_entries)
    return entries
