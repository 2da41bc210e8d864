"""
Check a saved bundle page against a saved library snapshot.

Snapshot file layout (JSON):
    {
        "catalog": [{"title": "...", "platform_id": 620, "url": "..."}],
        "owned": {"response": {"games": [{"appid": 620, "name": "Portal 2"}]}},
        "wishlist_pages": ["{\\"400\\": {\\"name\\": \\"Portal\\"}}", "[]"]
    }

Usage:
    python -m bundlecheck.jobs.check_bundle snapshot.json [--only-matched]
"""

import argparse
import json
import logging
from pathlib import Path

from bundlecheck.config import settings
from bundlecheck.models.failure import FailureKind, KnownError
from bundlecheck.models.library import CatalogEntry, LibraryEntry
from bundlecheck.parsers.catalog_page import parse_catalog_records
from bundlecheck.parsers.steam_library import parse_owned_games, parse_wishlist_pages
from bundlecheck.services.badge_formatter import describe_verdict
from bundlecheck.services.library_scan import ScanReport, scan_catalog

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> tuple[list[CatalogEntry], list[LibraryEntry], list[LibraryEntry]]:
    """
    Read catalog and library data from a snapshot file.

    Returns:
        (catalog entries, owned games, wishlisted games)

    Raises:
        OSError: If the file cannot be read
        KnownError: If the file is not a valid snapshot
    """
    try:
        snapshot = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Snapshot {path} is not valid JSON.",
            detail=str(e),
        ) from e

    if not isinstance(snapshot, dict) or not isinstance(snapshot.get("catalog"), list):
        raise KnownError(
            kind=FailureKind.MISSING_REQUIRED,
            message=f"Snapshot {path} has no catalog list.",
            suggestion='Add a "catalog" array of {"title": ...} records.',
        )

    records = [r for r in snapshot["catalog"] if isinstance(r, dict)]
    entries = parse_catalog_records(records)
    owned = parse_owned_games(snapshot.get("owned") or {})
    pages = [p for p in snapshot.get("wishlist_pages") or [] if isinstance(p, str)]
    wishlisted = parse_wishlist_pages(pages)

    logger.info("Library: %d owned, %d wishlisted", len(owned), len(wishlisted))
    return entries, owned, wishlisted


def format_report(report: ScanReport, only_matched: bool = False) -> list[str]:
    """One tab-separated line per title: label, title and, when matched, the library title."""
    lines: list[str] = []
    for result in report.results:
        if only_matched and not result.verdict.is_match:
            continue
        columns = [describe_verdict(result.verdict).label, result.entry.title]
        if result.verdict.match is not None:
            columns.append(result.verdict.match.title)
        lines.append("\t".join(columns))
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Label bundle titles as owned, wishlisted or not owned")
    parser.add_argument(
        "snapshot",
        type=Path,
        help="Path to snapshot JSON file",
    )
    parser.add_argument(
        "--only-matched",
        action="store_true",
        help="Print only titles found in the library or wishlist",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        entries, owned, wishlisted = load_snapshot(args.snapshot)
    except KnownError as e:
        logger.error("%s %s", e.message, e.detail or "")
        return 1
    except OSError as e:
        logger.error("Cannot read snapshot %s: %s", args.snapshot, e)
        return 1

    report = scan_catalog(entries, owned, wishlisted)
    for line in format_report(report, only_matched=args.only_matched):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
