"""
Catalog scan service.

Resolves every title found on a bundle page against one library
snapshot and summarises the result for the page badges and the popup.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from bundlecheck.models.library import CatalogEntry, LibraryEntry, MatchStatus, MatchVerdict
from bundlecheck.services.ownership_resolver import OwnershipResolver
from bundlecheck.services.title_normalizer import normalize_title

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Verdict for a single catalog entry."""

    entry: CatalogEntry
    verdict: MatchVerdict


@dataclass
class ScanReport:
    """Verdicts for a whole catalog page, in page order."""

    results: list[ScanResult] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        """Titles resolved to anything other than not_owned."""
        return sum(1 for result in self.results if result.verdict.is_match)

    @property
    def counts(self) -> dict[MatchStatus, int]:
        """Number of titles per status (every status present, zero if unused)."""
        tally = Counter(result.verdict.status for result in self.results)
        return {status: tally.get(status, 0) for status in MatchStatus}


def scan_catalog(
    entries: Sequence[CatalogEntry],
    owned: Sequence[LibraryEntry],
    wishlisted: Sequence[LibraryEntry],
    resolver: OwnershipResolver | None = None,
) -> ScanReport:
    """
    Resolve each catalog entry against the same library snapshot.

    Args:
        entries: Titles scraped from the page, in page order
        owned: Games in the user's library
        wishlisted: Games on the user's wishlist
        resolver: Resolver to use (defaults to the standard strategy order)

    Returns:
        ScanReport with one result per entry
    """
    resolver = resolver or OwnershipResolver()
    report = ScanReport()

    for entry in entries:
        verdict = resolver.resolve(entry, owned, wishlisted)
        report.results.append(ScanResult(entry=entry, verdict=verdict))

        if verdict.match is not None:
            logger.info("%r -> %s as %r", entry.title, verdict.status.value, verdict.match.title)
        else:
            logger.debug("%r not owned (normalized: %r)", entry.title, normalize_title(entry.title))

    if report.results:
        logger.info("Scanned %d titles, %d matched", len(report.results), report.matched_count)

    return report
