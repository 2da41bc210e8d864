"""
Ownership Resolution Service.

Decides whether a storefront catalog title is already in the user's
library, on their wishlist, covered by an owned base game, or not owned.

Strategies run in fixed precedence; the first one returning a verdict wins:
1. Platform id      - exact app id against owned, then wishlisted
2. Owned by name    - normalized / edition-stripped equality, then fuzzy
3. Wishlist by name - same procedure against wishlisted
4. Base game        - owned title is a prefix of a DLC title, or the
                      "<game> dlc <name>" base name matches an owned title
5. Not owned

INVARIANTS:
1. Resolution is pure: inputs are never mutated, no state is kept between calls
2. Identical inputs always produce identical verdicts
3. When several library entries could match, the first in list order is reported
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bundlecheck.models.library import CatalogEntry, LibraryEntry, MatchVerdict
from bundlecheck.services.title_normalizer import (
    extract_base_name,
    is_base_suffix,
    normalize_title,
    strip_edition,
)
from bundlecheck.services.title_similarity import is_fuzzy_match

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Inputs of one resolution call plus the candidate's derived title forms."""

    candidate: CatalogEntry
    owned: Sequence[LibraryEntry]
    wishlisted: Sequence[LibraryEntry]
    normalized: str
    stripped: str

    @classmethod
    def build(
        cls,
        candidate: CatalogEntry,
        owned: Sequence[LibraryEntry],
        wishlisted: Sequence[LibraryEntry],
    ) -> "ResolutionContext":
        normalized = normalize_title(candidate.title)
        return cls(
            candidate=candidate,
            owned=owned,
            wishlisted=wishlisted,
            normalized=normalized,
            stripped=strip_edition(normalized),
        )


Strategy = Callable[[ResolutionContext], MatchVerdict | None]


def _find_by_platform_id(entries: Sequence[LibraryEntry], platform_id: int) -> LibraryEntry | None:
    for entry in entries:
        if entry.platform_id == platform_id:
            return entry
    return None


def _find_by_name(
    entries: Sequence[LibraryEntry], normalized: str, stripped: str
) -> LibraryEntry | None:
    """First entry whose title equals or fuzzy-matches, checked in that order per entry."""
    for entry in entries:
        entry_normalized = normalize_title(entry.title)
        entry_stripped = strip_edition(entry_normalized)

        # Empty forms (all punctuation, all edition words) never count as equal
        if normalized and normalized == entry_normalized:
            return entry
        if stripped and stripped == entry_stripped:
            return entry
        if is_fuzzy_match(normalized, entry_normalized):
            return entry
        if is_fuzzy_match(stripped, entry_stripped):
            return entry
    return None


def match_platform_id(ctx: ResolutionContext) -> MatchVerdict | None:
    """Exact app id match: owned first, then wishlisted."""
    platform_id = ctx.candidate.platform_id
    if platform_id is None:
        return None

    entry = _find_by_platform_id(ctx.owned, platform_id)
    if entry is not None:
        return MatchVerdict.owned(entry)

    entry = _find_by_platform_id(ctx.wishlisted, platform_id)
    if entry is not None:
        return MatchVerdict.wishlisted(entry)
    return None


def match_owned_name(ctx: ResolutionContext) -> MatchVerdict | None:
    entry = _find_by_name(ctx.owned, ctx.normalized, ctx.stripped)
    return MatchVerdict.owned(entry) if entry is not None else None


def match_wishlisted_name(ctx: ResolutionContext) -> MatchVerdict | None:
    entry = _find_by_name(ctx.wishlisted, ctx.normalized, ctx.stripped)
    return MatchVerdict.wishlisted(entry) if entry is not None else None


def match_base_game(ctx: ResolutionContext) -> MatchVerdict | None:
    """
    Infer DLC ownership from an owned base game.

    "just cause 4 neon racer pack" is covered by owned "just cause 4".
    "limbo hd" is NOT covered by owned "limbo": a suffix starting with an
    edition/release marker denotes a separate product, and that owned
    entry is skipped entirely.
    """
    base_name = extract_base_name(ctx.normalized)

    for entry in ctx.owned:
        entry_normalized = normalize_title(entry.title)

        if entry_normalized and ctx.normalized.startswith(entry_normalized + " "):
            remainder = ctx.normalized[len(entry_normalized) + 1 :]
            if is_base_suffix(remainder):
                continue
            return MatchVerdict.base_owned(entry)

        if base_name and (base_name == entry_normalized or is_fuzzy_match(base_name, entry_normalized)):
            return MatchVerdict.base_owned(entry)

    return None


class OwnershipResolver:
    """
    Resolves CatalogEntry -> MatchVerdict against a library snapshot.

    Holds no state; `strategies` is the fixed precedence order.
    A single instance may be shared across threads.
    """

    strategies: tuple[Strategy, ...] = (
        match_platform_id,
        match_owned_name,
        match_wishlisted_name,
        match_base_game,
    )

    def resolve(
        self,
        candidate: CatalogEntry,
        owned: Sequence[LibraryEntry],
        wishlisted: Sequence[LibraryEntry],
    ) -> MatchVerdict:
        """
        Classify one catalog title.

        Args:
            candidate: Title (and optional app id) scraped from the storefront
            owned: Games in the user's library
            wishlisted: Games on the user's wishlist

        Returns:
            The verdict of the first strategy that matches, else not_owned
        """
        ctx = ResolutionContext.build(candidate, owned, wishlisted)

        for strategy in self.strategies:
            verdict = strategy(ctx)
            if verdict is not None:
                logger.debug(
                    "%r -> %s via %s (%r)",
                    candidate.title,
                    verdict.status.value,
                    strategy.__name__,
                    verdict.match.title if verdict.match else None,
                )
                return verdict

        logger.debug("%r -> not_owned (normalized: %r)", candidate.title, ctx.normalized)
        return MatchVerdict.not_owned()


_default_resolver = OwnershipResolver()


def resolve(
    candidate: CatalogEntry,
    owned: Sequence[LibraryEntry],
    wishlisted: Sequence[LibraryEntry],
) -> MatchVerdict:
    """Resolve with the default strategy order."""
    return _default_resolver.resolve(candidate, owned, wishlisted)
