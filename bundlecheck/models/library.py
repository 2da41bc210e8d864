"""
Library and Catalog Models.

This module defines the inputs and output of title resolution.

INVARIANTS:
- CatalogEntry is a title scraped from a storefront page (untrusted, may lack an id)
- LibraryEntry is a title from the user's game library or wishlist
- MatchVerdict carries the matched LibraryEntry for every status except NOT_OWNED
- All models are frozen (immutable after construction)
"""

from dataclasses import dataclass
from enum import Enum


class MatchStatus(str, Enum):
    """Ownership classification of a catalog title."""

    OWNED = "owned"
    WISHLISTED = "wishlisted"
    BASE_OWNED = "base_owned"
    NOT_OWNED = "not_owned"


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """
    A title listed on a storefront bundle page.

    Attributes:
        title: Title as displayed on the page (original form, kept for display)
        platform_id: Store app id when the page links to one, otherwise None
    """

    title: str
    platform_id: int | None = None

    def __post_init__(self) -> None:
        if self.platform_id is not None and self.platform_id < 0:
            raise ValueError(f"platform_id must be non-negative, got {self.platform_id}")


@dataclass(frozen=True, slots=True)
class LibraryEntry:
    """
    A game in the user's library or wishlist.

    Attributes:
        title: Display name reported by the library service
        platform_id: Store app id
    """

    title: str
    platform_id: int

    def __post_init__(self) -> None:
        if self.platform_id < 0:
            raise ValueError(f"platform_id must be non-negative, got {self.platform_id}")


@dataclass(frozen=True, slots=True)
class MatchVerdict:
    """
    Result of resolving one CatalogEntry.

    Use the classmethod constructors rather than building directly.
    """

    status: MatchStatus
    match: LibraryEntry | None = None

    def __post_init__(self) -> None:
        if self.status is MatchStatus.NOT_OWNED:
            if self.match is not None:
                raise ValueError("not_owned verdict must not carry a match")
        elif self.match is None:
            raise ValueError(f"{self.status.value} verdict requires a matched entry")

    @classmethod
    def owned(cls, match: LibraryEntry) -> "MatchVerdict":
        return cls(MatchStatus.OWNED, match)

    @classmethod
    def wishlisted(cls, match: LibraryEntry) -> "MatchVerdict":
        return cls(MatchStatus.WISHLISTED, match)

    @classmethod
    def base_owned(cls, match: LibraryEntry) -> "MatchVerdict":
        return cls(MatchStatus.BASE_OWNED, match)

    @classmethod
    def not_owned(cls) -> "MatchVerdict":
        return cls(MatchStatus.NOT_OWNED)

    @property
    def is_match(self) -> bool:
        """True for every status except NOT_OWNED."""
        return self.status is not MatchStatus.NOT_OWNED
