"""
Ownership API endpoints.

Resolves bundle page titles against a library snapshot supplied by the
caller. Nothing is fetched or stored server-side.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from bundlecheck.config import settings
from bundlecheck.models.failure import ApiResponse, FailureKind, KnownError
from bundlecheck.models.library import CatalogEntry, LibraryEntry, MatchStatus
from bundlecheck.services.badge_formatter import describe_verdict
from bundlecheck.services.library_scan import scan_catalog

router = APIRouter(prefix="/ownership", tags=["ownership"])


class CatalogItem(BaseModel):
    """A title scraped from the bundle page."""

    title: str = Field(..., min_length=1, examples=["Just Cause 4: Neon Racer Pack"])
    platform_id: int | None = Field(
        default=None,
        ge=0,
        description="Store app id if the page links to one",
    )


class LibraryItem(BaseModel):
    """A game from the user's library or wishlist."""

    title: str = Field(..., min_length=1, examples=["Just Cause 4"])
    platform_id: int = Field(..., ge=0)


class ResolveRequest(BaseModel):
    """Request model for resolving a page of titles."""

    catalog: list[CatalogItem] = Field(
        ...,
        description="Titles found on the page, in page order",
    )
    owned: list[LibraryItem] = Field(default_factory=list)
    wishlisted: list[LibraryItem] = Field(default_factory=list)


class ResolvedTitle(BaseModel):
    """Verdict and badge text for one catalog title."""

    title: str
    platform_id: int | None = None
    status: MatchStatus
    match: LibraryItem | None = Field(
        default=None,
        description="Library entry the title matched (absent for not_owned)",
    )
    label: str
    tooltip: str


class ResolveData(BaseModel):
    """Response payload for a resolved page."""

    results: list[ResolvedTitle] = Field(default_factory=list)
    matched: int = 0
    counts: dict[str, int] = Field(
        default_factory=dict,
        description="Number of titles per status",
    )


@router.post("/resolve", response_model=ApiResponse[ResolveData])
def resolve_titles(request: ResolveRequest) -> ApiResponse[ResolveData]:
    """
    Resolve each catalog title to owned / wishlisted / base_owned / not_owned.

    Owned and wishlisted lists are treated as one consistent snapshot
    for the whole request.
    """
    if len(request.catalog) > settings.max_catalog_size:
        raise KnownError(
            kind=FailureKind.CATALOG_TOO_LARGE,
            message="Too many titles in one request.",
            detail=f"{len(request.catalog)} titles, limit is {settings.max_catalog_size}",
            suggestion="Split the page into smaller batches.",
        )

    entries = [CatalogEntry(title=item.title, platform_id=item.platform_id) for item in request.catalog]
    owned = [LibraryEntry(title=item.title, platform_id=item.platform_id) for item in request.owned]
    wishlisted = [
        LibraryEntry(title=item.title, platform_id=item.platform_id) for item in request.wishlisted
    ]

    report = scan_catalog(entries, owned, wishlisted)

    results: list[ResolvedTitle] = []
    for result in report.results:
        badge = describe_verdict(result.verdict)
        match = result.verdict.match
        results.append(
            ResolvedTitle(
                title=result.entry.title,
                platform_id=result.entry.platform_id,
                status=result.verdict.status,
                match=LibraryItem(title=match.title, platform_id=match.platform_id) if match else None,
                label=badge.label,
                tooltip=badge.tooltip,
            )
        )

    return ApiResponse.success(
        ResolveData(
            results=results,
            matched=report.matched_count,
            counts={status.value: count for status, count in report.counts.items()},
        )
    )
