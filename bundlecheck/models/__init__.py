from bundlecheck.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
)
from bundlecheck.models.library import (
    CatalogEntry,
    LibraryEntry,
    MatchStatus,
    MatchVerdict,
)

__all__ = [
    "ApiResponse",
    "CatalogEntry",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "LibraryEntry",
    "MatchStatus",
    "MatchVerdict",
    "OutcomeType",
]
