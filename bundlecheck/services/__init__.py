"""
BundleCheck services.

Title matching and ownership resolution for storefront bundle pages.
"""

from bundlecheck.services.badge_formatter import BadgeText, describe_verdict
from bundlecheck.services.library_scan import ScanReport, ScanResult, scan_catalog
from bundlecheck.services.ownership_resolver import OwnershipResolver, resolve
from bundlecheck.services.title_normalizer import (
    BASE_SUFFIX_MARKERS,
    EDITION_MARKERS,
    extract_base_name,
    normalize_title,
    strip_edition,
)
from bundlecheck.services.title_similarity import is_fuzzy_match, similarity

__all__ = [
    # Title normalization
    "BASE_SUFFIX_MARKERS",
    "EDITION_MARKERS",
    "extract_base_name",
    "normalize_title",
    "strip_edition",
    # Similarity
    "is_fuzzy_match",
    "similarity",
    # Resolution
    "OwnershipResolver",
    "resolve",
    "ScanReport",
    "ScanResult",
    "scan_catalog",
    # Output text
    "BadgeText",
    "describe_verdict",
]
