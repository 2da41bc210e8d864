from bundlecheck.parsers.catalog_page import parse_catalog_records, parse_platform_id
from bundlecheck.parsers.steam_library import (
    parse_owned_games,
    parse_wishlist_page,
    parse_wishlist_pages,
)

__all__ = [
    "parse_catalog_records",
    "parse_owned_games",
    "parse_platform_id",
    "parse_wishlist_page",
    "parse_wishlist_pages",
]
