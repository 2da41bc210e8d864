"""
Title Normalization.

Reduces storefront and library titles to a comparable form.

Pipeline (order matters):
1. normalize_title: case fold, drop ™/®/©, fold ":" and "-" separators,
   unify apostrophes, drop everything but [a-z0-9 '], collapse whitespace
2. strip_edition: remove edition/variant marker words ("deluxe", "goty", ...)
3. extract_base_name: recover "just cause 3" from "just cause 3 dlc sky fortress"

All functions are total: any string in, a string (or None) out.
"""

import re

# Marketing words that denote a repackaged version of the same game.
# "Game X Deluxe Edition" and "Game X" are the same product for ownership.
EDITION_MARKERS: frozenset[str] = frozenset(
    {
        "edition",
        "deluxe",
        "goty",
        "game of the year",
        "complete",
        "definitive",
        "remastered",
        "enhanced",
        "reloaded",
        "ultimate",
        "gold",
        "premium",
        "platinum",
        "standard",
        "special",
        "directors cut",
        "collection",
        "anthology",
        "bundle",
        "pack",
    }
)

# Words that, directly after an owned title, mark a separate release of it
# rather than add-on content: "skyrim special edition" is not a Skyrim DLC.
BASE_SUFFIX_MARKERS: frozenset[str] = EDITION_MARKERS | frozenset(
    {"remaster", "classic", "hd", "4k"}
)


def _alternation(phrases: frozenset[str]) -> str:
    # Longest first so "game of the year" wins over any shorter overlap
    ordered = sorted(phrases, key=lambda p: (-len(p), p))
    return "|".join(re.escape(p) for p in ordered)


_TRADEMARK_PATTERN = re.compile(r"[™®©]")
_COLON_PATTERN = re.compile(r":\s*")
_HYPHEN_PATTERN = re.compile(r"\s*-\s*")
_APOSTROPHE_PATTERN = re.compile(r"[‘’']")
_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9\s']")
_WHITESPACE_PATTERN = re.compile(r"\s+")

_EDITION_PATTERN = re.compile(rf"\b(?:{_alternation(EDITION_MARKERS)})\b", re.IGNORECASE)
_BASE_SUFFIX_PATTERN = re.compile(
    rf"^(?:{_alternation(BASE_SUFFIX_MARKERS)})(?:\s|$)", re.IGNORECASE
)

# "just cause 3 dlc sky fortress" -> "just cause 3"
_DLC_PATTERN = re.compile(r"^(.+?)\s+dlc\b")


def normalize_title(title: str) -> str:
    """
    Canonicalize a raw title for comparison.

    Examples:
        "Half-Life 2: Episode One" -> "half life 2 episode one"
        "Assassin’s Creed®"        -> "assassin's creed"
    """
    name = title.lower()
    name = _TRADEMARK_PATTERN.sub("", name)
    name = _COLON_PATTERN.sub(" ", name)
    name = _HYPHEN_PATTERN.sub(" ", name)
    name = _APOSTROPHE_PATTERN.sub("'", name)
    name = _DISALLOWED_PATTERN.sub("", name)
    return _WHITESPACE_PATTERN.sub(" ", name).strip()


def strip_edition(normalized: str) -> str:
    """
    Remove edition/variant marker words from a normalized title.

    Applied until nothing changes, so removing one marker can never
    leave another behind ("game of the edition year" -> "").
    """
    current = normalized
    while True:
        stripped = _WHITESPACE_PATTERN.sub(" ", _EDITION_PATTERN.sub("", current)).strip()
        if stripped == current:
            return stripped
        current = stripped


def is_base_suffix(remainder: str) -> bool:
    """True if the text following an owned title starts with an edition/release marker."""
    return _BASE_SUFFIX_PATTERN.match(remainder) is not None


def extract_base_name(normalized: str) -> str | None:
    """
    Try to recover the base game from a DLC title.

    Only the explicit "<game> dlc <name>" form is recognised. Colon-style
    DLC titles ("just cause 4 neon racer pack") are left to the resolver,
    which checks owned titles as prefixes.
    """
    match = _DLC_PATTERN.match(normalized)
    if match:
        return match.group(1).strip()
    return None
