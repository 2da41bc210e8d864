"""
Badge Text Formatter.

THIS MODULE PRODUCES TEXT ONLY.

Turns a MatchVerdict into the label and tooltip shown on a bundle page
badge. Placement and styling belong to the page script.
"""

from dataclasses import dataclass

from bundlecheck.models.library import MatchStatus, MatchVerdict

BADGE_CLASS = "hsc-badge"

_LABELS: dict[MatchStatus, str] = {
    MatchStatus.OWNED: "✓ Owned",
    MatchStatus.BASE_OWNED: "⊕ Base Owned",
    MatchStatus.WISHLISTED: "★ Wishlisted",
    MatchStatus.NOT_OWNED: "✗ Not Owned",
}


@dataclass(frozen=True)
class BadgeText:
    label: str
    tooltip: str
    css_modifier: str


def _tooltip(verdict: MatchVerdict) -> str:
    match_title = verdict.match.title if verdict.match else None

    if verdict.status is MatchStatus.OWNED:
        return "In your Steam library" + (f' as "{match_title}"' if match_title else "")
    if verdict.status is MatchStatus.BASE_OWNED:
        base = f' "{match_title}"' if match_title else ""
        return f"You own the base game{base} — can't confirm if you have this specific DLC"
    if verdict.status is MatchStatus.WISHLISTED:
        return "On your Steam wishlist" + (f' as "{match_title}"' if match_title else "")
    return "Not found in your Steam library"


def describe_verdict(verdict: MatchVerdict) -> BadgeText:
    """Label, tooltip and CSS modifier class for a verdict."""
    return BadgeText(
        label=_LABELS[verdict.status],
        tooltip=_tooltip(verdict),
        css_modifier=f"{BADGE_CLASS}--{verdict.status.value}",
    )
