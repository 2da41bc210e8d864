import pytest

from bundlecheck.models.library import LibraryEntry


@pytest.fixture
def owned_games() -> list[LibraryEntry]:
    """A small Steam library."""
    return [
        LibraryEntry(title="Portal 2", platform_id=620),
        LibraryEntry(title="Half-Life 2: Episode One", platform_id=380),
        LibraryEntry(title="Just Cause 4", platform_id=517630),
        LibraryEntry(title="Tropico 4", platform_id=57690),
        LibraryEntry(title="The Witcher 3: Wild Hunt", platform_id=292030),
    ]


@pytest.fixture
def wishlist_games() -> list[LibraryEntry]:
    """A small Steam wishlist."""
    return [
        LibraryEntry(title="Hades", platform_id=1145360),
        LibraryEntry(title="Portal", platform_id=400),
    ]
