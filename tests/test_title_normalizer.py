import pytest

from bundlecheck.services.title_normalizer import (
    BASE_SUFFIX_MARKERS,
    EDITION_MARKERS,
    extract_base_name,
    is_base_suffix,
    normalize_title,
    strip_edition,
)


class TestNormalizeTitle:
    def test_folds_colon_and_hyphen(self) -> None:
        assert normalize_title("Half-Life 2: Episode One") == "half life 2 episode one"

    def test_removes_trademark_symbols(self) -> None:
        assert normalize_title("It Takes Two™") == "it takes two"
        assert normalize_title("Tom Clancy's Rainbow Six® Siege") == "tom clancy's rainbow six siege"
        assert normalize_title("Game © 2020") == "game 2020"

    def test_unifies_curly_apostrophes(self) -> None:
        assert normalize_title("Assassin’s Creed") == "assassin's creed"
        assert normalize_title("Assassin's Creed") == "assassin's creed"

    def test_drops_other_punctuation(self) -> None:
        assert normalize_title("DOOM (2016)") == "doom 2016"
        assert normalize_title("Hello, World!") == "hello world"

    def test_spaced_hyphen_becomes_single_space(self) -> None:
        title = "The Witcher® 3: Wild Hunt - Game of the Year Edition"
        assert normalize_title(title) == "the witcher 3 wild hunt game of the year edition"

    def test_collapses_and_trims_whitespace(self) -> None:
        assert normalize_title("  Dark   Souls\tIII  ") == "dark souls iii"

    def test_non_latin_characters_are_dropped(self) -> None:
        assert normalize_title("Ökö Game") == "k game"

    def test_empty_and_punctuation_only(self) -> None:
        assert normalize_title("") == ""
        assert normalize_title("!!! ???") == ""

    @pytest.mark.parametrize(
        "title",
        [
            "Half-Life 2: Episode One",
            "The Witcher® 3: Wild Hunt - Game of the Year Edition",
            "Assassin’s Creed®",
            "  -- : -- ",
            "Ori and the Blind Forest: Definitive Edition",
        ],
    )
    def test_idempotent(self, title: str) -> None:
        once = normalize_title(title)
        assert normalize_title(once) == once


class TestStripEdition:
    def test_removes_trailing_edition_words(self) -> None:
        assert strip_edition("just cause 4 reloaded") == "just cause 4"
        assert strip_edition("ori and the blind forest definitive edition") == "ori and the blind forest"

    def test_removes_multi_word_marker(self) -> None:
        assert strip_edition("the witcher 3 wild hunt game of the year edition") == "the witcher 3 wild hunt"

    def test_whole_words_only(self) -> None:
        assert strip_edition("goldeneye 007") == "goldeneye 007"
        assert strip_edition("packer simulator") == "packer simulator"

    def test_case_insensitive(self) -> None:
        assert strip_edition("Game Deluxe") == "Game"

    def test_all_markers_leave_empty(self) -> None:
        assert strip_edition("deluxe edition") == ""

    def test_removal_exposing_another_marker(self) -> None:
        """Removing "edition" joins "game of the year", which is removed too."""
        assert strip_edition("game of the edition year") == ""

    @pytest.mark.parametrize(
        "normalized",
        [
            "just cause 4 reloaded",
            "game of the edition year",
            "portal 2",
            "",
            "gold gold pack collection",
        ],
    )
    def test_idempotent(self, normalized: str) -> None:
        once = strip_edition(normalized)
        assert strip_edition(once) == once


class TestMarkerVocabulary:
    def test_base_suffix_markers_extend_edition_markers(self) -> None:
        assert EDITION_MARKERS < BASE_SUFFIX_MARKERS
        assert {"remaster", "classic", "hd", "4k"} <= BASE_SUFFIX_MARKERS

    def test_every_edition_marker_is_stripped(self) -> None:
        for marker in EDITION_MARKERS:
            assert strip_edition(f"some game {marker}") == "some game"


class TestIsBaseSuffix:
    @pytest.mark.parametrize("remainder", ["special edition", "hd", "4k remaster", "classic", "goty"])
    def test_edition_suffixes(self, remainder: str) -> None:
        assert is_base_suffix(remainder)

    @pytest.mark.parametrize("remainder", ["neon racer pack", "hdr mode", "sky fortress", ""])
    def test_content_suffixes(self, remainder: str) -> None:
        assert not is_base_suffix(remainder)


class TestExtractBaseName:
    def test_dlc_keyword(self) -> None:
        assert extract_base_name("just cause 3 dlc sky fortress") == "just cause 3"

    def test_shortest_prefix_wins(self) -> None:
        assert extract_base_name("game dlc dlc pack") == "game"

    def test_colon_style_dlc_not_extracted(self) -> None:
        assert extract_base_name("just cause 4 neon racer pack") is None

    def test_requires_standalone_word(self) -> None:
        assert extract_base_name("game dlcs") is None
        assert extract_base_name("dlc pack") is None
