import pytest

from bundlecheck.services.title_similarity import (
    differs_by_short_suffix,
    differs_only_by_number,
    diverges_after_shared_prefix,
    is_fuzzy_match,
    similarity,
)


class TestSimilarity:
    def test_identical_strings_score_one(self) -> None:
        assert similarity("portal", "portal") == 1.0

    def test_short_strings_score_zero(self) -> None:
        assert similarity("a", "abc") == 0.0
        assert similarity("abc", "a") == 0.0
        assert similarity("", "abc") == 0.0
        assert similarity("", "") == 0.0

    def test_dice_coefficient(self) -> None:
        # ni ig gh ht / na ac ch ht -> one shared bigram of eight
        assert similarity("night", "nacht") == pytest.approx(0.25)

    def test_bigram_multiplicity(self) -> None:
        # aa x3 vs aa x1 -> intersection 1
        assert similarity("aaaa", "aa") == pytest.approx(0.5)

    def test_disjoint_strings(self) -> None:
        assert similarity("abc", "xyz") == 0.0

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("tropico 3", "tropico 4"),
            ("the witcher 3 wild hunt", "witcher 3 wild hunt"),
            ("aaaa", "aa"),
            ("portal", "portal 2"),
        ],
    )
    def test_symmetric_and_bounded(self, a: str, b: str) -> None:
        assert similarity(a, b) == similarity(b, a)
        assert 0.0 <= similarity(a, b) <= 1.0


class TestGuards:
    def test_numeric_divergence(self) -> None:
        assert differs_only_by_number("tropico 3", "tropico 4")
        assert differs_only_by_number("bioshock", "bioshock 2")
        assert not differs_only_by_number("tropico 3", "tropico 3")
        assert not differs_only_by_number("tropico 3", "tropico world")

    def test_short_suffix(self) -> None:
        assert differs_by_short_suffix("limbo", "limbo hd")
        assert differs_by_short_suffix("portals", "portal")
        assert not differs_by_short_suffix("abc", "abcdefg")
        assert not differs_by_short_suffix("grand thef auto v", "grand theft auto v")

    def test_shared_prefix_divergence(self) -> None:
        assert diverges_after_shared_prefix("railroad tycoon 3", "railroad tycoon world")
        assert not diverges_after_shared_prefix("grand theft auto v", "grand thef auto v")

    def test_shared_prefix_needs_divergence_in_both(self) -> None:
        # One title is entirely the shared prefix
        assert not diverges_after_shared_prefix("dark souls", "dark souls iii")
        assert not diverges_after_shared_prefix("dark souls", "dark souls")

    def test_shared_prefix_must_dominate_both(self) -> None:
        # "age of" is under 60% of either title
        assert not diverges_after_shared_prefix("age of empires", "age of wonders")


class TestIsFuzzyMatch:
    def test_typo_in_early_word(self) -> None:
        assert is_fuzzy_match("grand theft auto v", "grand thef auto v")

    def test_missing_leading_article(self) -> None:
        assert is_fuzzy_match("the witcher 3 wild hunt", "witcher 3 wild hunt")

    def test_below_threshold(self) -> None:
        assert not is_fuzzy_match("portal", "half life")

    def test_rejects_numbered_sequels(self) -> None:
        """High similarity but a different entry in the series."""
        assert similarity("tropico 3", "tropico 4") >= 0.85
        assert not is_fuzzy_match("tropico 3", "tropico 4")

    def test_rejects_trailing_word(self) -> None:
        assert similarity("dark souls remastered", "dark souls remastered x") >= 0.85
        assert not is_fuzzy_match("dark souls remastered", "dark souls remastered x")

    def test_rejects_divergent_last_word(self) -> None:
        assert similarity("the elder scrolls v skyrim", "the elder scrolls v skyrm") >= 0.85
        assert not is_fuzzy_match("the elder scrolls v skyrim", "the elder scrolls v skyrm")

    def test_symmetric(self) -> None:
        assert is_fuzzy_match("witcher 3 wild hunt", "the witcher 3 wild hunt")
        assert not is_fuzzy_match("tropico 4", "tropico 3")
