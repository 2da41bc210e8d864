"""
Title Similarity and Fuzzy Match Judgement.

similarity() is a Dice coefficient over character bigrams.
is_fuzzy_match() accepts a pair only above FUZZY_THRESHOLD and only if
none of the sequel/variant guards fire. Precision over recall.

Both functions expect titles already passed through normalize_title().
"""

import re
from collections import Counter

from bundlecheck.config import FUZZY_THRESHOLD, SHARED_PREFIX_RATIO, SHORT_SUFFIX_MAX_DELTA

_DIGIT_RUN_PATTERN = re.compile(r"\d+")


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """
    Dice coefficient on overlapping character bigrams, in [0, 1].

    Identical non-empty strings score 1. Otherwise a string shorter
    than two characters has no bigrams and scores 0.
    """
    if a == b and a:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    intersection = sum((_bigrams(a) & _bigrams(b)).values())
    return (2 * intersection) / ((len(a) - 1) + (len(b) - 1))


def differs_only_by_number(a: str, b: str) -> bool:
    """
    True for numbered entries of the same series: "tropico 3" / "tropico 4".
    """
    a_without = _DIGIT_RUN_PATTERN.sub("", a).strip()
    b_without = _DIGIT_RUN_PATTERN.sub("", b).strip()
    if a_without != b_without:
        return False
    return _DIGIT_RUN_PATTERN.findall(a) != _DIGIT_RUN_PATTERN.findall(b)


def differs_by_short_suffix(a: str, b: str) -> bool:
    """
    True when the longer title is the shorter one plus a trailing word or
    a few extra characters: "bioshock" / "bioshock 2", "limbo" / "limbo hd".
    """
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    if longer.startswith(shorter + " "):
        return True
    return longer.startswith(shorter) and len(longer) - len(shorter) <= SHORT_SUFFIX_MAX_DELTA


def diverges_after_shared_prefix(a: str, b: str) -> bool:
    """
    True when both titles share leading words covering most of each,
    then diverge: "railroad tycoon 3" / "railroad tycoon world".
    """
    a_words = a.split(" ")
    b_words = b.split(" ")

    common = 0
    while common < len(a_words) and common < len(b_words) and a_words[common] == b_words[common]:
        common += 1

    if common == 0 or common >= len(a_words) or common >= len(b_words):
        return False

    shared = " ".join(a_words[:common])
    return len(shared) / len(a) > SHARED_PREFIX_RATIO and len(shared) / len(b) > SHARED_PREFIX_RATIO


def is_fuzzy_match(a: str, b: str) -> bool:
    """
    Decide whether two normalized titles denote the same product.

    Any single guard rejects the pair regardless of score.
    """
    if similarity(a, b) < FUZZY_THRESHOLD:
        return False
    if differs_only_by_number(a, b):
        return False
    if differs_by_short_suffix(a, b):
        return False
    return not diverges_after_shared_prefix(a, b)
