"""Classic Porter stemmer, as rendered by the Snowball project.

Shares the vowel, region and short syllable definitions with Porter2 but
uses the original 1980 rule tables: no exceptional words, no special R1
prefixes and slightly different suffix lists.
"""

from __future__ import annotations

from docseek.text.porter2 import (
    DOUBLES,
    VOWELS,
    _has_vowel,
    _longest_suffix,
    _mark_consonant_y,
    _region_start,
)

STEP2_SUFFIXES = {
    "tional": "tion",
    "enci": "ence",
    "anci": "ance",
    "abli": "able",
    "entli": "ent",
    "eli": "e",
    "izer": "ize",
    "ization": "ize",
    "ational": "ate",
    "ation": "ate",
    "ator": "ate",
    "alli": "al",
    "alism": "al",
    "aliti": "al",
    "fulness": "ful",
    "ousli": "ous",
    "ousness": "ous",
    "iveness": "ive",
    "iviti": "ive",
    "biliti": "ble",
}

STEP3_SUFFIXES = {
    "alize": "al",
    "icate": "ic",
    "iciti": "ic",
    "ical": "ic",
    "ative": "",
    "ful": "",
    "ness": "",
}

STEP4_SUFFIXES = (
    "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
    "ment", "ent", "ou", "ism", "ate", "iti", "ous", "ive", "ize", "ion",
)


def _ends_cvc(word: str) -> bool:
    return (
        len(word) >= 3
        and word[-3] not in VOWELS
        and word[-2] in VOWELS
        and word[-1] not in VOWELS
        and word[-1] not in "wxY"
    )


def _step1a(word: str) -> str:
    if word.endswith("sses"):
        return word[:-2]
    if word.endswith("ies"):
        return word[:-2]
    if word.endswith("ss"):
        return word
    if word.endswith("s"):
        return word[:-1]
    return word


def _step1b(word: str, r1: int) -> str:
    suffix = _longest_suffix(word, ("eed", "ed", "ing"))
    if suffix is None:
        return word

    stem = word[: -len(suffix)]
    if suffix == "eed":
        return stem + "ee" if len(stem) >= r1 else word
    if not _has_vowel(stem):
        return word

    if stem.endswith(("at", "bl", "iz")):
        return stem + "e"
    if stem.endswith(DOUBLES):
        return stem[:-1]
    if len(stem) == r1 and _ends_cvc(stem):
        return stem + "e"
    return stem


def _step1c(word: str) -> str:
    if word[-1:] in ("y", "Y") and _has_vowel(word[:-1]):
        return word[:-1] + "i"
    return word


def _replace_in_r1(word: str, table: dict[str, str], r1: int) -> str:
    suffix = _longest_suffix(word, table)
    if suffix is None:
        return word
    start = len(word) - len(suffix)
    if start < r1:
        return word
    return word[:start] + table[suffix]


def _step4(word: str, r2: int) -> str:
    suffix = _longest_suffix(word, STEP4_SUFFIXES)
    if suffix is None:
        return word
    start = len(word) - len(suffix)
    if start < r2:
        return word
    if suffix == "ion" and not (start > 0 and word[start - 1] in "st"):
        return word
    return word[:start]


def _step5(word: str, r1: int, r2: int) -> str:
    start = len(word) - 1
    if word.endswith("e") and (
        start >= r2 or (start >= r1 and not _ends_cvc(word[:-1]))
    ):
        word = word[:-1]
    start = len(word) - 1
    if word.endswith("ll") and start >= r2:
        word = word[:-1]
    return word


def stem(word: str) -> str:
    """Return the classic Porter stem of ``word``.

    Words of one or two characters are returned unchanged.
    """
    if len(word) <= 2:
        return word

    word, y_found = _mark_consonant_y(word)
    r1 = _region_start(word, 0)
    r2 = _region_start(word, r1)

    word = _step1a(word)
    word = _step1b(word, r1)
    word = _step1c(word)
    word = _replace_in_r1(word, STEP2_SUFFIXES, r1)
    word = _replace_in_r1(word, STEP3_SUFFIXES, r1)
    word = _step4(word, r2)
    word = _step5(word, r1, r2)

    if y_found:
        word = word.replace("Y", "y")
    return word
