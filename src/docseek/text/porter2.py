"""Porter2 (Snowball English) stemmer.

The algorithm works on a single word and strips suffixes in a fixed sequence
of steps. Two regions of the word gate which rules may fire:

* R1 starts after the first non-vowel that follows a vowel. Words starting
  with ``gener``, ``commun`` or ``arsen`` have R1 start right after that
  prefix.
* R2 is computed the same way as R1 but starting from the beginning of R1.

A suffix is "in R1" (or R2) when it starts at or after the region's offset.
Within each step only the longest matching suffix is considered; if its
condition fails the step leaves the word alone.

``y`` is a vowel unless it starts the word or follows a vowel. Such
consonant ``y``s are marked as ``Y`` while the steps run and turned back
into ``y`` at the end. No case folding is performed, so uppercase letters
never count as vowels.
"""

from __future__ import annotations

VOWELS = frozenset("aeiouy")
VALID_LI = frozenset("cdeghkmnrt")
DOUBLES = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")
R1_PREFIXES = ("gener", "commun", "arsen")

EXCEPTIONS = {
    "skis": "ski",
    "skies": "sky",
    "dying": "die",
    "lying": "lie",
    "tying": "tie",
    "idly": "idl",
    "gently": "gentl",
    "ugly": "ugli",
    "early": "earli",
    "only": "onli",
    "singly": "singl",
    "sky": "sky",
    "news": "news",
    "howe": "howe",
    "atlas": "atlas",
    "cosmos": "cosmos",
    "bias": "bias",
    "andes": "andes",
}

# Left untouched once the plural step is done.
STEP1A_INVARIANTS = frozenset(
    {"inning", "outing", "canning", "herring", "earring", "proceed", "exceed", "succeed"}
)

STEP2_SUFFIXES = {
    "tional": "tion",
    "enci": "ence",
    "anci": "ance",
    "abli": "able",
    "entli": "ent",
    "izer": "ize",
    "ization": "ize",
    "ational": "ate",
    "ation": "ate",
    "ator": "ate",
    "alism": "al",
    "aliti": "al",
    "alli": "al",
    "fulness": "ful",
    "ousli": "ous",
    "ousness": "ous",
    "iveness": "ive",
    "iviti": "ive",
    "biliti": "ble",
    "bli": "ble",
    "ogi": "og",
    "fulli": "ful",
    "lessli": "less",
    "li": "",
}

STEP3_SUFFIXES = {
    "tional": "tion",
    "ational": "ate",
    "alize": "al",
    "icate": "ic",
    "iciti": "ic",
    "ical": "ic",
    "ful": "",
    "ness": "",
    "ative": "",
}

STEP4_SUFFIXES = (
    "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
    "ment", "ent", "ism", "ate", "iti", "ous", "ive", "ize", "ion",
)


def _longest_suffix(word: str, suffixes) -> str | None:
    """Return the longest entry of ``suffixes`` that ends ``word``."""
    best = None
    for suffix in suffixes:
        if word.endswith(suffix) and (best is None or len(suffix) > len(best)):
            best = suffix
    return best


def _has_vowel(text: str) -> bool:
    return any(char in VOWELS for char in text)


def _region_start(word: str, start: int) -> int:
    """Offset just past the first non-vowel that follows a vowel, from ``start``."""
    length = len(word)
    pos = start
    while pos < length and word[pos] not in VOWELS:
        pos += 1
    pos += 1
    while pos < length and word[pos] in VOWELS:
        pos += 1
    return min(pos + 1, length)


def _regions(word: str) -> tuple[int, int]:
    for prefix in R1_PREFIXES:
        if word.startswith(prefix):
            r1 = len(prefix)
            break
    else:
        r1 = _region_start(word, 0)
    return r1, _region_start(word, r1)


def _ends_with_short_syllable(word: str) -> bool:
    """Whether ``word`` ends in a short syllable.

    That is a vowel followed by a non-vowel other than ``w``, ``x`` or ``Y``
    and preceded by a non-vowel, or a vowel at the start of a two letter word
    followed by a non-vowel.
    """
    if len(word) >= 3:
        return (
            word[-3] not in VOWELS
            and word[-2] in VOWELS
            and word[-1] not in VOWELS
            and word[-1] not in "wxY"
        )
    return len(word) == 2 and word[0] in VOWELS and word[1] not in VOWELS


def _mark_consonant_y(word: str) -> tuple[str, bool]:
    """Replace consonant ``y`` with ``Y`` and report whether any was found."""
    chars = list(word)
    y_found = False
    for pos, char in enumerate(chars):
        if char == "y" and (pos == 0 or chars[pos - 1] in VOWELS):
            chars[pos] = "Y"
            y_found = True
    return "".join(chars), y_found


def _prelude(word: str) -> tuple[str, bool]:
    if word.startswith("'"):
        word = word[1:]
    return _mark_consonant_y(word)


def _step1a(word: str) -> str:
    for suffix in ("'s'", "'s", "'"):
        if word.endswith(suffix):
            word = word[: -len(suffix)]
            break

    if word.endswith("sses"):
        return word[:-2]
    if word.endswith(("ied", "ies")):
        return word[:-2] if len(word) > 4 else word[:-1]
    if word.endswith(("us", "ss")):
        return word
    if word.endswith("s") and _has_vowel(word[:-2]):
        return word[:-1]
    return word


def _step1b(word: str, r1: int) -> str:
    suffix = _longest_suffix(word, ("eed", "eedly", "ed", "edly", "ing", "ingly"))
    if suffix is None:
        return word

    stem = word[: -len(suffix)]
    if suffix in ("eed", "eedly"):
        return stem + "ee" if len(stem) >= r1 else word
    if not _has_vowel(stem):
        return word

    if stem.endswith(("at", "bl", "iz")):
        return stem + "e"
    if stem.endswith(DOUBLES):
        return stem[:-1]
    if len(stem) == r1 and _ends_with_short_syllable(stem):
        return stem + "e"
    return stem


def _step1c(word: str) -> str:
    if len(word) > 2 and word[-1] in "yY" and word[-2] not in VOWELS:
        return word[:-1] + "i"
    return word


def _step2(word: str, r1: int) -> str:
    suffix = _longest_suffix(word, STEP2_SUFFIXES)
    if suffix is None:
        return word
    start = len(word) - len(suffix)
    if start < r1:
        return word
    if suffix == "ogi" and not word[:start].endswith("l"):
        return word
    if suffix == "li" and not (start > 0 and word[start - 1] in VALID_LI):
        return word
    return word[:start] + STEP2_SUFFIXES[suffix]


def _step3(word: str, r1: int, r2: int) -> str:
    suffix = _longest_suffix(word, STEP3_SUFFIXES)
    if suffix is None:
        return word
    start = len(word) - len(suffix)
    if start < r1 or (suffix == "ative" and start < r2):
        return word
    return word[:start] + STEP3_SUFFIXES[suffix]


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
    if word.endswith("e"):
        if start >= r2 or (start >= r1 and not _ends_with_short_syllable(word[:-1])):
            return word[:-1]
    elif word.endswith("l"):
        if start >= r2 and word[:-1].endswith("l"):
            return word[:-1]
    return word


def stem(word: str) -> str:
    """Return the Porter2 stem of ``word``.

    >>> stem("generalization")
    'general'
    >>> stem("running")
    'run'
    """
    if word in EXCEPTIONS:
        return EXCEPTIONS[word]
    if len(word) < 3:
        return word

    word, y_found = _prelude(word)
    r1, r2 = _regions(word)

    word = _step1a(word)
    if word not in STEP1A_INVARIANTS:
        word = _step1b(word, r1)
        word = _step1c(word)
        word = _step2(word, r1)
        word = _step3(word, r1, r2)
        word = _step4(word, r2)
        word = _step5(word, r1, r2)

    if y_found:
        word = word.replace("Y", "y")
    return word
