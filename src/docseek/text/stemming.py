"""Token stemming and the text analysis pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from docseek.text import porter, porter2
from docseek.text.lexer import Token, TokenKind, tokenize


class StemmingAlgorithm(str, Enum):
    PORTER = "porter"
    PORTER2 = "porter2"


DEFAULT_ALGORITHM = StemmingAlgorithm.PORTER2


def stem_word(word: str, algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM) -> str:
    if algorithm is StemmingAlgorithm.PORTER:
        return porter.stem(word)
    return porter2.stem(word)


def stem(token: Token, algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM) -> str | None:
    """Stem a word or number token; symbols are not stemmable and yield ``None``."""
    if token.kind is TokenKind.SYMBOL:
        return None
    return stem_word(token.text, algorithm)


def analyze(text: str, algorithm: StemmingAlgorithm = DEFAULT_ALGORITHM) -> Iterator[str]:
    """Yield the stemmed terms of ``text`` in order."""
    for token in tokenize(text):
        term = stem(token, algorithm)
        if term is not None:
            yield term
