"""Tokenizer turning raw text into word, number and symbol tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

import regex

WHITESPACE = frozenset(" \t\r\n")
SYMBOLS = frozenset("!@#$%^&*()-_+={}[]:;\"'<>,.?/\\|")

# Unicode Alphabetic covers combining vowel signs; N is only Nd, Nl and No.
_NUMBER_RUN = regex.compile(r"\p{N}+")
_WORD_RUN = regex.compile(r"\p{Alphabetic}[\p{Alphabetic}\p{N}'\-]*")
_SYMBOL_RUN = regex.compile("[" + regex.escape("".join(sorted(SYMBOLS))) + "]+")


class TokenKind(Enum):
    WORD = "word"
    NUMBER = "number"
    SYMBOL = "symbol"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token holding a copy of the text it was scanned from."""

    kind: TokenKind
    text: str

    @classmethod
    def word(cls, text: str) -> Token:
        return cls(TokenKind.WORD, text)

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def symbol(cls, text: str) -> Token:
        return cls(TokenKind.SYMBOL, text)


_RUNS = (
    (TokenKind.NUMBER, _NUMBER_RUN),
    (TokenKind.WORD, _WORD_RUN),
    (TokenKind.SYMBOL, _SYMBOL_RUN),
)


def tokenize(text: str) -> Iterator[Token]:
    """Yield tokens from ``text`` in a single forward pass.

    Runs of numeric characters become numbers. Words start with an alphabetic
    character (combining vowel signs included) and may contain alphabetic and
    numeric characters, apostrophes and hyphens. Runs of punctuation become
    symbols. Whitespace separates tokens and is never yielded.

    A character that is none of the above ends the stream: everything after
    it is silently dropped. Callers indexing arbitrary text should be aware
    that, for instance, an emoji truncates the rest of the document.
    """
    length = len(text)
    pos = 0
    while True:
        while pos < length and text[pos] in WHITESPACE:
            pos += 1
        if pos >= length:
            return

        for kind, pattern in _RUNS:
            match = pattern.match(text, pos)
            if match is not None:
                break
        else:
            return
        pos = match.end()
        yield Token(kind, match.group())
