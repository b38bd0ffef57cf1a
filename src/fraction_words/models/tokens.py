"""Classified tokens and the symbolic pattern built from them.

A phrase such as ``"twenty-one thousandths"`` scans to the tokens
``t``, ``u``, ``M`` and the pattern string ``"t-u M"``. Locale pattern
tables are keyed on that exact string shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from fractions import Fraction

Number = int | Fraction


class Category(StrEnum):
    """Marker characters for each kind of token."""

    NUMBER = "n"
    ORDINAL_NUMBER = "N"
    UNIT = "u"
    TEN = "t"
    MAGNITUDE = "m"
    ORDINAL_UNIT = "U"
    ORDINAL_TEN = "T"
    ORDINAL_MAGNITUDE = "M"
    CONSTANT = "c"


class Separator(StrEnum):
    SPACE = " "
    HYPHEN = "-"


@dataclass(frozen=True)
class Token:
    """A single classified chunk of the input and where it came from."""

    category: Category
    value: Number
    text: str
    start: int
    end: int
    separator: Separator = Separator.SPACE


def pattern_of(tokens: list[Token] | tuple[Token, ...]) -> str:
    """Join token markers with the separator that followed each token.

    The separator after the final token is dropped.
    """
    parts: list[str] = []
    for index, token in enumerate(tokens):
        if index:
            parts.append(tokens[index - 1].separator.value)
        parts.append(token.category.value)
    return "".join(parts)


@dataclass(frozen=True)
class ScanResult:
    """Output of scanning one phrase."""

    tokens: tuple[Token, ...] = field(default_factory=tuple)
    zeros: int = 0

    @property
    def pattern(self) -> str:
        return pattern_of(self.tokens)

    @property
    def args(self) -> list[Number]:
        return [token.value for token in self.tokens]
