"""Classify one chunk of input into a token category and value."""
from __future__ import annotations

import re
from fractions import Fraction

from fraction_words.models.errors import UnrecognizedTokenError
from fraction_words.models.grammar import LocaleGrammar
from fraction_words.models.tokens import Category, Number

NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?", re.IGNORECASE)
_INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def to_number(literal: str) -> Number:
    """Exact value of a numeric literal: ``int`` for integers, ``Fraction`` otherwise."""
    if _INTEGER_LITERAL.fullmatch(literal):
        return int(literal)
    value = Fraction(literal)
    return value.numerator if value.denominator == 1 else value


def strip_grouping(chunk: str, grammar: LocaleGrammar) -> str:
    return chunk.replace(grammar.thousands_separator, "") if grammar.thousands_separator else chunk


def classify_token(chunk: str, grammar: LocaleGrammar) -> tuple[Category, Number]:
    """Return ``(category, value)`` for a single word or numeral.

    Resolution order: numeric literal (ordinal if it carries an ordinal
    suffix), then ordinal unit, ordinal ten, ordinal magnitude, cardinal ten,
    cardinal unit, cardinal magnitude and named constant tables. The first
    table containing the word wins.

    Raises:
        UnrecognizedTokenError: the chunk matches nothing.
    """
    word = chunk.strip()

    # 28.93, 1,000, 3rd
    literal = strip_grouping(word, grammar)
    match = NUMERIC_LITERAL.match(literal)
    if match:
        rest = literal[match.end():]
        if not rest:
            return Category.NUMBER, to_number(match.group())
        if rest in grammar.ordinal_suffixes:
            return Category.ORDINAL_NUMBER, to_number(match.group())

    tables = (
        (Category.ORDINAL_UNIT, grammar.ordinal_units),
        (Category.ORDINAL_TEN, grammar.ordinal_tens),
        (Category.ORDINAL_MAGNITUDE, grammar.ordinal_magnitudes),
        (Category.TEN, grammar.cardinal_tens),
        (Category.UNIT, grammar.cardinal_units),
        (Category.MAGNITUDE, grammar.cardinal_magnitudes),
        (Category.CONSTANT, grammar.constants),
    )
    for category, table in tables:
        # zero is a legitimate value, so test membership rather than truthiness
        if word in table:
            return category, table[word]

    raise UnrecognizedTokenError(word)
