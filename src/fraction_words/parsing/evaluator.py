"""Evaluate symbolic patterns through the locale pattern table."""
from __future__ import annotations

from collections.abc import Sequence

from fraction_words.models.errors import UnknownPatternError
from fraction_words.models.grammar import LocaleGrammar, terminated
from fraction_words.models.tokens import Number
from fraction_words.parsing.scanner import scan_phrase

# Fills the terminal slot of a plain-number lookup.
SENTINEL = 0


def evaluate_pattern(pattern: str, args: Sequence[Number], grammar: LocaleGrammar,
                     text: str | None = None) -> tuple[Number, Number]:
    """Evaluate ``pattern`` with the unit terminal appended.

    Raises:
        UnknownPatternError: the grammar has no evaluator for the key.
    """
    key = terminated(pattern)
    evaluator = grammar.patterns.get(key)
    if evaluator is None:
        raise UnknownPatternError(key, pattern if text is None else text)
    return evaluator(*args)


def parse_number(text: str, grammar: LocaleGrammar) -> Number:
    """Value of a plain number phrase such as ``"two hundred"`` or ``"1,000"``.

    Ordinal markers are read as their cardinal counterparts, so ``"4th"``
    evaluates to 4.
    """
    text = text.strip()
    scan = scan_phrase(text, grammar)
    return evaluate_pattern(scan.pattern.lower(), [*scan.args, SENTINEL], grammar, text)[0]
