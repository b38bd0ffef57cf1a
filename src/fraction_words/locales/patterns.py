"""Evaluator factories shared by locale pattern tables.

Each factory receives the regex match of a pattern key and returns the
function evaluating the positional arguments of that pattern. Marker
semantics (``m`` scales, ``u``/``t``/``n``/``c`` add, ordinals form the
denominator) are the same for every language that uses these markers.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

from fraction_words.models.grammar import Evaluator
from fraction_words.models.tokens import Category, Number

_MARKERS = re.compile(r"[A-Za-z]")

# Magnitudes above this close the current group ("two hundred" stays open,
# "two thousand" is added to the running total).
GROUP_CLOSING_MAGNITUDE = 100


def markers(pattern: str) -> list[str]:
    """The category markers of a pattern string, separators removed."""
    return _MARKERS.findall(pattern)


def compose_cardinal(marks: Sequence[str], values: Sequence[Number]) -> Number:
    """Combine cardinal words into a single number.

    ``u m t u`` with ``[2, 100, 40, 5]`` gives 245.
    """
    total: Number = 0
    current: Number = 0
    has_current = False
    for mark, value in zip(marks, values):
        if mark == Category.MAGNITUDE:
            current = (current if has_current else 1) * value
            has_current = True
            if value > GROUP_CLOSING_MAGNITUDE:
                total += current
                current = 0
                has_current = False
        else:
            current += value
            has_current = True
    return total + current


def concat_digits(values: Sequence[Number]) -> int:
    """Read unit words one digit at a time: ``zero five`` is 5, ``one four`` is 14."""
    return int("".join(str(value) for value in values))


def _numerator(marks: list[str], values: Sequence[Number]) -> Number:
    if not marks:
        return 1
    return compose_cardinal(marks, values)


def cardinal(match: re.Match) -> Evaluator:
    """A plain cardinal: ``(value, 1)``."""
    marks = markers(match.group(0))

    def evaluate(*args: Number) -> tuple[Number, Number]:
        return compose_cardinal(marks, args[:len(marks)]), 1

    return evaluate


def fraction(match: re.Match) -> Evaluator:
    """An optional numerator group ``num`` followed by a denominator group ``den``.

    A missing numerator reads as one; denominator values are summed so that
    ``t-U`` (twenty-fifth) yields 25.
    """
    num_marks = markers(match.group("num") or "")
    den_marks = markers(match.group("den"))
    width = len(num_marks)

    def evaluate(*args: Number) -> tuple[Number, Number]:
        numerator = _numerator(num_marks, args[:width])
        denominator = sum(args[width:width + len(den_marks)])
        return numerator, denominator

    return evaluate
