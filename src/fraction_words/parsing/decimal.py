"""Exact fractions from decimal-point expansions."""
from __future__ import annotations

import math
from fractions import Fraction

from fraction_words.models.tokens import Number


def digit_count(value: Number) -> int:
    """``floor(log10(value)) + 1`` computed exactly.

    Positive for values of one or more (``digit_count(250) == 3``), zero or
    negative for values below one (``digit_count(Fraction(1, 20)) == -1``).
    """
    value = abs(Fraction(value))
    if value == 0:
        raise ValueError("digit_count is undefined for zero")
    if value >= 1:
        return len(str(math.floor(value)))
    count = 0
    while value < 1:
        value *= 10
        count -= 1
    return count + 1


def _terminates(denominator: int) -> bool:
    """True when ``1/denominator`` has a finite decimal expansion."""
    for factor in (2, 5):
        while denominator % factor == 0:
            denominator //= factor
    return denominator == 1


def promote_to_integers(numerator: Number, denominator: Number) -> tuple[int, int]:
    """Scale both members until they are integers.

    Decimal values are scaled by powers of ten (``(1.5, 2)`` → ``(15, 20)``);
    anything else by the least common multiple of the denominators.
    """
    numerator, denominator = Fraction(numerator), Fraction(denominator)
    common = math.lcm(numerator.denominator, denominator.denominator)
    if not _terminates(common):
        numerator *= common
        denominator *= common
    while numerator % 1 or denominator % 1:
        numerator *= 10
        denominator *= 10
    return int(numerator), int(denominator)


def normalize_decimal(unit: Number, fract: Number, zeros: int = 0, scale: Number = 1) -> tuple[int, int]:
    """Build ``unit.fract`` as an exact fraction.

    ``fract`` is the value read after the point and ``zeros`` the number of
    zeros written before it, so ``normalize_decimal(1, 5, zeros=1)`` is 1.05
    → ``(105, 100)``. ``scale`` multiplies the whole value (``0.2 hundred``).
    Trailing factors of ten common to both members are removed; the result
    is not otherwise reduced.
    """
    if not fract:
        return promote_to_integers(unit, 1)

    magnitude = Fraction(10) ** (digit_count(fract) + zeros)
    numerator = (unit * magnitude + fract) * scale
    denominator = magnitude

    while not numerator % 10 and not denominator % 10:
        numerator /= 10
        denominator /= 10

    return promote_to_integers(numerator, denominator)
