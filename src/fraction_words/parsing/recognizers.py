"""Structural forms recognized before generic pattern evaluation.

Each recognizer pairs a probe, which looks for the form in the lower-cased
phrase, with a handler that evaluates the phrase around the probe's match.
``structural_recognizers`` lists them in the order they are tried.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from fractions import Fraction
from functools import partial

from fraction_words.locales.patterns import concat_digits
from fraction_words.locales.unicode import VULGAR_FRACTION, VULGAR_FRACTIONS, WHOLE_PREFIX
from fraction_words.models.grammar import LocaleGrammar, RatioSuffix
from fraction_words.models.tokens import Category, Number, pattern_of
from fraction_words.parsing.classifier import strip_grouping
from fraction_words.parsing.decimal import normalize_decimal
from fraction_words.parsing.evaluator import SENTINEL, evaluate_pattern, parse_number
from fraction_words.parsing.scanner import scan_phrase

Pair = tuple[Number, Number]

_INTEGER = re.compile(r"[+-]?\d+")
_NEGATIVE = ("-", "−")


@dataclass(frozen=True)
class Recognizer:
    name: str
    probe: Callable[[str, LocaleGrammar], re.Match | None]
    handle: Callable[[str, re.Match, LocaleGrammar], Pair]


def _split(text: str, match: re.Match) -> tuple[str, str]:
    return text[:match.start()].strip(), text[match.end():].strip()


def _search(attribute: str) -> Callable[[str, LocaleGrammar], re.Match | None]:
    def probe(text: str, grammar: LocaleGrammar) -> re.Match | None:
        return getattr(grammar, attribute).search(text)
    return probe


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def vulgar_fraction(text: str, match: re.Match, grammar: LocaleGrammar) -> Pair:
    """``½`` → (1, 2); ``9½`` → (19, 2)."""
    numerator, denominator = VULGAR_FRACTIONS[match.group()]
    whole = WHOLE_PREFIX.match(text[:match.start()])
    if whole:
        numerator += int(whole.group(1)) * denominator
    return numerator, denominator


def over(text: str, match: re.Match, grammar: LocaleGrammar) -> Pair:
    """``3 over 4``, ``9 1/2``, ``ten out of twenty``."""
    left, right = _split(text, match)
    denominator = parse_number(right, grammar)

    # "9 1/2": an integer right before the bar is the numerator of a mixed number
    words = left.split()
    last = words[-1] if words else ""
    digits = strip_grouping(last, grammar)
    if _INTEGER.fullmatch(digits):
        head = left[:len(left) - len(last)].strip()
        whole = parse_number(head, grammar) if head else 0
        part = int(digits)
        if whole < 0 or head.startswith(_NEGATIVE):
            part = -part
        return whole * denominator + part, denominator

    return parse_number(left, grammar), denominator


def junction(text: str, match: re.Match, grammar: LocaleGrammar) -> Pair:
    """``one and a half`` → (3, 2)."""
    from fraction_words.parsing.assembler import assemble

    left, right = _split(text, match)
    whole = parse_number(left, grammar)
    numerator, denominator = assemble(right, grammar)
    return whole * denominator + numerator, denominator


def point(text: str, match: re.Match, grammar: LocaleGrammar) -> Pair:
    """``one point two``, ``1.05``, ``0.2 hundred``, ``one point one hundredths``."""
    left, right = _split(text, match)
    unit = parse_number(left, grammar) if left else 0

    scan = scan_phrase(right, grammar)
    tokens = list(scan.tokens)

    # a trailing magnitude scales the whole value: "0.2 hundred", "1.1 hundredth"
    scale: Number = 1
    if tokens and tokens[-1].category is Category.MAGNITUDE:
        scale = tokens.pop().value
    elif tokens and tokens[-1].category is Category.ORDINAL_MAGNITUDE:
        scale = Fraction(1, tokens.pop().value)

    args = [token.value for token in tokens]
    if len(tokens) > 1 and all(token.category is Category.UNIT for token in tokens):
        # "point one four": unit words after the point are read digit by digit
        fract = concat_digits(args)
    else:
        fract = evaluate_pattern(pattern_of(tokens), [*args, SENTINEL], grammar, text)[0]

    numerator, denominator = normalize_decimal(abs(unit), fract, scan.zeros, scale)
    if unit < 0 or left.startswith(_NEGATIVE):
        numerator = -numerator
    return numerator, denominator


def ratio(suffix: RatioSuffix, text: str, match: re.Match, grammar: LocaleGrammar) -> Pair:
    """``hundred percent`` → (100, 100)."""
    return parse_number(text[:match.start()], grammar), suffix.denominator


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

VULGAR_FRACTION_RECOGNIZER = Recognizer(
    name="vulgar_fraction",
    probe=lambda text, grammar: VULGAR_FRACTION.search(text),
    handle=vulgar_fraction,
)
OVER_RECOGNIZER = Recognizer(name="over", probe=_search("over"), handle=over)
JUNCTION_RECOGNIZER = Recognizer(name="junction", probe=_search("junction"), handle=junction)
POINT_RECOGNIZER = Recognizer(name="point", probe=_search("point"), handle=point)


def ratio_recognizer(suffix: RatioSuffix) -> Recognizer:
    return Recognizer(
        name=suffix.name,
        probe=lambda text, grammar: suffix.pattern.search(text),
        handle=partial(ratio, suffix),
    )


def structural_recognizers(grammar: LocaleGrammar) -> tuple[Recognizer, ...]:
    """Recognizers in priority order: glyph, over, junction, point, ratio suffixes."""
    return (
        VULGAR_FRACTION_RECOGNIZER,
        OVER_RECOGNIZER,
        JUNCTION_RECOGNIZER,
        POINT_RECOGNIZER,
        *(ratio_recognizer(suffix) for suffix in grammar.ratio_suffixes),
    )
