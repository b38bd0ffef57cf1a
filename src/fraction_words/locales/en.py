"""English numeral grammar."""
from __future__ import annotations

import re
from fractions import Fraction

from fraction_words.locales import patterns
from fraction_words.models.grammar import LocaleGrammar, PatternRule, PatternTable, RatioSuffix

UNITS = {
    "zero": 0, "oh": 0, "o": 0, "nil": 0,
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
}

TENS = {
    "ten": 10, "twenty": 20, "thirty": 30, "forty": 40, "fourty": 40,
    "fifty": 50, "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

MAGNITUDES = {
    "dozen": 12,
    "hundred": 100,
    "thousand": 1_000,
    "lakh": 100_000,
    "million": 1_000_000,
    "crore": 10_000_000,
    "billion": 1_000_000_000,
    "trillion": 1_000_000_000_000,
}

_ORDINAL_UNIT_STEMS = {
    "first": 1, "second": 2, "third": 3, "quarter": 4, "fourth": 4,
    "fifth": 5, "sixth": 6, "seventh": 7, "eighth": 8, "ninth": 9,
    "eleventh": 11, "twelfth": 12, "thirteenth": 13, "fourteenth": 14,
    "fifteenth": 15, "sixteenth": 16, "seventeenth": 17, "eighteenth": 18,
    "nineteenth": 19,
}

_ORDINAL_TEN_STEMS = {
    "tenth": 10, "twentieth": 20, "thirtieth": 30, "fortieth": 40,
    "fiftieth": 50, "sixtieth": 60, "seventieth": 70, "eightieth": 80,
    "ninetieth": 90,
}

_ORDINAL_MAGNITUDE_STEMS = {
    "hundredth": 100,
    "thousandth": 1_000,
    "lakhth": 100_000,
    "millionth": 1_000_000,
    "billionth": 1_000_000_000,
    "trillionth": 1_000_000_000_000,
}


def _with_plurals(stems: dict[str, int]) -> dict[str, int]:
    """Add the ``-s`` plural of every ordinal (``thirds``, ``tenths``)."""
    table = dict(stems)
    table.update({f"{word}s": value for word, value in stems.items()})
    return table


ORDINAL_UNITS = {"half": 2, "halves": 2, **_with_plurals(_ORDINAL_UNIT_STEMS)}
ORDINAL_TENS = _with_plurals(_ORDINAL_TEN_STEMS)
ORDINAL_MAGNITUDES = _with_plurals(_ORDINAL_MAGNITUDE_STEMS)

ORDINAL_SUFFIXES = frozenset({"st", "nd", "rd", "th", "sts", "nds", "rds", "ths"})

CONSTANTS = {
    "pi": Fraction("3.141592653589793"),
    "π": Fraction("3.141592653589793"),
    "tau": Fraction("6.283185307179586"),
    "τ": Fraction("6.283185307179586"),
}

# ---------------------------------------------------------------------------
# Structural matchers
# ---------------------------------------------------------------------------

DASHES = "-‐‑‒–—―−⁃"

# A dash opening a numeral is a sign, not a delimiter: "-3", "1e-3".
DELIMITER = re.compile(rf"\s*(?:,\s+|(?<=\S)(?<!\de)[{DASHES}]|[{DASHES}](?!\d)|\band\b|\s)\s*")

# "and" only joins a whole part to a fraction when what follows is a single
# fractional phrase: "two and three quarters", not "two hundred and fifty".
_FRACTION_TAIL = (
    rf"(?:[{DASHES}\w]*(?:half|halves|quarters?|thirds?|seconds?|ths?|\d(?:st|nd|rd)s?)"
    r"|\d+\s*[/⁄∕]\s*\d+|[½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅐⅛⅜⅝⅞⅑⅒↉])"
)
JUNCTION = re.compile(rf"\s+and\s+(?=(?:[{DASHES}\w]+\s+)?{_FRACTION_TAIL}$)")

OVER = re.compile(r"\s*(?:\bover\b|\bout\s+of\b|\bdivided\s+by\b|[/⁄∕])\s*")

# "basis point" is a ratio suffix and "1.5e3" a single literal.
POINT = re.compile(r"\s*\b(?<!basis\s)(?:point|dot)\b\s*|(?<=\d)\.(?=\d)(?![\d.]*e[+-]?\d)")

RATIO_SUFFIXES = (
    RatioSuffix(name="percent", pattern=re.compile(r"\s*(?:%|\bper\s*cent)$"), denominator=100),
    RatioSuffix(name="perdime", pattern=re.compile(r"\s*\bper\s*(?:dime|ten)$"), denominator=10),
    RatioSuffix(name="permille", pattern=re.compile(r"\s*(?:‰|\bper\s*mill?e|\bper\s*thousand)$"),
                denominator=1_000),
    RatioSuffix(name="permyriad",
                pattern=re.compile(r"\s*(?:‱|\bper\s*myriad|\bper\s*ten\s+thousand|\bbasis\s+points?|\bbps)$"),
                denominator=10_000),
    RatioSuffix(name="perlakh", pattern=re.compile(r"\s*\bper\s*(?:lakh|hundred\s+thousand)$"),
                denominator=100_000),
    RatioSuffix(name="permillion", pattern=re.compile(r"\s*(?:\bppm|\bper\s*million)$"),
                denominator=1_000_000),
    RatioSuffix(name="percrore", pattern=re.compile(r"\s*\bper\s*(?:crore|ten\s+million)$"),
                denominator=10_000_000),
    RatioSuffix(name="perawk", pattern=re.compile(r"\s*\bper\s*(?:awk|hundred\s+million)$"),
                denominator=100_000_000),
    RatioSuffix(name="perbillion", pattern=re.compile(r"\s*(?:\bppb|\bper\s*billion)$"),
                denominator=1_000_000_000),
)

# ---------------------------------------------------------------------------
# Pattern table
# ---------------------------------------------------------------------------

# Below a hundred: "seven", "twenty", "twenty-one", "21", "pi".
_SMALL = r"(?:t[ -]u|[nutc])"
# Scaled group: "hundred", "two hundred", "twenty-one thousand", "hundred thousand".
_GROUP = rf"(?:(?:{_SMALL}[ -])?m(?:[ -]m)*)"
# Adjacent small numbers need a magnitude between them, so "one two" is not a cardinal.
CARDINAL = rf"(?:{_GROUP}(?:[ -]{_GROUP})*(?:[ -]{_SMALL})?|{_SMALL})"

PATTERNS = PatternTable.of(rules=(
    # "twenty-fifth", "three twenty-fifths"
    PatternRule(name="compound_ordinal",
                key=re.compile(rf"(?:(?P<num>{CARDINAL}) )?(?P<den>t-U)"),
                build=patterns.fraction),
    # "half", "three quarters", "three-quarters", "two 5ths", "seven hundredths";
    # also every plain number evaluated with the unit terminal
    PatternRule(name="fraction",
                key=re.compile(rf"(?:(?P<num>{CARDINAL})[ -])?(?P<den>[UTMN])"),
                build=patterns.fraction),
    # "zero", "9", "two hundred and five"
    PatternRule(name="cardinal", key=re.compile(CARDINAL), build=patterns.cardinal),
))

ENGLISH = LocaleGrammar(
    name="en",
    delimiter=DELIMITER,
    junction=JUNCTION,
    over=OVER,
    point=POINT,
    ratio_suffixes=RATIO_SUFFIXES,
    thousands_separator=",",
    ordinal_suffixes=ORDINAL_SUFFIXES,
    ordinal_units=ORDINAL_UNITS,
    ordinal_tens=ORDINAL_TENS,
    ordinal_magnitudes=ORDINAL_MAGNITUDES,
    cardinal_units=UNITS,
    cardinal_tens=TENS,
    cardinal_magnitudes=MAGNITUDES,
    constants=CONSTANTS,
    patterns=PATTERNS,
)
