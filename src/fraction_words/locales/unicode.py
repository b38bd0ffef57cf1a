"""Unicode vulgar fraction glyphs."""
from __future__ import annotations

import re
from types import MappingProxyType

VULGAR_FRACTIONS: MappingProxyType[str, tuple[int, int]] = MappingProxyType({
    "½": (1, 2),
    "⅓": (1, 3),
    "⅔": (2, 3),
    "¼": (1, 4),
    "¾": (3, 4),
    "⅕": (1, 5),
    "⅖": (2, 5),
    "⅗": (3, 5),
    "⅘": (4, 5),
    "⅙": (1, 6),
    "⅚": (5, 6),
    "⅐": (1, 7),
    "⅛": (1, 8),
    "⅜": (3, 8),
    "⅝": (5, 8),
    "⅞": (7, 8),
    "⅑": (1, 9),
    "⅒": (1, 10),
    "↉": (0, 3),
})

# A glyph as the last character, optionally preceded by an integer: "9½", "2 ¾".
VULGAR_FRACTION = re.compile("[" + "".join(VULGAR_FRACTIONS) + "]$")
WHOLE_PREFIX = re.compile(r"\s*([+-]?\d+)")
