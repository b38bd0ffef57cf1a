"""Locale grammar: the read-only tables the parsing engine consumes.

A ``LocaleGrammar`` is built once per language and never mutated. Every
mapping field is exposed as a ``MappingProxyType`` and the model itself is
frozen, so one instance can be shared by concurrent parse calls.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from fractions import Fraction
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fraction_words.models.tokens import Number

# Terminal marker appended to a pattern when it is evaluated as a plain number.
TERMINAL = "U"

Evaluator = Callable[..., tuple[Number, Number]]


def terminated(pattern: str) -> str:
    """Return the lookup key for ``pattern`` with the unit terminal appended."""
    return f"{pattern} {TERMINAL}"


# ---------------------------------------------------------------------------
# Pattern table
# ---------------------------------------------------------------------------


class PatternRule(BaseModel):
    """One entry of a pattern table.

    ``key`` must match the whole pattern string; ``build`` turns the match
    into the evaluator for that pattern.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    key: re.Pattern
    build: Callable[[re.Match], Evaluator]

    @classmethod
    def exact(cls, key: str, evaluator: Evaluator) -> PatternRule:
        """A rule for a single literal pattern string."""
        return cls(name=key, key=re.compile(re.escape(key)), build=lambda _match: evaluator)


class PatternTable(BaseModel):
    """Ordered rules mapping a pattern string to an evaluation function.

    The first rule whose key fully matches wins.
    """

    model_config = ConfigDict(frozen=True)

    rules: tuple[PatternRule, ...] = ()

    @classmethod
    def of(cls, entries: Mapping[str, Evaluator] | None = None,
           rules: Sequence[PatternRule] = ()) -> PatternTable:
        """Build a table from literal entries followed by pattern rules."""
        exact = [PatternRule.exact(key, fn) for key, fn in (entries or {}).items()]
        return cls(rules=(*exact, *rules))

    def get(self, key: str) -> Evaluator | None:
        for rule in self.rules:
            match = rule.key.fullmatch(key)
            if match:
                return rule.build(match)
        return None

    def __getitem__(self, key: str) -> Evaluator:
        evaluator = self.get(key)
        if evaluator is None:
            raise KeyError(key)
        return evaluator

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


# ---------------------------------------------------------------------------
# Locale grammar
# ---------------------------------------------------------------------------


class RatioSuffix(BaseModel):
    """A trailing phrase that fixes the denominator (``percent`` → 100)."""

    model_config = ConfigDict(frozen=True)

    name: str
    pattern: re.Pattern
    denominator: int = Field(gt=0)


class LocaleGrammar(BaseModel):
    """Everything language-specific the engine needs to read a phrase."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str

    # Structural matchers
    delimiter: re.Pattern
    junction: re.Pattern
    over: re.Pattern
    point: re.Pattern
    ratio_suffixes: tuple[RatioSuffix, ...] = ()

    # Numeric literals
    thousands_separator: str = ","
    ordinal_suffixes: frozenset[str] = frozenset()

    # Word classification tables
    ordinal_units: Mapping[str, int] = Field(default_factory=dict)
    ordinal_tens: Mapping[str, int] = Field(default_factory=dict)
    ordinal_magnitudes: Mapping[str, int] = Field(default_factory=dict)
    cardinal_units: Mapping[str, int] = Field(default_factory=dict)
    cardinal_tens: Mapping[str, int] = Field(default_factory=dict)
    cardinal_magnitudes: Mapping[str, int] = Field(default_factory=dict)
    constants: Mapping[str, Fraction] = Field(default_factory=dict)

    patterns: PatternTable = Field(default_factory=PatternTable)

    @field_validator(
        "ordinal_units", "ordinal_tens", "ordinal_magnitudes",
        "cardinal_units", "cardinal_tens", "cardinal_magnitudes", "constants",
        mode="after",
    )
    @classmethod
    def _read_only(cls, table: Mapping) -> Mapping:
        return MappingProxyType(dict(table))
