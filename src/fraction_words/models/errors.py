"""Errors raised while turning a numeral phrase into a fraction."""
from __future__ import annotations


class FractionParseError(ValueError):
    """Base class for every failure of a parse call."""


class InvalidArgumentError(FractionParseError, TypeError):
    """The input is not a string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Argument should be a string, got {type(value).__name__}")


class UnrecognizedTokenError(FractionParseError):
    """A chunk of the input matches no classification table."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown part `{token}`")


class UnknownPatternError(FractionParseError):
    """A scanned pattern has no evaluator and no structural fallback applies."""

    def __init__(self, pattern: str, text: str):
        self.pattern = pattern
        self.text = text
        super().__init__(f"Unknown pattern `{pattern}` for string `{text}`")


class ZeroDenominatorError(FractionParseError):
    """The phrase evaluated to a fraction over zero."""

    def __init__(self, numerator: int, text: str):
        self.numerator = numerator
        self.text = text
        super().__init__(f"Zero denominator for string `{text}`")
