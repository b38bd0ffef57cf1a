"""Turn a numeral phrase into an exact ``(numerator, denominator)`` pair."""
from __future__ import annotations

import structlog

from fraction_words.locales.registry import get_grammar
from fraction_words.models.errors import InvalidArgumentError, UnknownPatternError, ZeroDenominatorError
from fraction_words.models.grammar import LocaleGrammar
from fraction_words.models.tokens import Category, Number, Separator, Token, pattern_of
from fraction_words.parsing.decimal import promote_to_integers
from fraction_words.parsing.evaluator import SENTINEL, evaluate_pattern
from fraction_words.parsing.recognizers import structural_recognizers
from fraction_words.parsing.scanner import scan_phrase

logger = structlog.get_logger(__name__)


def parse_fraction(text: str, grammar: LocaleGrammar | None = None) -> tuple[int, int]:
    """Parse ``text`` into ``(numerator, denominator)``.

    The denominator is always positive. The pair is not reduced: only common
    trailing factors of ten from decimal expansions are removed, so
    ``"one and a half"`` gives (3, 2) and ``"1.5"`` gives (15, 10).

    Raises:
        InvalidArgumentError: ``text`` is not a string.
        UnrecognizedTokenError: a word is in none of the grammar's tables.
        UnknownPatternError: the words form no pattern the grammar knows.
        ZeroDenominatorError: the phrase describes a fraction over zero.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(text)
    if grammar is None:
        grammar = get_grammar()

    numerator, denominator = promote_to_integers(*assemble(text.strip().lower(), grammar))

    if denominator == 0:
        raise ZeroDenominatorError(numerator, text)
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def assemble(phrase: str, grammar: LocaleGrammar) -> tuple[Number, Number]:
    """Evaluate a trimmed, lower-cased phrase without final normalization."""
    for recognizer in structural_recognizers(grammar):
        match = recognizer.probe(phrase, grammar)
        if match:
            logger.debug("structural_form_matched", form=recognizer.name, text=phrase)
            return recognizer.handle(phrase, match, grammar)

    scan = scan_phrase(phrase, grammar)
    evaluator = grammar.patterns.get(scan.pattern)
    if evaluator is not None:
        return evaluator(*scan.args)

    boundary = unit_pair_boundary(scan.tokens)
    if boundary is None:
        raise UnknownPatternError(scan.pattern, phrase)

    logger.debug("pattern_split", pattern=scan.pattern, boundary=boundary, text=phrase)
    left, right = scan.tokens[:boundary], scan.tokens[boundary:]
    numerator = evaluate_pattern(pattern_of(left), [*_values(left), SENTINEL], grammar, phrase)[0]
    denominator = evaluate_pattern(pattern_of(right).lower(), [*_values(right), SENTINEL], grammar, phrase)[0]
    return numerator, denominator


def unit_pair_boundary(tokens: tuple[Token, ...]) -> int | None:
    """Index of the second token of the first space-separated ``u u`` pair."""
    for index in range(len(tokens) - 1):
        current, following = tokens[index], tokens[index + 1]
        if (current.category is Category.UNIT and current.separator is Separator.SPACE
                and following.category is Category.UNIT):
            return index + 1
    return None


def _values(tokens: tuple[Token, ...]) -> list[Number]:
    return [token.value for token in tokens]
