"""Scan a phrase into classified tokens and a symbolic pattern."""
from __future__ import annotations

import re

from fraction_words.models.grammar import LocaleGrammar
from fraction_words.models.tokens import Category, ScanResult, Separator, Token
from fraction_words.parsing.classifier import NUMERIC_LITERAL, classify_token, strip_grouping

HYPHEN = re.compile(r"[-‐‑‒–—―−⁃]")


def _leading_zeros(chunk: str, grammar: LocaleGrammar) -> int:
    """Zeros written before the first significant digit of a literal ("007" → 2)."""
    match = NUMERIC_LITERAL.match(strip_grouping(chunk, grammar))
    if not match:
        return 0
    digits = match.group().lstrip("+-").split(".")[0]
    significant = digits.lstrip("0")
    return len(digits) - max(len(significant), 1)


def scan_phrase(text: str, grammar: LocaleGrammar) -> ScanResult:
    """Split ``text`` on the grammar's delimiters and classify each chunk.

    Chunks that are junction phrases are passed over. The separator recorded
    after each token is a hyphen when the delimiter that ended it contained
    a dash, otherwise a space.

    The zero count feeds the decimal normalizer: it counts zero words that
    open the phrase ("zero zero five") or, for a leading numeral, the zeros
    it was written with ("005").
    """
    tokens: list[Token] = []
    zeros = 0
    position = 0

    while position < len(text):
        match = grammar.delimiter.search(text, position)
        end = match.start() if match else len(text)
        resume = match.end() if match else len(text)

        chunk = text[position:end]
        word = chunk.strip()
        if word and not grammar.junction.fullmatch(word):
            category, value = classify_token(word, grammar)

            if value == 0 and zeros == len(tokens):
                zeros += 1
            elif category is Category.NUMBER and not tokens:
                zeros += _leading_zeros(word, grammar)

            separator = Separator.HYPHEN if match and HYPHEN.search(match.group()) else Separator.SPACE
            tokens.append(Token(
                category=category,
                value=value,
                text=word,
                start=position + len(chunk) - len(chunk.lstrip()),
                end=position + len(chunk.rstrip()),
                separator=separator,
            ))

        # a zero-width delimiter match must still make progress
        position = max(resume, position + 1)

    return ScanResult(tokens=tuple(tokens), zeros=zeros)
