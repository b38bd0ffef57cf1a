#!/usr/bin/env python3
"""Parse numeral phrases from the command line and print their fractions."""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from fraction_words.config import Settings
from fraction_words.locales.registry import get_grammar
from fraction_words.models.errors import FractionParseError
from fraction_words.parsing.assembler import parse_fraction
from fraction_words.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main(phrases: list[str]) -> int:
    """Print ``phrase -> numerator/denominator`` for each phrase; return the exit status."""
    settings = Settings()
    setup_logging(settings.log_level)
    grammar = get_grammar(settings=settings)

    status = 0
    for phrase in phrases:
        try:
            numerator, denominator = parse_fraction(phrase, grammar)
        except FractionParseError as e:
            logger.error("parse_failed", text=phrase, error=str(e))
            print(f"{phrase} -> error: {e}")
            status = 1
            continue
        print(f"{phrase} -> {numerator}/{denominator}")
    return status


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print('Usage: python scripts/parse_fraction.py "<phrase>" ["<phrase>" ...]')
        sys.exit(1)

    sys.exit(main(sys.argv[1:]))
