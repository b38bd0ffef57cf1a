"""Test end-to-end phrase parsing."""
from concurrent.futures import ThreadPoolExecutor

import pytest
from structlog.testing import capture_logs

from fraction_words.locales.unicode import VULGAR_FRACTIONS
from fraction_words.models.errors import (
    FractionParseError, InvalidArgumentError, UnknownPatternError, UnrecognizedTokenError,
    ZeroDenominatorError,
)
from fraction_words.parsing.assembler import parse_fraction, unit_pair_boundary
from fraction_words.parsing.scanner import scan_phrase
from tests.factories import make_grammar


class TestDigits:
    @pytest.mark.parametrize("text,expected", [
        ("0", (0, 1)),
        ("42", (42, 1)),
        ("007", (7, 1)),
        ("1,000", (1000, 1)),
        ("-3", (-3, 1)),
    ])
    def test_integers(self, text, expected):
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("1.5", (15, 10)),
        ("0.05", (5, 100)),
        ("2.50", (25, 10)),
        ("-1.5", (-15, 10)),
        ("1.5e3", (1500, 1)),
        ("2.5e1", (25, 1)),
        ("1e-3", (1, 1000)),
        ("1.5e3/1", (1500, 1)),
    ])
    def test_decimals(self, text, expected):
        assert parse_fraction(text) == expected


class TestVulgarGlyphs:
    @pytest.mark.parametrize("glyph,pair", list(VULGAR_FRACTIONS.items()))
    def test_glyph_alone(self, glyph, pair):
        assert parse_fraction(glyph) == pair

    @pytest.mark.parametrize("whole", [1, 9, 12])
    @pytest.mark.parametrize("glyph,pair", list(VULGAR_FRACTIONS.items()))
    def test_integer_prefix(self, glyph, pair, whole):
        numerator, denominator = pair
        assert parse_fraction(f"{whole}{glyph}") == (numerator + whole * denominator, denominator)

    def test_spaced_prefix(self):
        assert parse_fraction("2 ¾") == (11, 4)

    def test_words_before_glyph(self):
        assert parse_fraction("one and ½") == (1, 2)


class TestWords:
    @pytest.mark.parametrize("text,expected", [
        ("zero", (0, 1)),
        ("two dozen", (24, 1)),
        ("one hundred and five", (105, 1)),
        ("two hundred and fifty thousand", (250000, 1)),
        ("1.5 million", (1500000, 1)),
    ])
    def test_cardinals(self, text, expected):
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("half", (1, 2)),
        ("one half", (1, 2)),
        ("a half", (1, 2)),
        ("three quarters", (3, 4)),
        ("three-quarters", (3, 4)),
        ("2 thirds", (2, 3)),
        ("twenty-fifth", (1, 25)),
        ("twenty-first", (1, 21)),
        ("three twenty-fifths", (3, 25)),
        ("seven hundredths", (7, 100)),
        ("twenty-one thousandths", (21, 1000)),
        ("3 4ths", (3, 4)),
    ])
    def test_ordinal_denominators(self, text, expected):
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("one and a half", (3, 2)),
        ("two and three quarters", (11, 4)),
        ("one and 1/2", (3, 2)),
    ])
    def test_mixed_numbers(self, text, expected):
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("two point zero", (2, 1)),
        ("one point zero five", (105, 100)),
        ("point five", (5, 10)),
    ])
    def test_spoken_decimals(self, text, expected):
        assert parse_fraction(text) == expected

    def test_unit_pair_split(self):
        assert parse_fraction("one two") == (1, 2)

    def test_constant(self):
        assert parse_fraction("pi") == (3141592653589793, 10**15)

    def test_case_and_whitespace_ignored(self):
        assert parse_fraction("  ONE Half ") == (1, 2)


class TestOverAndRatios:
    @pytest.mark.parametrize("text,expected", [
        ("1/2", (1, 2)),
        ("3⁄4", (3, 4)),
        ("9 1/2", (19, 2)),
        ("1.5/2", (15, 20)),
        ("ten out of twenty", (10, 20)),
        ("six divided by three", (6, 3)),
    ])
    def test_over(self, text, expected):
        assert parse_fraction(text) == expected

    @pytest.mark.parametrize("text,expected", [
        ("hundred percent", (100, 100)),
        ("50%", (50, 100)),
        ("12 per mille", (12, 1000)),
        ("5 ppm", (5, 1000000)),
    ])
    def test_ratio_suffixes(self, text, expected):
        assert parse_fraction(text) == expected

    def test_singular_basis_point(self):
        assert parse_fraction("1 basis point") == (1, 10000)

    def test_negative_denominator_moves_sign(self):
        assert parse_fraction("1/-2") == (-1, 2)


class TestProperties:
    @pytest.mark.parametrize("text", [
        "one half", "1.5", "two and three quarters", "-1.5", "pi", "12 per mille", "0.05",
    ])
    def test_result_reparses_as_itself(self, text):
        numerator, denominator = parse_fraction(text)
        assert parse_fraction(f"{numerator}/{denominator}") == (numerator, denominator)

    @pytest.mark.parametrize("text", ["one half", "9 1/2", "seven hundredths", "1.5", "50%"])
    def test_denominator_positive(self, text):
        assert parse_fraction(text)[1] > 0

    def test_concurrent_calls_agree(self):
        phrases = ["one and a half", "9 1/2", "three quarters", "1.5", "one two", "50%"] * 20
        expected = [parse_fraction(phrase) for phrase in phrases]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(parse_fraction, phrases)) == expected


class TestErrors:
    @pytest.mark.parametrize("value", [12, None, b"half", 1.5])
    def test_non_string(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_fraction(value)

    def test_non_string_is_also_type_error(self):
        with pytest.raises(TypeError):
            parse_fraction(["half"])

    def test_unknown_word(self):
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            parse_fraction("@@@")
        assert exc_info.value.token == "@@@"

    def test_unknown_pattern(self):
        with pytest.raises(UnknownPatternError) as exc_info:
            parse_fraction("one twenty")
        assert exc_info.value.text == "one twenty"

    @pytest.mark.parametrize("text", ["1/0", "five over zero"])
    def test_zero_denominator(self, text):
        with pytest.raises(ZeroDenominatorError):
            parse_fraction(text)

    def test_all_errors_share_base(self):
        with pytest.raises(FractionParseError):
            parse_fraction("one twenty")
        with pytest.raises(ValueError):
            parse_fraction("@@@")


class TestCustomGrammar:
    def test_junction(self):
        assert parse_fraction("one plus half", make_grammar()) == (3, 2)

    def test_fraction(self):
        assert parse_fraction("two thirds", make_grammar()) == (2, 3)

    def test_ratio_suffix(self):
        assert parse_fraction("one hundred percent", make_grammar()) == (100, 100)

    def test_english_word_unknown(self):
        with pytest.raises(UnrecognizedTokenError):
            parse_fraction("four", make_grammar())


class TestUnitPairBoundary:
    def test_first_pair(self, english):
        assert unit_pair_boundary(scan_phrase("one two three", english).tokens) == 1

    def test_hyphenated_pair_ignored(self, english):
        assert unit_pair_boundary(scan_phrase("one-two", english).tokens) is None

    def test_no_pair(self, english):
        assert unit_pair_boundary(scan_phrase("twenty one", english).tokens) is None


class TestLogging:
    def test_structural_form_logged(self):
        with capture_logs() as logs:
            parse_fraction("one and a half")
        assert logs[0]["event"] == "structural_form_matched"
        assert logs[0]["form"] == "junction"
        assert logs[0]["log_level"] == "debug"

    def test_split_logged(self):
        with capture_logs() as logs:
            parse_fraction("one two")
        events = [entry["event"] for entry in logs]
        assert events == ["pattern_split"]
        assert logs[0]["boundary"] == 1


class TestFractionsAsWholeParts:
    @pytest.mark.parametrize("text", [
        "three quarters percent",
        "one half percent",
        "one and a half percent",
        "one half over two",
        "two thirds per mille",
    ])
    def test_fraction_where_number_expected(self, text):
        with pytest.raises(UnknownPatternError):
            parse_fraction(text)

    def test_unit_words_before_ordinal(self):
        with pytest.raises(UnknownPatternError):
            parse_fraction("one two thirds")
