"""Test exact decimal reconstruction."""
from fractions import Fraction

import pytest

from fraction_words.parsing.decimal import digit_count, normalize_decimal, promote_to_integers


class TestDigitCount:
    @pytest.mark.parametrize("value,expected", [
        (1, 1),
        (9, 1),
        (10, 2),
        (250, 3),
        (Fraction(1, 2), 0),
        (Fraction(1, 20), -1),
        (Fraction(3, 1000), -2),
    ])
    def test_values(self, value, expected):
        assert digit_count(value) == expected

    def test_zero_raises(self):
        with pytest.raises(ValueError):
            digit_count(0)


class TestNormalizeDecimal:
    def test_single_digit(self):
        assert normalize_decimal(1, 5) == (15, 10)

    def test_leading_zeros(self):
        assert normalize_decimal(1, 5, zeros=1) == (105, 100)

    def test_trailing_zero_stripped(self):
        assert normalize_decimal(2, 50) == (25, 10)

    def test_not_reduced_beyond_tens(self):
        assert normalize_decimal(0, 25) == (25, 100)

    def test_vacuous_fraction(self):
        assert normalize_decimal(2, 0) == (2, 1)

    def test_magnitude_scale(self):
        assert normalize_decimal(0, 2, scale=100) == (20, 1)

    def test_reciprocal_scale(self):
        assert normalize_decimal(1, 1, scale=Fraction(1, 100)) == (11, 1000)

    def test_many_digits(self):
        assert normalize_decimal(3, 14159) == (314159, 100000)

    def test_results_are_ints(self):
        numerator, denominator = normalize_decimal(1, 5, scale=1_000_000)
        assert (numerator, denominator) == (1500000, 1)
        assert type(numerator) is int and type(denominator) is int


class TestPromoteToIntegers:
    def test_decimal_scaled_by_ten(self):
        assert promote_to_integers(Fraction(3, 2), 2) == (15, 20)

    def test_non_decimal_scaled_by_lcm(self):
        assert promote_to_integers(Fraction(1, 3), 1) == (1, 3)

    def test_integers_untouched(self):
        assert promote_to_integers(4, 2) == (4, 2)
