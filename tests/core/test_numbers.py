# tests/core/test_numbers.py
import pytest

from inflexion.core.domain.exceptions import NumberRangeError
from inflexion.core.english.numbers import (
    cardinal,
    comma_format,
    ordinal,
    plain_format,
    roman,
    summarize,
)


class TestCardinal:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, "zero"),
            (7, "seven"),
            (20, "twenty"),
            (21, "twenty-one"),
            (40, "forty"),
            (99, "ninety-nine"),
            (100, "one hundred and zero"),
            (999, "nine hundred and ninety-nine"),
            (1000, "one thousand, zero"),
            (1234, "one thousand, two hundred and thirty-four"),
            (1_000_000, "one million, zero"),
        ],
    )
    def test_spelled_out(self, number, expected):
        assert cardinal(number) == expected

    def test_negative_numbers(self):
        assert cardinal(-7) == "negative seven"

    def test_threshold_switches_to_digits(self):
        """Numbers at or above the threshold stay as digits."""
        assert cardinal(10, 11) == "ten"
        assert cardinal(11, 11) == "11"
        assert cardinal(15, 11) == "15"

    def test_trillion_is_out_of_range(self):
        with pytest.raises(NumberRangeError):
            cardinal(10**12)

    def test_range_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            cardinal(-(10**13))


class TestOrdinal:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
        ],
    )
    def test_digit_suffixes(self, number, expected):
        assert ordinal(number) == expected

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "first"),
            (6, "sixth"),
            (12, "twelfth"),
            (21, "twenty-first"),
            (40, "fortieth"),
            (99, "ninety-ninth"),
        ],
    )
    def test_long_form(self, number, expected):
        assert ordinal(number, long_form=True) == expected

    def test_long_form_only_below_one_hundred(self):
        assert ordinal(150, long_form=True) == "150th"

    def test_threshold_returns_plain_digits(self):
        assert ordinal(5, threshold=5) == "5"
        assert ordinal(4, threshold=5) == "4th"


class TestSummarize:
    @pytest.mark.parametrize(
        "number, expected",
        [(0, "no"), (1, "one"), (2, "a couple of"), (4, "a few"), (8, "several"), (11, "many")],
    )
    def test_buckets(self, number, expected):
        assert summarize(number, False) == expected

    def test_end_of_sentence_variant(self):
        assert summarize(0, True) == "none"
        assert summarize(2, True) == "a couple"
        assert summarize(5, True) == "a few"
        assert summarize(50, True) == "many"


class TestRoman:
    def test_subtractive_notation(self):
        assert roman(14) == "XIV"
        assert roman(1994) == "MCMXCIV"

    def test_classic_notation_is_additive(self):
        assert roman(4, classic=True) == "IIII"
        assert roman(9, classic=True) == "VIIII"

    def test_zero_and_negative(self):
        assert roman(0) == "N"
        assert roman(-3) == "-III"


class TestCommaFormat:
    def test_groups_thousands(self):
        assert comma_format(1234567) == "1,234,567"
        assert comma_format(1000) == "1,000"
        assert comma_format(999) == "999"

    def test_sign_handling(self):
        assert comma_format(-1234) == "-1,234"
        assert comma_format(5, signed=True) == "+5"

    def test_padding(self):
        assert comma_format(42, min_cols=5) == "   42"
        assert comma_format(42, min_cols=4, pad_char="0") == "0042"

    def test_other_radixes(self):
        assert comma_format(255, radix=16) == "FF"
        assert comma_format(5, radix=2, comma_interval=0) == "101"
        assert comma_format(61, radix=62) == "z"

    def test_unsupported_radix(self):
        with pytest.raises(NumberRangeError):
            comma_format(10, radix=1)

    def test_plain_format_has_no_grouping(self):
        assert plain_format(1234567) == "1234567"
