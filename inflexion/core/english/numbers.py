# inflexion/core/english/numbers.py
"""
English number formatting.

Stateless helpers used by the numeric directive:

- cardinal():   21 -> "twenty-one"
- ordinal():    21 -> "21st" / "twenty-first"
- summarize():  4  -> "a few"
- roman():      14 -> "XIV"
- comma_format(): 1234567 -> "1,234,567" (any radix up to 62)
"""

from __future__ import annotations

import string
import sys
from typing import Optional

from inflexion.core.domain.exceptions import NumberRangeError

_CARDINALS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty",
)

_TENS = {
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
}

_ORDINALS = (
    "zeroth", "first", "second", "third", "fourth", "fifth", "sixth",
    "seventh", "eighth", "ninth", "tenth", "eleventh", "twelfth",
    "thirteenth", "fourteenth", "fifteenth", "sixteenth", "seventeenth",
    "eighteenth", "nineteenth",
)

_ORDINAL_TENS = {
    20: "twentieth",
    30: "thirtieth",
    40: "fortieth",
    50: "fiftieth",
    60: "sixtieth",
    70: "seventieth",
    80: "eightieth",
    90: "ninetieth",
}

# (scale, word), largest first; the composition below a scale is "<n> <word>, <rest>".
_SCALES = (
    (10**9, "billion"),
    (10**6, "million"),
    (10**3, "thousand"),
)

_LIMIT = 10**12

_SUMMARY = ("no", "one", "a couple of", "a few", "a few", "a few",
            "several", "several", "several", "several")
_SUMMARY_AT_END = ("none", "one", "a couple", "a few", "a few", "a few",
                   "several", "several", "several", "several")

_RADIX_DIGITS = string.digits + string.ascii_uppercase + string.ascii_lowercase


# ---------------------------------------------------------------------------
# Cardinals
# ---------------------------------------------------------------------------


def cardinal(number: int, threshold: Optional[int] = None) -> str:
    """
    Spell out `number` in words.

    If `threshold` is given, numbers greater than or equal to it are returned
    as plain digits instead.

    Hundreds are always composed as "<n> hundred and <rest>", and larger
    scales as "<n> <scale>, <rest>", even when the rest is zero:

        cardinal(100)  -> "one hundred and zero"
        cardinal(1000) -> "one thousand, zero"

    Raises:
        NumberRangeError: if |number| is one trillion or more.
    """
    if threshold is not None and number >= threshold:
        return str(number)

    if number < 0:
        return "negative " + cardinal(-number)

    if number <= 20:
        return _CARDINALS[number]

    if number < 100:
        if number % 10 == 0:
            return _TENS[number]
        return f"{cardinal(number // 10 * 10)}-{cardinal(number % 10)}"

    if number < 1000:
        return f"{cardinal(number // 100)} hundred and {cardinal(number % 100)}"

    if number >= _LIMIT:
        raise NumberRangeError(
            "Numbers greater than or equal to 1 trillion are not supported."
        )

    for scale, word in _SCALES:
        if number >= scale:
            return f"{cardinal(number // scale)} {word}, {cardinal(number % scale)}"

    raise AssertionError(f"unreachable for {number}")  # pragma: no cover


# ---------------------------------------------------------------------------
# Ordinals
# ---------------------------------------------------------------------------


def _ordinal_suffix(number: int) -> str:
    if (abs(number) % 100) // 10 == 1:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(abs(number) % 10, "th")


def ordinal(number: int, threshold: int = sys.maxsize, long_form: bool = False) -> str:
    """
    Format `number` as an ordinal.

    Numbers at or above `threshold` are returned as plain digits. With
    `long_form`, numbers below 100 are spelled out ("twenty-first");
    everything else uses a digit suffix ("21st", "112th").
    """
    if number >= threshold:
        return str(number)

    if number < 0:
        return "minus " + ordinal(-number, long_form=long_form)

    if long_form:
        if number < 20:
            return _ORDINALS[number]
        if number < 100:
            if number % 10 == 0:
                return _ORDINAL_TENS[number]
            ones = number % 10
            return f"{cardinal(number - ones)}-{_ORDINALS[ones]}"

    return f"{number}{_ordinal_suffix(number)}"


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def summarize(number: int, at_end: bool = False) -> str:
    """
    Bucket a count into a vague quantity.

    0 -> no, 1 -> one, 2 -> a couple of, 3-5 -> a few, 6-9 -> several,
    anything else -> many. With `at_end` the phrase is the one used at the end
    of a sentence ("none", "a couple").
    """
    if 0 <= number < 10:
        return (_SUMMARY_AT_END if at_end else _SUMMARY)[number]
    return "many"


# ---------------------------------------------------------------------------
# Roman numerals / radix formatting
# ---------------------------------------------------------------------------

_ROMAN_SUBTRACTIVE = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)
_ROMAN_ADDITIVE = tuple(pair for pair in _ROMAN_SUBTRACTIVE if len(pair[1]) == 1)


def roman(number: int, classic: bool = False) -> str:
    """
    Format `number` as a Roman numeral.

    `classic` uses purely additive notation (4 -> "IIII"). Zero is "N";
    negative numbers get a leading "-".
    """
    if number == 0:
        return "N"

    prefix = "-" if number < 0 else ""
    remaining = abs(number)
    parts = []

    for value, numeral in (_ROMAN_ADDITIVE if classic else _ROMAN_SUBTRACTIVE):
        count, remaining = divmod(remaining, value)
        parts.append(numeral * count)

    return prefix + "".join(parts)


def comma_format(
    value: int,
    min_cols: int = 0,
    pad_char: str = " ",
    comma_interval: int = 3,
    comma_char: str = ",",
    signed: bool = False,
    radix: int = 10,
) -> str:
    """
    Format an integer in `radix`, grouping digits with `comma_char` every
    `comma_interval` digits (0 disables grouping) and left-padding to
    `min_cols` with `pad_char`.
    """
    if not 2 <= radix <= len(_RADIX_DIGITS):
        raise NumberRangeError(
            f"Radix {radix} is outside the supported range 2-{len(_RADIX_DIGITS)}"
        )

    negative = value < 0
    remaining = abs(value)

    digits = []
    if remaining == 0:
        digits.append(_RADIX_DIGITS[0])

    count = 0
    while remaining:
        remaining, digit = divmod(remaining, radix)
        digits.append(_RADIX_DIGITS[digit])
        count += 1
        if comma_interval and count % comma_interval == 0 and remaining:
            digits.append(comma_char)

    if negative:
        digits.append("-")
    elif signed:
        digits.append("+")

    text = "".join(reversed(digits))
    return text.rjust(min_cols, pad_char) if pad_char else text


def plain_format(value: int, min_cols: int = 0, pad_char: str = " ",
                 signed: bool = False, radix: int = 10) -> str:
    """`comma_format` without digit grouping."""
    return comma_format(value, min_cols, pad_char, 0, ",", signed, radix)


__all__ = [
    "cardinal",
    "ordinal",
    "summarize",
    "roman",
    "comma_format",
    "plain_format",
]
