# inflexion/core/markup/options.py
"""
Option-letter parsing for directives.

Options are single letters, read left to right. Numeric directives also take
integer parameters written straight after a letter ("w20" = spell numbers
below 20). Once an uppercase letter is seen the parser folds case: the
uppercase letter is read as its lowercase option and every later lowercase
letter is skipped.

Problems are returned as ParseIssue records, never raised, so the compiler
can report every bad directive in one go.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from inflexion.core.domain.models import NounOptions, NumericOptions, ParseIssue

_NUMBER_CHARS = frozenset("0123456789+-")

# Letters that switch on a single NumericOptions flag.
_NUMERIC_FLAGS: Dict[str, Tuple[str, ...]] = {
    "n": ("zero_as_no",),
    "s": ("singular_zero",),
    "a": ("use_article",),
    "w": ("cardinal_form",),
    "o": ("ordinal_form",),
    "f": ("summarize_form",),
    "e": ("use_article", "singular_zero", "zero_as_no", "cardinal_form"),
    "i": ("increment",),
    "d": ("suppress_output",),
}

# Letters that accept a numeric parameter, and the field it sets.
_NUMERIC_PARAMS = {
    "w": "cardinal_threshold",
    "o": "ordinal_threshold",
    "i": "increment_amount",
}

_NOUN_FLAGS = {
    "c": "classical",
    "p": "force_plural",
    "s": "force_singular",
}


class _IssueSink:
    """Collects issues with absolute positions and the directive text."""

    def __init__(self, fragment: str, offset: int) -> None:
        self.fragment = fragment
        self.offset = offset
        self.issues: List[ParseIssue] = []

    def add(self, index: int, message: str) -> None:
        self.issues.append(ParseIssue(self.offset + index, self.fragment, message))


def _fold(letter: str, folding: bool) -> Tuple[Optional[str], bool]:
    """Apply case folding; returns (letter or None if skipped, folding)."""
    if folding and letter.islower():
        return None, folding
    if letter.isupper():
        return letter.lower(), True
    return letter, folding


def _apply_numeric_param(
    fields: Dict[str, Any],
    option: Optional[str],
    digits: str,
    index: int,
    sink: _IssueSink,
) -> None:
    try:
        value = int(digits)
    except ValueError:
        sink.add(index, f"Improperly formatted numeric parameter {digits} to option '{option or ' '}'")
        return

    if option in _NUMERIC_PARAMS:
        fields[_NUMERIC_PARAMS[option]] = value
    elif option == "f":
        if value not in (0, 1):
            sink.add(index, f"'f' parameter only takes parameters of zero or one, not {value}")
            return
        fields["summarize_at_end"] = value == 1
    else:
        sink.add(
            index,
            f"Option '{option or ' '}' does not take a numeric parameter (value {digits})",
        )


def parse_numeric_options(
    text: str,
    fragment: str = "",
    offset: int = 0,
    start_fold: bool = False,
) -> Tuple[NumericOptions, List[ParseIssue]]:
    """
    Parse the options of a numeric (`#`) directive.

    `fragment` and `offset` only locate issues: the directive text and the
    template position of the first option character.
    """
    sink = _IssueSink(fragment, offset)
    fields: Dict[str, Any] = {}
    folding = start_fold
    previous: Optional[str] = None
    digits = ""

    for index, char in enumerate(text):
        if char in _NUMBER_CHARS:
            digits += char
            continue

        letter, folding = _fold(char, folding)
        if letter is None:
            continue

        if digits:
            _apply_numeric_param(fields, previous, digits, index, sink)
            digits = ""

        flags = _NUMERIC_FLAGS.get(letter)
        if flags is None:
            sink.add(index, f"Unhandled option {letter}")
        else:
            for name in flags:
                fields[name] = True

        previous = letter

    if digits:
        _apply_numeric_param(fields, previous, digits, len(text) - 1, sink)

    return NumericOptions(**fields), sink.issues


def parse_noun_options(
    text: str,
    fragment: str = "",
    offset: int = 0,
    start_fold: bool = False,
) -> Tuple[NounOptions, List[ParseIssue]]:
    """Parse the options of a noun (`N`) directive: c, p and s."""
    sink = _IssueSink(fragment, offset)
    fields: Dict[str, Any] = {}
    folding = start_fold

    for index, char in enumerate(text):
        letter, folding = _fold(char, folding)
        if letter is None:
            continue

        name = _NOUN_FLAGS.get(letter)
        if name is None:
            sink.add(index, f"Unhandled option {letter}")
        else:
            fields[name] = True

    return NounOptions(**fields), sink.issues


__all__ = ["parse_numeric_options", "parse_noun_options"]
