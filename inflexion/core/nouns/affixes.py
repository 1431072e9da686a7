# inflexion/core/nouns/affixes.py
"""
Reversible suffix transforms used by categorical noun rules.

An affix is a regex with a `stem` group plus a template to re-apply it:

    rule = AffixRule.incomplete("ches")
    rule.has_affix("churches")   -> True
    rule.strip("churches")       -> "chur"
    rule.attach("chur")          -> "churches"

"Complete" affixes allow an empty stem, so the suffix may stand alone as a
whole word ("man" for `*man`). "Incomplete" affixes need at least one stem
character ("-ch" never matches the bare word "ch").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern

_COMPLETE_FMT = r"(?P<stem>\w*){suffix}"
_INCOMPLETE_FMT = r"(?P<stem>\w+){suffix}"


@dataclass(frozen=True)
class AffixRule:
    """
    A suffix that can be tested for, stripped from, and attached to a word.

    Attributes:
        suffix:
            The literal suffix re-applied by `attach`.
        pattern:
            Compiled regex matched against the whole word; must define a
            `stem` group.
    """

    suffix: str
    pattern: Pattern[str]

    @classmethod
    def complete(cls, suffix: str) -> "AffixRule":
        """Affix whose suffix can also be a complete word on its own."""
        return cls(suffix, re.compile(_COMPLETE_FMT.format(suffix=suffix)))

    @classmethod
    def incomplete(cls, suffix: str) -> "AffixRule":
        """Affix that requires at least one character of stem."""
        return cls(suffix, re.compile(_INCOMPLETE_FMT.format(suffix=suffix)))

    def has_affix(self, word: str) -> bool:
        return self.pattern.fullmatch(word) is not None

    def strip(self, word: str) -> str:
        """Return the stem of `word`. Raises ValueError if the affix is absent."""
        match = self.pattern.fullmatch(word)
        if match is None:
            raise ValueError(f"'{word}' does not end with affix '{self.suffix}'")
        return match.group("stem")

    def attach(self, stem: str) -> str:
        return stem + self.suffix


__all__ = ["AffixRule"]
