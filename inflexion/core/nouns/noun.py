# inflexion/core/nouns/noun.py
"""A word bound to the rule that matched it."""

from __future__ import annotations

from dataclasses import dataclass

from inflexion.core.nouns.rules import NounInflectionRule


@dataclass(frozen=True)
class Noun:
    """
    A noun as found in the database.

    Forms are derived from `rule` on every call. `plural` hands an
    already-plural word back unchanged ("results", "chateaux"); the modern
    and classical accessors pluralize the singular form, so they can switch
    between the two ("chateaux" -> "chateaus").
    """

    word: str
    rule: NounInflectionRule

    def is_singular(self) -> bool:
        return self.rule.is_singular(self.word)

    def is_plural(self) -> bool:
        return self.rule.is_plural(self.word)

    def singular(self) -> str:
        return self.rule.singularize(self.word)

    def _as_singular(self) -> str:
        return self.word if self.is_singular() else self.singular()

    def plural(self) -> str:
        if self.is_plural():
            return self.word
        return self.rule.pluralize(self.word)

    def modern_plural(self) -> str:
        return self.rule.pluralize_modern(self._as_singular())

    def classical_plural(self) -> str:
        return self.rule.pluralize_classical(self._as_singular())

    def __str__(self) -> str:
        return self.word


__all__ = ["Noun"]
