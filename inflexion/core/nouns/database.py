# inflexion/core/nouns/database.py
"""
Tiered noun rule database.

Lookup order for a word, first hit wins:

    1. user irregulars        (exact key)
    2. user rules             (categorical / compound, registration order)
    3. predefined irregulars  (exact key)
    4. predefined rules       (categorical / compound, registration order)
    5. the default rule

Predefined tiers are filled once by the loader. User tiers are filled by the
embedding application; any such mutation must happen before the database is
shared with concurrent readers.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import structlog

from inflexion.core.nouns.noun import Noun
from inflexion.core.nouns.prepositions import PrepositionSet
from inflexion.core.nouns.rules import (
    CompoundRule,
    DefaultRule,
    IrregularRule,
    NounInflectionRule,
)

logger = structlog.get_logger()

_DEFAULT_RULE = DefaultRule()


class NounDatabase:
    """Answers "which rule inflects this noun?" by tier precedence."""

    def __init__(self, prepositions: Optional[PrepositionSet] = None) -> None:
        self.prepositions = prepositions or PrepositionSet()
        self.default_rule: NounInflectionRule = _DEFAULT_RULE

        self._user_irregulars: Dict[str, IrregularRule] = {}
        self._user_rules: List[NounInflectionRule] = []
        self._predefined_irregulars: Dict[str, IrregularRule] = {}
        self._predefined_rules: List[NounInflectionRule] = []

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, word: str, include_compound: bool = True) -> Noun:
        """
        Return `word` bound to the first rule that matches it.

        With `include_compound=False` compound rules are skipped; compound
        rules use this to resolve their head noun.
        """
        rule = self._user_irregulars.get(word)
        if rule is not None:
            return Noun(word, rule)

        found = self._first_match(self._user_rules, word, include_compound)
        if found is not None:
            return Noun(word, found)

        rule = self._predefined_irregulars.get(word)
        if rule is not None:
            return Noun(word, rule)

        found = self._first_match(self._predefined_rules, word, include_compound)
        if found is not None:
            return Noun(word, found)

        return Noun(word, self.default_rule)

    def resolve_head(self, word: str) -> Noun:
        """Lookup used for the head noun of a compound."""
        return self.lookup(word, include_compound=False)

    @staticmethod
    def _first_match(
        rules: Iterable[NounInflectionRule], word: str, include_compound: bool
    ) -> Optional[NounInflectionRule]:
        for rule in rules:
            if not include_compound and isinstance(rule, CompoundRule):
                continue
            if rule.matches(word):
                return rule
        return None

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    @staticmethod
    def _register_irregular(table: Dict[str, IrregularRule], rule: IrregularRule) -> None:
        # Keyed by every form; an earlier entry for the same form is kept.
        for form in (rule.singular, rule.modern_plural, rule.classical_plural):
            if form is not None and form not in table:
                table[form] = rule

    def add_predefined_irregular(self, rule: IrregularRule) -> None:
        self._register_irregular(self._predefined_irregulars, rule)

    def add_predefined_rule(self, rule: NounInflectionRule) -> None:
        self._predefined_rules.append(rule)

    def add_user_irregular(self, rule: IrregularRule) -> None:
        self._register_irregular(self._user_irregulars, rule)
        logger.debug("user_irregular_added", singular=rule.singular)

    def add_user_rule(self, rule: NounInflectionRule) -> None:
        self._user_rules.append(rule)
        logger.debug("user_rule_added", rule=repr(rule))

    def load_user_rules(self, text: str, strict: bool = True) -> int:
        """
        Parse rule lines in the noun database format into the user tiers.

        Returns the number of rules registered.
        """
        from inflexion.adapters.persistence.loader import parse_noun_rules

        count = 0
        for rule in parse_noun_rules(text.splitlines(), self, strict=strict):
            if isinstance(rule, IrregularRule):
                self.add_user_irregular(rule)
            else:
                self.add_user_rule(rule)
            count += 1
        return count

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, int]:
        return {
            "user_irregulars": len(self._user_irregulars),
            "user_rules": len(self._user_rules),
            "predefined_irregulars": len(self._predefined_irregulars),
            "predefined_rules": len(self._predefined_rules),
        }

    def __repr__(self) -> str:
        return f"NounDatabase({self.stats()})"


__all__ = ["NounDatabase"]
