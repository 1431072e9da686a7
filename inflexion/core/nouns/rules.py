# inflexion/core/nouns/rules.py
"""
Noun inflection rules.

Every rule answers the same questions about a noun string: does it apply,
is the word singular or plural, and what are its singular, modern plural and
classical plural forms. There are four variants:

- DefaultRule:      the fallback; "-s" / "-es" suffixing.
- IrregularRule:    an exact table entry ("ox" => "oxen").
- CategoricalRule:  an affix family ("-ch" => "-ches").
- CompoundRule:     a phrase built around a head noun ("mother-in-law").

Rules are immutable once built. A rule asked about a word it does not match
raises `InflectionLookupError`.
"""

from __future__ import annotations

import abc
import re
from typing import TYPE_CHECKING, Callable, Dict, Optional, Pattern

from inflexion.core.domain.exceptions import InflectionLookupError
from inflexion.core.nouns.affixes import AffixRule
from inflexion.core.nouns.prepositions import PrepositionSet

if TYPE_CHECKING:  # pragma: no cover
    from inflexion.core.nouns.noun import Noun


class NounInflectionRule(abc.ABC):
    """Base class for the noun rule variants."""

    #: Short tag used in logs and reprs.
    kind: str = "abstract"

    @abc.abstractmethod
    def matches(self, noun: str) -> bool:
        """Return True if this rule knows how to inflect `noun`."""
        raise NotImplementedError

    @abc.abstractmethod
    def is_singular(self, noun: str) -> bool:
        raise NotImplementedError

    def is_plural(self, noun: str) -> bool:
        return not self.is_singular(noun)

    @abc.abstractmethod
    def singularize(self, noun: str) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def pluralize(self, noun: str) -> str:
        """Return the preferred plural form."""
        raise NotImplementedError

    @abc.abstractmethod
    def pluralize_modern(self, noun: str) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def pluralize_classical(self, noun: str) -> str:
        raise NotImplementedError

    def _not_mine(self, noun: str) -> InflectionLookupError:
        return InflectionLookupError(f"Noun '{noun}' doesn't belong to inflection {self!r}")


# ---------------------------------------------------------------------------
# Default
# ---------------------------------------------------------------------------


class DefaultRule(NounInflectionRule):
    """Matches everything. Plural appends "s" ("es" after a final "s")."""

    kind = "default"

    def matches(self, noun: str) -> bool:
        return True

    def is_singular(self, noun: str) -> bool:
        return not noun.endswith("s")

    def singularize(self, noun: str) -> str:
        if noun.endswith("ses"):
            return noun[:-3]
        if noun.endswith("s"):
            return noun[:-1]
        return noun

    def pluralize(self, noun: str) -> str:
        if noun.endswith("s"):
            return noun + "es"
        return noun + "s"

    def pluralize_modern(self, noun: str) -> str:
        return self.pluralize(noun)

    def pluralize_classical(self, noun: str) -> str:
        return self.pluralize(noun)

    def __repr__(self) -> str:
        return "DefaultRule()"


# ---------------------------------------------------------------------------
# Irregular
# ---------------------------------------------------------------------------


class IrregularRule(NounInflectionRule):
    """
    A fixed singular with a modern and/or classical plural.

    Matching is case-insensitive against any of the three forms. The plural
    returned by `pluralize` is the modern one unless `prefer_classical` is
    set; either plural falls back to the other when missing.
    """

    kind = "irregular"

    def __init__(
        self,
        singular: str,
        modern_plural: Optional[str],
        classical_plural: Optional[str],
        prefer_classical: bool = False,
    ) -> None:
        if not singular:
            raise InflectionLookupError("Singular form must not be empty")
        if not modern_plural and not classical_plural:
            raise InflectionLookupError(
                f"Irregular noun '{singular}' needs a modern or classical plural"
            )
        self.singular = singular
        self.modern_plural = modern_plural or None
        self.classical_plural = classical_plural or None
        self.prefer_classical = prefer_classical

    def _is_singular_form(self, noun: str) -> bool:
        return noun.lower() == self.singular.lower()

    def _is_plural_form(self, noun: str) -> bool:
        lowered = noun.lower()
        return any(
            form is not None and lowered == form.lower()
            for form in (self.modern_plural, self.classical_plural)
        )

    def matches(self, noun: str) -> bool:
        return self._is_singular_form(noun) or self._is_plural_form(noun)

    def is_singular(self, noun: str) -> bool:
        if self._is_singular_form(noun):
            return True
        if self._is_plural_form(noun):
            return False
        raise self._not_mine(noun)

    def singularize(self, noun: str) -> str:
        if not self.matches(noun):
            raise self._not_mine(noun)
        return self.singular

    def pluralize(self, noun: str) -> str:
        if not self.matches(noun):
            raise self._not_mine(noun)
        if self.prefer_classical:
            return self.classical_plural or self.modern_plural  # type: ignore[return-value]
        return self.modern_plural or self.classical_plural  # type: ignore[return-value]

    def pluralize_modern(self, noun: str) -> str:
        return self.modern_plural or self.classical_plural  # type: ignore[return-value]

    def pluralize_classical(self, noun: str) -> str:
        return self.classical_plural or self.modern_plural  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"IrregularRule(singular={self.singular!r}, modern={self.modern_plural!r}, "
            f"classical={self.classical_plural!r})"
        )


# ---------------------------------------------------------------------------
# Categorical
# ---------------------------------------------------------------------------


class CategoricalRule(NounInflectionRule):
    """
    An affix family: a singular affix plus a modern and/or classical plural
    affix sharing the same stem ("-ex" => "-exes|-ices").
    """

    kind = "categorical"

    def __init__(
        self,
        singular: AffixRule,
        modern_plural: Optional[AffixRule],
        classical_plural: Optional[AffixRule],
    ) -> None:
        if modern_plural is None and classical_plural is None:
            raise InflectionLookupError(
                f"Categorical rule for '{singular.suffix}' needs a modern or classical plural"
            )
        self.singular = singular
        self.modern_plural = modern_plural
        self.classical_plural = classical_plural

    def _plural_affix_of(self, noun: str) -> Optional[AffixRule]:
        for affix in (self.modern_plural, self.classical_plural):
            if affix is not None and affix.has_affix(noun):
                return affix
        return None

    def matches(self, noun: str) -> bool:
        return self.singular.has_affix(noun) or self._plural_affix_of(noun) is not None

    def is_singular(self, noun: str) -> bool:
        if self.singular.has_affix(noun):
            return True
        if self._plural_affix_of(noun) is not None:
            return False
        raise self._not_mine(noun)

    def singularize(self, noun: str) -> str:
        if self.singular.has_affix(noun):
            return noun
        affix = self._plural_affix_of(noun)
        if affix is None:
            raise self._not_mine(noun)
        return self.singular.attach(affix.strip(noun))

    def pluralize(self, noun: str) -> str:
        if self.singular.has_affix(noun):
            target = self.modern_plural or self.classical_plural
            return target.attach(self.singular.strip(noun))  # type: ignore[union-attr]
        if self._plural_affix_of(noun) is not None:
            return noun
        raise self._not_mine(noun)

    def _pluralize_with(self, affix: AffixRule, noun: str) -> str:
        singular = self.singularize(noun) if self.is_plural(noun) else noun
        return affix.attach(self.singular.strip(singular))

    def pluralize_modern(self, noun: str) -> str:
        if self.modern_plural is None:
            return self.pluralize_classical(noun)
        return self._pluralize_with(self.modern_plural, noun)

    def pluralize_classical(self, noun: str) -> str:
        if self.classical_plural is None:
            return self.pluralize_modern(noun)
        return self._pluralize_with(self.classical_plural, noun)

    def __repr__(self) -> str:
        modern = self.modern_plural.suffix if self.modern_plural else None
        classical = self.classical_plural.suffix if self.classical_plural else None
        return (
            f"CategoricalRule(singular={self.singular.suffix!r}, modern={modern!r}, "
            f"classical={classical!r})"
        )


# ---------------------------------------------------------------------------
# Compound
# ---------------------------------------------------------------------------

NounResolver = Callable[[str], "Noun"]


class CompoundRule(NounInflectionRule):
    """
    A noun phrase whose number is carried by a head noun.

    `matcher` is a full-match regex with a `noun` group (the head) and
    optional `preposition` / `scratch` groups. The templates are
    `str.format` strings with the same field names; the head is replaced by
    its inflected form and the other groups are copied through:

        matcher:   (?P<noun>\\w+)-(?P<preposition>\\w+)-(?P<scratch>\\w+)
        singular:  {noun}-{preposition}-{scratch}
        modern:    {noun}-{preposition}-{scratch}

    The head is inflected by `resolve`, which must not itself consult compound
    rules.
    """

    kind = "compound"

    def __init__(
        self,
        matcher: Pattern[str],
        singular_template: str,
        modern_template: Optional[str],
        classical_template: Optional[str],
        resolve: NounResolver,
        prepositions: Optional[PrepositionSet] = None,
    ) -> None:
        if "noun" not in matcher.groupindex:
            raise InflectionLookupError(f"Compound pattern {matcher.pattern!r} has no head noun")
        if not modern_template and not classical_template:
            raise InflectionLookupError(
                f"Compound rule {singular_template!r} needs a modern or classical plural"
            )
        self.matcher = matcher
        self.singular_template = singular_template
        self.modern_template = modern_template or None
        self.classical_template = classical_template or None
        self.has_preposition = "preposition" in matcher.groupindex
        self._resolve = resolve
        self._prepositions = prepositions or PrepositionSet()

    def _match(self, noun: str) -> "re.Match[str]":
        match = self.matcher.fullmatch(noun)
        if match is None or not self._preposition_ok(match):
            raise self._not_mine(noun)
        return match

    def _preposition_ok(self, match: "re.Match[str]") -> bool:
        if not self.has_preposition:
            return True
        return self._prepositions.is_preposition(match.group("preposition"))

    def _render(self, template: str, match: "re.Match[str]", head: str) -> str:
        groups: Dict[str, str] = {k: v for k, v in match.groupdict().items() if v is not None}
        groups["noun"] = head
        return template.format(**groups)

    def _head(self, noun: str):
        match = self._match(noun)
        return match, self._resolve(match.group("noun"))

    def matches(self, noun: str) -> bool:
        match = self.matcher.fullmatch(noun)
        return match is not None and self._preposition_ok(match)

    def is_singular(self, noun: str) -> bool:
        _, head = self._head(noun)
        return head.is_singular()

    def singularize(self, noun: str) -> str:
        match, head = self._head(noun)
        return self._render(self.singular_template, match, head.singular())

    def pluralize(self, noun: str) -> str:
        match, head = self._head(noun)
        template = self.modern_template or self.classical_template
        return self._render(template, match, head.plural())  # type: ignore[arg-type]

    def pluralize_modern(self, noun: str) -> str:
        if self.modern_template is None:
            return self.pluralize_classical(noun)
        match, head = self._head(noun)
        return self._render(self.modern_template, match, head.modern_plural())

    def pluralize_classical(self, noun: str) -> str:
        if self.classical_template is None:
            return self.pluralize_modern(noun)
        match, head = self._head(noun)
        return self._render(self.classical_template, match, head.classical_plural())

    def __repr__(self) -> str:
        return f"CompoundRule({self.matcher.pattern!r})"


__all__ = [
    "NounInflectionRule",
    "DefaultRule",
    "IrregularRule",
    "CategoricalRule",
    "CompoundRule",
    "NounResolver",
]
