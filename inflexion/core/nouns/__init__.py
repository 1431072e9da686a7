# inflexion/core/nouns/__init__.py
"""Noun inflection rules and the tiered database that selects them."""

from inflexion.core.nouns.affixes import AffixRule
from inflexion.core.nouns.database import NounDatabase
from inflexion.core.nouns.noun import Noun
from inflexion.core.nouns.prepositions import PrepositionSet
from inflexion.core.nouns.rules import (
    CategoricalRule,
    CompoundRule,
    DefaultRule,
    IrregularRule,
    NounInflectionRule,
)

__all__ = [
    "AffixRule",
    "NounDatabase",
    "Noun",
    "PrepositionSet",
    "NounInflectionRule",
    "DefaultRule",
    "IrregularRule",
    "CategoricalRule",
    "CompoundRule",
]
