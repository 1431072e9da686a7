# inflexion/core/environment.py
"""
The rule data a template runs against.

An Environment is built once by the embedding application (or the DI
container) and handed to the compiler and executor. Nothing in the package
keeps a hidden module-level database.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from inflexion.core.nouns.database import NounDatabase
from inflexion.core.nouns.noun import Noun
from inflexion.core.nouns.prepositions import PrepositionSet


@dataclass(frozen=True)
class Environment:
    nouns: NounDatabase
    prepositions: PrepositionSet

    @classmethod
    def from_files(
        cls,
        nouns_path: Optional[str] = None,
        prepositions_path: Optional[str] = None,
        strict: bool = True,
    ) -> "Environment":
        """Load both rule files; `None` selects the packaged data."""
        from inflexion.adapters.persistence.loader import (
            load_noun_database,
            load_preposition_set,
        )

        prepositions = load_preposition_set(prepositions_path)
        nouns = load_noun_database(nouns_path, prepositions=prepositions, strict=strict)
        return cls(nouns=nouns, prepositions=prepositions)

    @classmethod
    def empty(cls) -> "Environment":
        """An environment where every noun falls through to the default rule."""
        prepositions = PrepositionSet()
        return cls(nouns=NounDatabase(prepositions), prepositions=prepositions)

    def noun(self, word: str) -> Noun:
        return self.nouns.lookup(word)


__all__ = ["Environment"]
