# inflexion/core/nouns/prepositions.py
"""Immutable set of recognised English prepositions."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator


class PrepositionSet:
    """
    Membership test for prepositions, used when matching compound nouns such
    as "mother-in-law" or "man of war". Entries are stored lowercase and the
    check is case-insensitive.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: FrozenSet[str] = frozenset(
            w.strip().lower() for w in words if w and w.strip()
        )

    def is_preposition(self, word: str) -> bool:
        return bool(word) and word.lower() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_preposition(word)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"PrepositionSet({len(self._words)} words)"


__all__ = ["PrepositionSet"]
