# inflexion/core/english/articles.py
"""
Indefinite article selection ("a" vs "an").

A cascade of spelling heuristics over the first word of a phrase: known
silent-h and vowel-sound prefixes, single letters and acronyms that are read
letter by letter, and vowel-initial words that start with a consonant sound
("a unicorn", "a eulogy").
"""

from __future__ import annotations

import re

_FIRST_WORD_RE = re.compile(r"(\w+)\s*.*", re.DOTALL)

# Words starting with these take "an" despite the consonant.
_AN_PREFIXES = ("euler", "heir", "honest", "hono")

# Letters whose names start with a vowel sound: "an f", "an x".
_VOWEL_SOUND_LETTERS = "aedfhilmnorsx"

# Two-letter capitalised abbreviations read letter by letter ("an FM", "an NB").
_AN_ABBREVIATION_RE = re.compile(
    r"(?!FJO|[HLMNS]Y.|RY[EO]|SQU|(F[LR]?|[HL]|MN?|N|RH?|S[CHKLMNPTVW]?|X(YL)?)[AEIOU])"
    r"[FHLMNRSX][A-Z]"
)

# Vowel-initial words with a consonant sound ("a ewe", "a one-off", "a unit").
_A_VOWEL_RES = tuple(
    re.compile(pattern)
    for pattern in (r"e[uw]", r"onc?e\b", r"uni([^nmd]|mo)", r"u[bcfhjkqrst][aeiou]")
)

_UK_UN_RE = re.compile(r"U[NK][AIEO]")

# y followed by a consonant cluster sounds like a vowel ("an yttrium").
_AN_Y_RE = re.compile(r"y(b[lor]|cl[ea]|fere|gg|p[ios]|rou|tt)")


def pick_indefinite(phrase: str) -> str:
    """
    Return "a" or "an" for the given phrase.

    Only the first word is inspected. An empty phrase gets "a"; a phrase that
    does not start with a word character gets "an".
    """
    if not phrase:
        return "a"

    match = _FIRST_WORD_RE.fullmatch(phrase)
    if match is None:
        return "an"

    word = match.group(1)
    lower = word.lower()

    if lower.startswith(_AN_PREFIXES):
        return "an"

    if lower.startswith("hour") and not lower.startswith("houri"):
        return "an"

    if len(lower) == 1:
        return "an" if lower in _VOWEL_SOUND_LETTERS else "a"

    if _AN_ABBREVIATION_RE.fullmatch(word):
        return "an"

    for pattern in _A_VOWEL_RES:
        if pattern.match(lower):
            return "a"

    if _UK_UN_RE.match(word):
        return "a"

    if word == word.upper():
        return "an" if lower[0] in _VOWEL_SOUND_LETTERS else "a"

    if lower[0] in "aeiou":
        return "an"

    if _AN_Y_RE.match(lower):
        return "an"

    return "a"


__all__ = ["pick_indefinite"]
