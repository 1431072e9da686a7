# inflexion/adapters/persistence/loader.py
"""
Loaders for the plain-text rule files.

Noun database format, one rule per line, `#` starts a comment:

    ox => oxen                       irregular
    formula => formulas|formulae     irregular, modern|classical
    -ch => -ches                     categorical, affix needs a stem
    *man => *men                     categorical, affix may be the whole word
    (SING)-(PREP)-* => (PL)-(PREP)-* compound: head noun, preposition, modifier

Either side of `|` may be empty ("no such form"). A rule containing a hyphen
inside a word is registered a second time with the hyphens replaced by spaces
("mother-in-law" and "mother in law").

Preposition file: one word per line, `#` comments.
"""

from __future__ import annotations

import re
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import structlog

from inflexion.core.domain.exceptions import InflectionLookupError, NounDatabaseError
from inflexion.core.nouns.affixes import AffixRule
from inflexion.core.nouns.database import NounDatabase
from inflexion.core.nouns.prepositions import PrepositionSet
from inflexion.core.nouns.rules import (
    CategoricalRule,
    CompoundRule,
    IrregularRule,
    NounInflectionRule,
)

logger = structlog.get_logger()

PathLike = Union[str, Path]

DATA_PACKAGE = "inflexion.data"
NOUNS_FILE = "nouns.txt"
PREPOSITIONS_FILE = "prepositions.txt"

_ARROW = "=>"

_HEAD_MARKERS = {"(SING)", "(PL)"}
_COMPOUND_TOKEN_RE = re.compile(r"(\(SING\)|\(PL\)|\(PREP\)|\*)")


# ---------------------------------------------------------------------------
# Raw text helpers
# ---------------------------------------------------------------------------


def _read_text(path: Optional[PathLike], default_name: str) -> str:
    if path is not None:
        return Path(path).read_text(encoding="utf-8")
    return resources.files(DATA_PACKAGE).joinpath(default_name).read_text(encoding="utf-8")


def _strip_comment(line: str) -> str:
    return line.split("#", 1)[0].strip()


def _split_plurals(plural: str) -> Tuple[Optional[str], Optional[str]]:
    if "|" not in plural:
        return (plural or None), None
    modern, _, classical = plural.partition("|")
    return (modern.strip() or None), (classical.strip() or None)


def _spaced_variant(line: str) -> Optional[str]:
    """
    Return `line` with word-internal hyphens replaced by spaces, or None if it
    has none. A leading "-" affix marker is not a hyphen.
    """
    changed = False

    def _form(form: str) -> str:
        nonlocal changed
        form = form.strip()
        marker, body = ("-", form[1:]) if form.startswith("-") else ("", form)
        if "-" in body:
            changed = True
        return marker + body.replace("-", " ")

    singular, _, plural = line.partition(_ARROW)
    plurals = " | ".join(_form(p) for p in plural.split("|"))
    spaced = f"{_form(singular)} {_ARROW} {plurals}"
    return spaced if changed else None


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------


def _affix_rule(
    marker: str,
    singular: str,
    modern: Optional[str],
    classical: Optional[str],
) -> CategoricalRule:
    factory = AffixRule.complete if marker == "*" else AffixRule.incomplete

    def _affix(form: Optional[str]) -> Optional[AffixRule]:
        if form is None:
            return None
        if not form.startswith(marker):
            raise ValueError(f"plural form '{form}' must start with '{marker}' like its singular")
        return factory(form[1:])

    return CategoricalRule(_affix(singular), _affix(modern), _affix(classical))  # type: ignore[arg-type]


def _compound_parts(form: str) -> Tuple[str, str]:
    """Turn a compound form into (regex, str.format template)."""
    regex: List[str] = []
    template: List[str] = []
    for piece in _COMPOUND_TOKEN_RE.split(form):
        if not piece:
            continue
        if piece in _HEAD_MARKERS:
            regex.append(r"(?P<noun>\w+)")
            template.append("{noun}")
        elif piece == "(PREP)":
            regex.append(r"(?P<preposition>\w+)")
            template.append("{preposition}")
        elif piece == "*":
            regex.append(r"(?P<scratch>\w+)")
            template.append("{scratch}")
        else:
            regex.append(re.escape(piece))
            template.append(piece.replace("{", "{{").replace("}", "}}"))
    return "".join(regex), "".join(template)


def _compound_rules(
    singular: str,
    modern: Optional[str],
    classical: Optional[str],
    database: NounDatabase,
) -> List[CompoundRule]:
    """One rule per distinct form pattern, so any of the forms is recognised."""
    sing_regex, sing_template = _compound_parts(singular)
    modern_regex, modern_template = _compound_parts(modern) if modern else (None, None)
    classical_regex, classical_template = _compound_parts(classical) if classical else (None, None)

    rules: List[CompoundRule] = []
    seen = set()
    for regex in (sing_regex, modern_regex, classical_regex):
        if regex is None or regex in seen:
            continue
        seen.add(regex)
        rules.append(
            CompoundRule(
                re.compile(regex),
                sing_template,
                modern_template,
                classical_template,
                resolve=database.resolve_head,
                prepositions=database.prepositions,
            )
        )
    return rules


def _rules_for_line(line: str, database: NounDatabase) -> List[NounInflectionRule]:
    parts = line.split(_ARROW)
    if len(parts) != 2:
        raise ValueError(f"expected exactly one '{_ARROW}'")

    singular = parts[0].strip()
    modern, classical = _split_plurals(parts[1].strip())
    if not singular:
        raise ValueError("missing singular form")
    if modern is None and classical is None:
        raise ValueError("missing plural form")

    if "(SING)" in singular:
        return list(_compound_rules(singular, modern, classical, database))
    if singular.startswith("*"):
        return [_affix_rule("*", singular, modern, classical)]
    if singular.startswith("-"):
        return [_affix_rule("-", singular, modern, classical)]
    return [IrregularRule(singular, modern, classical)]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_noun_rules(
    lines: Iterable[str],
    database: NounDatabase,
    strict: bool = True,
) -> Iterator[NounInflectionRule]:
    """
    Parse noun database lines into rules, in file order.

    `database` supplies the head-noun resolver and prepositions that compound
    rules need; nothing is registered here.

    Raises:
        NounDatabaseError: for a malformed line when `strict` is true. When
            it is false the line is logged and skipped.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = _strip_comment(raw)
        if not line:
            continue

        variants = [line]
        spaced = _spaced_variant(line)
        if spaced is not None:
            variants.append(spaced)

        for variant in variants:
            try:
                rules = _rules_for_line(variant, database)
            except (ValueError, re.error, InflectionLookupError) as e:
                if strict:
                    raise NounDatabaseError(line_number, raw.rstrip("\n"), str(e)) from e
                logger.warning(
                    "noun_rule_skipped", line_number=line_number, line=raw.strip(), error=str(e)
                )
                break
            yield from rules


def populate_noun_database(
    database: NounDatabase,
    lines: Iterable[str],
    strict: bool = True,
) -> NounDatabase:
    """Register parsed rules into the predefined tiers of `database`."""
    for rule in parse_noun_rules(lines, database, strict=strict):
        if isinstance(rule, IrregularRule):
            database.add_predefined_irregular(rule)
        else:
            database.add_predefined_rule(rule)
    return database


def load_preposition_set(path: Optional[PathLike] = None) -> PrepositionSet:
    """Load prepositions from `path`, or from the packaged list."""
    text = _read_text(path, PREPOSITIONS_FILE)
    words = (_strip_comment(line) for line in text.splitlines())
    prepositions = PrepositionSet(w for w in words if w)
    logger.info("prepositions_loaded", count=len(prepositions), source=str(path or PREPOSITIONS_FILE))
    return prepositions


def load_noun_database(
    path: Optional[PathLike] = None,
    prepositions: Optional[PrepositionSet] = None,
    strict: bool = True,
) -> NounDatabase:
    """
    Build a NounDatabase from `path`, or from the packaged rule file.

    If `prepositions` is omitted the packaged preposition list is loaded.
    """
    if prepositions is None:
        prepositions = load_preposition_set()

    text = _read_text(path, NOUNS_FILE)
    database = populate_noun_database(NounDatabase(prepositions), text.splitlines(), strict=strict)
    logger.info("noun_database_loaded", source=str(path or NOUNS_FILE), **database.stats())
    return database


__all__ = [
    "parse_noun_rules",
    "populate_noun_database",
    "load_noun_database",
    "load_preposition_set",
]
