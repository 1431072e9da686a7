# tests/adapters/test_rule_loader.py
"""
Tests for the plain-text noun and preposition loaders.
"""

import pytest

from inflexion.adapters.persistence.loader import (
    load_noun_database,
    load_preposition_set,
    parse_noun_rules,
)
from inflexion.core.domain.exceptions import NounDatabaseError
from inflexion.core.environment import Environment
from inflexion.core.nouns.database import NounDatabase
from inflexion.core.nouns.prepositions import PrepositionSet
from inflexion.core.nouns.rules import CategoricalRule, CompoundRule, IrregularRule


@pytest.fixture
def database():
    return NounDatabase(PrepositionSet(["in", "of"]))


def parse(lines, database, strict=True):
    return list(parse_noun_rules(lines, database, strict=strict))


class TestParseNounRules:
    def test_irregular(self, database):
        (rule,) = parse(["ox => oxen"], database)
        assert isinstance(rule, IrregularRule)
        assert rule.singular == "ox"
        assert rule.modern_plural == "oxen"
        assert rule.classical_plural is None

    def test_modern_and_classical(self, database):
        (rule,) = parse(["formula => formulas|formulae"], database)
        assert rule.modern_plural == "formulas"
        assert rule.classical_plural == "formulae"

    def test_empty_side_means_no_form(self, database):
        (rule,) = parse(["alga => |algae"], database)
        assert rule.modern_plural is None
        assert rule.classical_plural == "algae"

    def test_affix_rules(self, database):
        incomplete, complete = parse(["-ch => -ches", "*man => *men"], database)
        assert isinstance(incomplete, CategoricalRule)
        assert not incomplete.matches("ch")
        assert isinstance(complete, CategoricalRule)
        assert complete.matches("man")

    def test_affix_marker_is_not_a_hyphen(self, database):
        """'-ch' must not also be registered as ' ch'."""
        assert len(parse(["-ch => -ches"], database)) == 1

    def test_hyphenated_words_get_a_spaced_variant(self, database):
        rules = parse(["mother-in-law => mothers-in-law"], database)
        assert [r.singular for r in rules] == ["mother-in-law", "mother in law"]

    def test_compound(self, database):
        rules = parse(["(SING)-(PREP)-* => (PL)-(PREP)-*"], database)
        assert len(rules) == 2
        assert all(isinstance(r, CompoundRule) for r in rules)
        assert rules[0].has_preposition

    def test_comments_and_blank_lines(self, database):
        rules = parse(["# header", "", "   ", "ox => oxen  # trailing note"], database)
        assert len(rules) == 1
        assert rules[0].modern_plural == "oxen"


class TestMalformedLines:
    @pytest.mark.parametrize(
        "line",
        ["ox oxen", "a => b => c", " => oxen", "ox => ", "-ch => *ches"],
    )
    def test_strict_mode_raises(self, database, line):
        with pytest.raises(NounDatabaseError) as exc:
            parse(["ox => oxen", line], database)
        assert exc.value.line_number == 2

    def test_lenient_mode_skips(self, database):
        rules = parse(["ox oxen", "cow => cows|kine"], database, strict=False)
        assert len(rules) == 1
        assert rules[0].singular == "cow"


class TestLoadFiles:
    def test_load_noun_database_from_path(self, tmp_path):
        path = tmp_path / "nouns.txt"
        path.write_text("ox => oxen\n-ch => -ches\n", encoding="utf-8")
        nouns = load_noun_database(path, prepositions=PrepositionSet())
        assert nouns.lookup("ox").plural() == "oxen"
        assert nouns.lookup("church").plural() == "churches"
        assert nouns.lookup("mouse").plural() == "mouses"

    def test_load_preposition_set_from_path(self, tmp_path):
        path = tmp_path / "preps.txt"
        path.write_text("# prepositions\nof\nIN\n\n", encoding="utf-8")
        prepositions = load_preposition_set(path)
        assert len(prepositions) == 2
        assert prepositions.is_preposition("in")
        assert "Of" in prepositions

    def test_packaged_prepositions(self):
        prepositions = load_preposition_set()
        assert prepositions.is_preposition("of")
        assert not prepositions.is_preposition("and")

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_noun_database(tmp_path / "nope.txt", prepositions=PrepositionSet())

    def test_environment_from_files(self, tmp_path):
        nouns = tmp_path / "nouns.txt"
        nouns.write_text("(SING)-(PREP)-* => (PL)-(PREP)-*\n", encoding="utf-8")
        preps = tmp_path / "preps.txt"
        preps.write_text("at\n", encoding="utf-8")
        environment = Environment.from_files(str(nouns), str(preps))
        assert environment.noun("man-at-arms").plural() == "mans-at-arms"
