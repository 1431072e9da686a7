# tests/core/test_noun_rules.py
import pytest

from inflexion.adapters.persistence.loader import populate_noun_database
from inflexion.core.domain.exceptions import InflectionLookupError
from inflexion.core.nouns.affixes import AffixRule
from inflexion.core.nouns.database import NounDatabase
from inflexion.core.nouns.prepositions import PrepositionSet
from inflexion.core.nouns.rules import CategoricalRule, DefaultRule, IrregularRule


class TestAffixRule:
    def test_incomplete_affix_needs_a_stem(self):
        affix = AffixRule.incomplete("ches")
        assert affix.has_affix("churches")
        assert not affix.has_affix("ches")
        assert affix.strip("churches") == "chur"
        assert affix.attach("chur") == "churches"

    def test_complete_affix_may_be_the_whole_word(self):
        affix = AffixRule.complete("men")
        assert affix.has_affix("men")
        assert affix.has_affix("women")
        assert affix.strip("men") == ""

    def test_strip_without_affix_raises(self):
        with pytest.raises(ValueError):
            AffixRule.incomplete("ch").strip("cat")


class TestDefaultRule:
    rule = DefaultRule()

    def test_matches_anything(self):
        assert self.rule.matches("anything")

    def test_pluralize(self):
        assert self.rule.pluralize("cat") == "cats"
        assert self.rule.pluralize("bus") == "buses"

    def test_singularize(self):
        assert self.rule.singularize("cats") == "cat"
        assert self.rule.singularize("cat") == "cat"

    @pytest.mark.parametrize("word", ["cat", "result", "table", "idea"])
    def test_round_trip(self, word):
        """singularize(pluralize(w)) == w for words not ending in s."""
        assert self.rule.singularize(self.rule.pluralize(word)) == word

    def test_number_is_decided_by_final_s(self):
        assert self.rule.is_singular("cat")
        assert self.rule.is_plural("cats")


class TestIrregularRule:
    def test_forms(self):
        rule = IrregularRule("formula", "formulas", "formulae")
        assert rule.pluralize("formula") == "formulas"
        assert rule.pluralize_modern("formula") == "formulas"
        assert rule.pluralize_classical("formula") == "formulae"
        assert rule.singularize("formulae") == "formula"

    def test_matching_is_case_insensitive(self):
        rule = IrregularRule("formula", "formulas", "formulae")
        assert rule.matches("FORMULA")
        assert rule.is_plural("Formulae")
        assert not rule.matches("formulaic")

    def test_missing_plural_falls_back(self):
        rule = IrregularRule("alga", None, "algae")
        assert rule.pluralize("alga") == "algae"
        assert rule.pluralize_modern("alga") == "algae"

    def test_prefer_classical(self):
        rule = IrregularRule("cactus", "cactuses", "cacti", prefer_classical=True)
        assert rule.pluralize("cactus") == "cacti"

    def test_needs_a_plural(self):
        with pytest.raises(InflectionLookupError):
            IrregularRule("ox", None, None)

    def test_foreign_word_is_rejected(self):
        rule = IrregularRule("ox", "oxen", None)
        with pytest.raises(InflectionLookupError):
            rule.singularize("dog")
        with pytest.raises(InflectionLookupError):
            rule.is_singular("dog")


class TestCategoricalRule:
    def test_incomplete_family(self):
        rule = CategoricalRule(AffixRule.incomplete("ch"), AffixRule.incomplete("ches"), None)
        assert rule.pluralize("church") == "churches"
        assert rule.singularize("churches") == "church"
        assert rule.is_singular("church")
        assert rule.is_plural("churches")

    def test_pluralizing_a_plural_is_a_no_op(self):
        rule = CategoricalRule(AffixRule.incomplete("ch"), AffixRule.incomplete("ches"), None)
        assert rule.pluralize("churches") == "churches"

    def test_classical_affix(self):
        rule = CategoricalRule(
            AffixRule.incomplete("eau"),
            AffixRule.incomplete("eaus"),
            AffixRule.incomplete("eaux"),
        )
        assert rule.pluralize_modern("beau") == "beaus"
        assert rule.pluralize_classical("beau") == "beaux"
        assert rule.pluralize_classical("beaus") == "beaux"

    def test_complete_family(self):
        rule = CategoricalRule(AffixRule.complete("man"), AffixRule.complete("men"), None)
        assert rule.pluralize("man") == "men"
        assert rule.pluralize("woman") == "women"
        assert rule.singularize("women") == "woman"

    def test_unrelated_word(self):
        rule = CategoricalRule(AffixRule.incomplete("ch"), AffixRule.incomplete("ches"), None)
        assert not rule.matches("cat")
        with pytest.raises(InflectionLookupError):
            rule.is_singular("cat")

    def test_needs_a_plural(self):
        with pytest.raises(InflectionLookupError):
            CategoricalRule(AffixRule.incomplete("ch"), None, None)


class TestCompoundRule:
    @pytest.fixture
    def nouns(self):
        database = NounDatabase(PrepositionSet(["in", "of"]))
        return populate_noun_database(
            database,
            [
                "*man => *men",
                "(SING)-(PREP)-* => (PL)-(PREP)-*",
                "(SING) general => (PL) general",
            ],
        )

    def test_head_noun_is_inflected(self, nouns):
        assert nouns.lookup("mother-in-law").plural() == "mothers-in-law"
        assert nouns.lookup("man-of-war").plural() == "men-of-war"

    def test_spaced_variant_is_registered(self, nouns):
        assert nouns.lookup("mother in law").plural() == "mothers in law"

    def test_singular_from_plural(self, nouns):
        noun = nouns.lookup("mothers-in-law")
        assert noun.is_plural()
        assert noun.singular() == "mother-in-law"

    def test_literal_modifier(self, nouns):
        assert nouns.lookup("attorney general").plural() == "attorneys general"
        assert nouns.lookup("attorneys general").singular() == "attorney general"

    def test_preposition_must_be_known(self, nouns):
        """'and' is not a preposition, so the default rule applies."""
        assert nouns.lookup("cat-and-dog").plural() == "cat-and-dogs"
