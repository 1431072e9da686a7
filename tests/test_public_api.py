# tests/test_public_api.py
"""
Smoke tests for the top-level helpers and the DI container wiring.
"""

from dependency_injector import providers

import inflexion
from inflexion import Environment, Inflexion, compile_template, inflect, inflect_format


class TestTopLevelHelpers:
    def test_inflect_binds_positional_args(self):
        assert inflect("<#n:$1> <N:result> found", 0) == "no results found"
        assert inflect("<#a:1> <N:outcome>") == "an outcome"

    def test_inflect_format(self):
        assert inflect_format("<#:%d> <N:%s>", 2, "child") == "2 children"

    def test_compile_template_with_environment(self):
        compiled = compile_template("<#:2> <N:ox>", Environment.empty())
        assert compiled.execute() == "2 oxs"

    def test_execute_with_mapping(self):
        assert inflexion.execute("<#:$n> <N:mouse>", {"n": 3}) == "3 mice"

    def test_default_environment_is_shared(self):
        assert inflexion.default_environment() is inflexion.default_environment()


class TestFacade:
    def test_inflect_with_keywords(self, environment):
        engine = Inflexion(environment)
        assert engine.inflect("<#:$1> <N:$word>", 1, word="ox") == "1 ox"

    def test_noun_lookup(self, environment):
        engine = Inflexion(environment)
        assert engine.noun("ox").plural() == "oxen"
        assert engine.noun("oxen").singular() == "ox"


class TestContainer:
    def test_compiler_uses_environment(self, container):
        compiled = container.compiler().compile("<#:2> <N:goose>")
        assert compiled.execute() == "2 geese"

    def test_override_environment(self, container):
        container.environment.override(providers.Object(Environment.empty()))
        assert container.compiler().compile("<#:2> <N:goose>").execute() == "2 gooses"

    def test_executor_factory(self, container):
        executor = container.executor()
        assert executor.environment is container.environment()
