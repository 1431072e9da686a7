# tests/conftest.py
import pytest
from dependency_injector import providers

from inflexion.adapters.persistence.loader import load_noun_database, load_preposition_set
from inflexion.core.environment import Environment
from inflexion.core.markup.compiler import DirectiveCompiler
from inflexion.core.markup.executor import DirectiveExecutor
from inflexion.shared.container import Container


@pytest.fixture(scope="session")
def prepositions():
    """The packaged preposition list."""
    return load_preposition_set()


@pytest.fixture(scope="session")
def environment(prepositions):
    """
    Environment built from the packaged rule files.
    Shared across the session, so tests must not register user rules on it.
    """
    nouns = load_noun_database(prepositions=prepositions)
    return Environment(nouns=nouns, prepositions=prepositions)


@pytest.fixture(scope="function")
def fresh_nouns(prepositions):
    """A private NounDatabase that tests may mutate."""
    return load_noun_database(prepositions=prepositions)


@pytest.fixture(scope="function")
def compiler(environment):
    return DirectiveCompiler(environment, fold_from_kind=False)


@pytest.fixture(scope="function")
def executor(environment):
    return DirectiveExecutor(environment)


@pytest.fixture(scope="function")
def render(compiler):
    """Compile and execute a template in one call."""
    def _render(template, **bindings):
        return compiler.compile(template).execute(bindings)
    return _render


@pytest.fixture(scope="function")
def container(environment):
    """
    Sets up the Dependency Injection Container for testing.
    The rule data provider is overridden with the session environment so no
    test reloads the files through the container.
    """
    container = Container()
    container.environment.override(providers.Object(environment))

    yield container

    container.environment.reset_override()
