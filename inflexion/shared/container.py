# inflexion/shared/container.py
from dependency_injector import containers, providers

from inflexion.adapters.persistence.loader import load_noun_database, load_preposition_set
from inflexion.core.environment import Environment
from inflexion.core.markup.compiler import DirectiveCompiler
from inflexion.core.markup.executor import DirectiveExecutor
from inflexion.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Rule data is loaded once per process (Singleton); compilers and executors
    are cheap, stateless objects built on demand (Factory).
    """

    # 1. Configuration
    # Wrapped in a provider so tests can override it.
    config = providers.Object(settings)

    # 2. Rule Data
    prepositions = providers.Singleton(
        load_preposition_set,
        path=config.provided.PREPOSITIONS_PATH,
    )

    nouns = providers.Singleton(
        load_noun_database,
        path=config.provided.NOUNS_PATH,
        prepositions=prepositions,
        strict=config.provided.STRICT_NOUN_DB,
    )

    environment = providers.Singleton(
        Environment,
        nouns=nouns,
        prepositions=prepositions,
    )

    # 3. Markup
    compiler = providers.Factory(
        DirectiveCompiler,
        environment=environment,
        fold_from_kind=config.provided.FOLD_FROM_DIRECTIVE_KIND,
    )

    executor = providers.Factory(
        DirectiveExecutor,
        environment=environment,
    )


# Instantiate the container for global access (e.g. by the top-level helpers)
container = Container()
