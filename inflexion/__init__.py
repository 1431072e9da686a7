# inflexion/__init__.py
"""
Inflexion - English inflection through a small template markup.

    >>> from inflexion import inflect
    >>> inflect("<#n:$1> <N:result> found", 0)
    'no results found'
    >>> inflect("<#a:1> <N:outcome>")
    'an outcome'

Templates mix literal text with directives:

    <#opts:N>     set the current count (N is an integer or $variable)
    <Nopts:word>  print `word` inflected for the current count
    $name         print a bound variable
"""

from typing import Any, Mapping, Optional

from inflexion.core.domain.exceptions import (
    ExecutionError,
    FormatError,
    InflectionLookupError,
    InflexionError,
    NounDatabaseError,
    NumberRangeError,
    TokenizeError,
    TypeMismatchError,
    UnboundVariableError,
)
from inflexion.core.english.articles import pick_indefinite
from inflexion.core.environment import Environment
from inflexion.core.markup.compiler import CompiledTemplate, DirectiveCompiler
from inflexion.core.nouns.noun import Noun

__version__ = "1.0.0"


class Inflexion:
    """Facade bundling an Environment with compile / inflect helpers."""

    def __init__(self, environment: Environment, fold_from_kind: Optional[bool] = None):
        self.environment = environment
        self._compiler = DirectiveCompiler(environment, fold_from_kind=fold_from_kind)

    def compile(self, template: str) -> CompiledTemplate:
        return self._compiler.compile(template)

    def inflect(self, template: str, *args: Any, **bindings: Any) -> str:
        """Compile and run `template`; positional args bind as "1", "2", ..."""
        values = {str(i): value for i, value in enumerate(args, start=1)}
        values.update(bindings)
        return self.compile(template).execute(values)

    def noun(self, word: str) -> Noun:
        return self.environment.noun(word)


def default_environment() -> Environment:
    """The process-wide Environment built from the configured rule files."""
    from inflexion.shared.container import container

    return container.environment()


def compile_template(template: str, environment: Optional[Environment] = None) -> CompiledTemplate:
    """Compile `template` against `environment` (the default one if omitted)."""
    from inflexion.shared.container import container

    if environment is None:
        return container.compiler().compile(template)
    return container.compiler(environment=environment).compile(template)


def execute(template: str, bindings: Optional[Mapping[str, Any]] = None) -> str:
    return compile_template(template).execute(bindings)


def inflect(template: str, *args: Any) -> str:
    """Compile and run `template` with `args` bound to "1", "2", ..."""
    return compile_template(template).execute_positional(*args)


def inflect_format(fmt: str, *args: Any) -> str:
    """%-format `fmt` with `args`, then inflect the result."""
    return compile_template(fmt % args if args else fmt).execute()


__all__ = [
    "Inflexion",
    "Environment",
    "CompiledTemplate",
    "DirectiveCompiler",
    "Noun",
    "compile_template",
    "default_environment",
    "execute",
    "inflect",
    "inflect_format",
    "pick_indefinite",
    "InflexionError",
    "FormatError",
    "TokenizeError",
    "ExecutionError",
    "UnboundVariableError",
    "TypeMismatchError",
    "InflectionLookupError",
    "NounDatabaseError",
    "NumberRangeError",
]
