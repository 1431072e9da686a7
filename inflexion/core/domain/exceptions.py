# inflexion/core/domain/exceptions.py
"""
Exception hierarchy for the inflexion package.

Three families of failures are kept apart:

    - compile-time problems (FormatError, TokenizeError)
    - run-time problems while executing a compiled template (ExecutionError)
    - broken rule data (InflectionLookupError, NounDatabaseError)

Catch `InflexionError` to handle any of them in a single place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from inflexion.core.domain.models import ParseIssue


class InflexionError(Exception):
    """Base class for all inflexion exceptions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Compile-time errors ---


class FormatError(InflexionError):
    """
    Raised once a template has been fully scanned and at least one directive
    was malformed. Carries every issue found, not just the first.
    """

    def __init__(self, template: str, issues: Iterable["ParseIssue"]):
        self.template = template
        self.issues: Tuple["ParseIssue", ...] = tuple(issues)
        super().__init__(self._render())

    def _render(self) -> str:
        lines = [
            f"Encountered {len(self.issues)} error(s) parsing template {self.template!r}:"
        ]
        lines.extend(f"\t{issue}" for issue in self.issues)
        return "\n".join(lines)


class TokenizeError(InflexionError):
    """Raised when directive boundaries cannot be determined (unbalanced < / >)."""

    def __init__(self, template: str, position: int, reason: str):
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in template {template!r}")


# --- Run-time errors ---


class ExecutionError(InflexionError):
    """Raised when executing a compiled template fails. No partial output is returned."""


class UnboundVariableError(ExecutionError):
    """Raised when a template references a variable that was not bound."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unbound variable '{name}'")


class TypeMismatchError(ExecutionError):
    """Raised when a bound value has the wrong type for the directive that consumes it."""

    def __init__(self, name: str, expected: str, actual: object):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Variable '{name}' must be {expected}, got {type(actual).__name__} ({actual!r})"
        )


# --- Data errors ---


class InflectionLookupError(InflexionError):
    """Raised when a noun rule is built or queried in violation of its invariants."""


class NounDatabaseError(InflexionError):
    """Raised for a malformed line in a noun database file."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Improperly formatted noun definition on line {line_number} ({line!r}): {reason}")


class NumberRangeError(InflexionError, ValueError):
    """Raised when a number is outside the range a formatter supports."""


__all__ = [
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
