# inflexion/core/domain/models.py
"""
Value types produced by the markup compiler and consumed by the executor.

- Option records (NumericOptions, NounOptions) are frozen pydantic models.
- Directives are frozen dataclasses; a compiled template is a tuple of them.
- ParseIssue is one compile-time diagnostic.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Option records
# ---------------------------------------------------------------------------


class NumericOptions(BaseModel):
    """
    Options for a `<#...:N>` directive.

    Option letters: n (zero as "no"), s (zero is singular), a (article for one),
    w (cardinal words), o (ordinal), f (summarize), e (a+s+n+w), i (increment),
    d (print nothing).
    """

    model_config = ConfigDict(frozen=True)

    increment: bool = False
    increment_amount: int = 1

    singular_zero: bool = False
    zero_as_no: bool = False
    use_article: bool = False
    suppress_output: bool = False

    cardinal_form: bool = False
    cardinal_threshold: int = 11

    ordinal_form: bool = False
    ordinal_threshold: int = sys.maxsize

    summarize_form: bool = False
    summarize_at_end: bool = False


class NounOptions(BaseModel):
    """Options for a `<N...:word>` directive: c (classical), p (plural), s (singular)."""

    model_config = ConfigDict(frozen=True)

    classical: bool = Field(False, description="Prefer the classical plural")
    force_plural: bool = Field(False, description="Inflect as plural regardless of count")
    force_singular: bool = Field(False, description="Inflect as singular regardless of count")


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseIssue:
    """
    A single problem found while compiling a template.

    Attributes:
        position:
            Offset into the template where the problem was detected.
        fragment:
            The raw token (usually a whole directive) the problem belongs to.
        message:
            Human-readable description.
    """

    position: int
    fragment: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (at position {self.position} in {self.fragment!r})"


# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiteralDirective:
    """Text emitted verbatim."""

    text: str


@dataclass(frozen=True)
class VariableDirective:
    """`$name`, substituted from the bindings at execution time."""

    name: str


@dataclass(frozen=True)
class NumericDirective:
    """Sets the current count, from a literal value or a bound variable."""

    value: Optional[int] = None
    variable: Optional[str] = None
    options: NumericOptions = field(default_factory=NumericOptions)

    def __post_init__(self) -> None:
        if (self.value is None) == (self.variable is None):
            raise ValueError("Numeric directive needs exactly one of value / variable")
        if not isinstance(self.options, NumericOptions):
            raise TypeError(f"Numeric directive does not take {type(self.options).__name__}")


@dataclass(frozen=True)
class NounDirective:
    """Emits a noun inflected for the current count."""

    text: Optional[str] = None
    variable: Optional[str] = None
    options: NounOptions = field(default_factory=NounOptions)

    def __post_init__(self) -> None:
        if (self.text is None) == (self.variable is None):
            raise ValueError("Noun directive needs exactly one of text / variable")
        if not isinstance(self.options, NounOptions):
            raise TypeError(f"Noun directive does not take {type(self.options).__name__}")


@dataclass(frozen=True)
class SequenceDirective:
    """A nested run of directives, expanded in place during execution."""

    directives: Tuple["Directive", ...] = ()


Directive = Union[
    LiteralDirective,
    VariableDirective,
    NumericDirective,
    NounDirective,
    SequenceDirective,
]


__all__ = [
    "NumericOptions",
    "NounOptions",
    "ParseIssue",
    "LiteralDirective",
    "VariableDirective",
    "NumericDirective",
    "NounDirective",
    "SequenceDirective",
    "Directive",
]
