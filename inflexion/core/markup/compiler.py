# inflexion/core/markup/compiler.py
"""
Template compiler.

Turns a template string into a tuple of directives:

    "<#n:$count> <N:result> found"
        -> NumericDirective(variable="count", options=NumericOptions(zero_as_no=True))
           LiteralDirective(" ")
           NounDirective(text="result")
           LiteralDirective(" found")

Malformed directives do not stop compilation. Every problem is collected and,
if there was at least one, a single FormatError listing all of them is raised
once the whole template has been scanned. Tokenizer errors (unbalanced angle
brackets) are fatal straight away.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

import structlog

from inflexion.core.domain.exceptions import FormatError
from inflexion.core.domain.models import (
    Directive,
    LiteralDirective,
    NounDirective,
    NumericDirective,
    ParseIssue,
    VariableDirective,
)
from inflexion.core.environment import Environment
from inflexion.core.markup.options import parse_noun_options, parse_numeric_options
from inflexion.core.markup.tokenizer import DirectiveTokenizer, Token
from inflexion.shared.config import settings
from inflexion.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_INTEGER_RE = re.compile(r"[+-]?\d+")


def unescape(text: str) -> str:
    """Drop the backslash from every escaped character."""
    return _ESCAPE_RE.sub(r"\1", text)


@dataclass(frozen=True)
class CompiledTemplate:
    """A compiled template, ready to run against any number of bindings."""

    template: str
    directives: Tuple[Directive, ...]
    environment: Environment

    def execute(self, bindings: Optional[Mapping[str, Any]] = None) -> str:
        from inflexion.core.markup.executor import DirectiveExecutor

        return DirectiveExecutor(self.environment).execute(self.directives, bindings or {})

    def execute_positional(self, *args: Any) -> str:
        """Run with `args` bound to the names "1", "2", ..."""
        return self.execute({str(i): value for i, value in enumerate(args, start=1)})

    def __len__(self) -> int:
        return len(self.directives)


class DirectiveCompiler:
    """
    Compiles templates against one Environment.

    `fold_from_kind` decides whether an uppercase directive letter (`<N...>`)
    starts option parsing in case-folding mode; it defaults to
    `settings.FOLD_FROM_DIRECTIVE_KIND`.
    """

    def __init__(
        self,
        environment: Environment,
        fold_from_kind: Optional[bool] = None,
    ) -> None:
        self.environment = environment
        self.fold_from_kind = (
            settings.FOLD_FROM_DIRECTIVE_KIND if fold_from_kind is None else fold_from_kind
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, template: str) -> CompiledTemplate:
        """
        Compile `template`.

        Raises:
            TokenizeError: on an unmatched ">" or an unclosed directive.
            FormatError: if any directive was malformed.
        """
        with tracer.start_as_current_span("compile_template") as span:
            span.set_attribute("template.length", len(template))
            directives, issues = self.parse(template)
            if issues:
                logger.info("template_compile_failed", template=template, issue_count=len(issues))
                raise FormatError(template, issues)

            span.set_attribute("template.directives", len(directives))
            logger.debug("template_compiled", template=template, directives=len(directives))
            return CompiledTemplate(template, tuple(directives), self.environment)

    def parse(self, template: str) -> Tuple[List[Directive], List[ParseIssue]]:
        """Compile without raising FormatError; returns directives and issues."""
        directives: List[Directive] = []
        issues: List[ParseIssue] = []

        for token in DirectiveTokenizer(template):
            directive = self._compile_token(token, issues)
            if directive is not None:
                directives.append(directive)

        return directives, issues

    # ------------------------------------------------------------------
    # Per-token dispatch
    # ------------------------------------------------------------------

    def _compile_token(self, token: Token, issues: List[ParseIssue]) -> Optional[Directive]:
        text = token.text

        if text.startswith("$"):
            name = text[1:]
            if not name:
                issues.append(ParseIssue(token.position, text, "Empty variable reference"))
                return None
            return VariableDirective(name)

        if text.startswith("<"):
            return self._compile_directive(token, issues)

        return LiteralDirective(unescape(text))

    def _compile_directive(self, token: Token, issues: List[ParseIssue]) -> Optional[Directive]:
        text = token.text
        inner = text[1:-1]

        if not inner:
            issues.append(ParseIssue(token.position, text, "Empty directive"))
            return None

        kind, rest = inner[0], inner[1:]
        if ":" not in rest:
            issues.append(
                ParseIssue(token.position, text, f"Missing ':' separator in {kind} directive")
            )
            return None

        option_text, body = rest.split(":", 1)
        option_offset = token.position + 2
        start_fold = self.fold_from_kind and kind.isupper()

        if kind == "#":
            options, option_issues = parse_numeric_options(
                option_text, text, option_offset, start_fold
            )
            issues.extend(option_issues)
            return self._numeric(token, body, options, issues)

        if kind in ("n", "N"):
            options, option_issues = parse_noun_options(
                option_text, text, option_offset, start_fold
            )
            issues.extend(option_issues)
            if body.startswith("$"):
                return NounDirective(variable=body[1:], options=options)
            return NounDirective(text=unescape(body), options=options)

        issues.append(ParseIssue(token.position, text, f"Unhandled directive type '{kind}'"))
        return None

    @staticmethod
    def _numeric(token, body, options, issues) -> Optional[Directive]:
        if body.startswith("$"):
            return NumericDirective(variable=body[1:], options=options)
        if _INTEGER_RE.fullmatch(body.strip()) is None:
            issues.append(
                ParseIssue(token.position, token.text, f"Non-integer parameter '{body}' to # directive")
            )
            return None
        return NumericDirective(value=int(body), options=options)


__all__ = ["CompiledTemplate", "DirectiveCompiler", "unescape"]
