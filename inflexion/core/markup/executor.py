# inflexion/core/markup/executor.py
"""
Directive executor.

Walks a compiled directive list keeping a little state:

    count             the number set by the last numeric directive
    inflect_singular  whether nouns should currently be singular
    pending article   an "a"/"an" slot waiting for the next noun

Output is built in two passes. The first pass produces a list of strings
and ArticleSlot placeholders; a numeric directive with the `a` option emits
a slot because the article depends on a noun that has not been seen yet. The
next noun directive fills the slot in. The second pass joins everything,
failing if any emitted slot was never filled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union

import structlog

from inflexion.core.domain.exceptions import (
    ExecutionError,
    TypeMismatchError,
    UnboundVariableError,
)
from inflexion.core.domain.models import (
    Directive,
    LiteralDirective,
    NounDirective,
    NumericDirective,
    SequenceDirective,
    VariableDirective,
)
from inflexion.core.english import numbers
from inflexion.core.english.articles import pick_indefinite
from inflexion.core.environment import Environment
from inflexion.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


@dataclass
class ArticleSlot:
    """Placeholder for an indefinite article, filled by the following noun."""

    index: int
    article: Optional[str] = None

    def __str__(self) -> str:
        return self.article if self.article is not None else f"{{an{self.index}}}"


Part = Union[str, ArticleSlot]


@dataclass
class ExecutionState:
    count: int = 0
    inflect_singular: bool = False
    pending_article: Optional[ArticleSlot] = None
    article_counter: int = 0
    parts: List[Part] = field(default_factory=list)

    def new_slot(self) -> ArticleSlot:
        slot = ArticleSlot(self.article_counter)
        self.article_counter += 1
        self.pending_article = slot
        return slot


class DirectiveExecutor:
    """Runs directive lists against one Environment. Holds no per-call state."""

    def __init__(self, environment: Environment) -> None:
        self.environment = environment

    def execute(
        self,
        directives: Sequence[Directive],
        bindings: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Produce the text for `directives`.

        Raises:
            UnboundVariableError: a referenced name is missing from `bindings`.
            TypeMismatchError: a bound value has the wrong type for its directive.
            ExecutionError: an article slot was never filled, or an unknown
                directive was found.
        """
        bindings = bindings or {}
        state = ExecutionState()

        with tracer.start_as_current_span("execute_template") as span:
            for directive in self._walk(directives):
                self._run(directive, state, bindings)

            text = self._render(state.parts)
            span.set_attribute("output.length", len(text))

        logger.debug("template_executed", directives=len(directives), length=len(text))
        return text

    # ------------------------------------------------------------------
    # Pass 1
    # ------------------------------------------------------------------

    @staticmethod
    def _walk(directives: Sequence[Directive]) -> Iterator[Directive]:
        """Flatten sequence directives in place, using an explicit stack."""
        stack: List[Iterator[Directive]] = [iter(directives)]
        while stack:
            directive = next(stack[-1], None)
            if directive is None:
                stack.pop()
            elif isinstance(directive, SequenceDirective):
                stack.append(iter(directive.directives))
            else:
                yield directive

    def _run(self, directive: Directive, state: ExecutionState, bindings: Mapping[str, Any]) -> None:
        if isinstance(directive, LiteralDirective):
            state.parts.append(directive.text)
        elif isinstance(directive, VariableDirective):
            state.parts.append(str(self._lookup(bindings, directive.name)))
        elif isinstance(directive, NumericDirective):
            self._run_numeric(directive, state, bindings)
        elif isinstance(directive, NounDirective):
            self._run_noun(directive, state, bindings)
        else:
            raise ExecutionError(f"Unsupported directive {directive!r}")

    @staticmethod
    def _lookup(bindings: Mapping[str, Any], name: str) -> Any:
        try:
            return bindings[name]
        except KeyError:
            raise UnboundVariableError(name) from None

    def _run_numeric(
        self, directive: NumericDirective, state: ExecutionState, bindings: Mapping[str, Any]
    ) -> None:
        opts = directive.options

        if directive.variable is not None:
            n = self._lookup(bindings, directive.variable)
            if not isinstance(n, int) or isinstance(n, bool):
                raise TypeMismatchError(directive.variable, "an integer", n)
        else:
            n = directive.value

        if opts.increment:
            n += opts.increment_amount

        state.inflect_singular = n == 1 or (n == 0 and opts.singular_zero)

        rep: Part = str(n)
        if opts.zero_as_no and n == 0:
            rep = "no"
        if opts.use_article and n == 1:
            rep = state.new_slot()

        if opts.suppress_output:
            state.count = n
            return

        if isinstance(rep, str) and rep != "no":
            if opts.cardinal_form:
                rep = numbers.cardinal(n, opts.cardinal_threshold)

            if opts.ordinal_form:
                long_form = opts.cardinal_form and n < opts.cardinal_threshold
                rep = numbers.ordinal(n, opts.ordinal_threshold, long_form)
                # "the 6th result": an ordinal always refers to one thing.
                if n < opts.ordinal_threshold:
                    n = 1
                    state.inflect_singular = True

            if opts.summarize_form:
                rep = numbers.summarize(n, opts.summarize_at_end)

        state.count = n
        state.parts.append(rep)

    def _run_noun(
        self, directive: NounDirective, state: ExecutionState, bindings: Mapping[str, Any]
    ) -> None:
        opts = directive.options

        if directive.variable is not None:
            word = self._lookup(bindings, directive.variable)
            if not isinstance(word, str):
                raise TypeMismatchError(directive.variable, "a string", word)
        else:
            word = directive.text

        noun = self.environment.nouns.lookup(word)
        plural = opts.force_plural or (not state.inflect_singular and not opts.force_singular)

        if not plural:
            form = noun.singular()
        elif opts.classical:
            form = noun.classical_plural()
        else:
            form = noun.plural()

        state.parts.append(form)

        if state.pending_article is not None:
            state.pending_article.article = pick_indefinite(form)
            state.pending_article = None

    # ------------------------------------------------------------------
    # Pass 2
    # ------------------------------------------------------------------

    @staticmethod
    def _render(parts: Sequence[Part]) -> str:
        out: List[str] = []
        for part in parts:
            if isinstance(part, ArticleSlot):
                if part.article is None:
                    raise ExecutionError(
                        f"Article placeholder {part} is not followed by a noun directive"
                    )
                out.append(part.article)
            else:
                out.append(part)
        return "".join(out)


__all__ = ["ArticleSlot", "ExecutionState", "DirectiveExecutor"]
