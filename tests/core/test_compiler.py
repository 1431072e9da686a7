# tests/core/test_compiler.py
import pytest

from inflexion.core.domain.exceptions import FormatError, TokenizeError
from inflexion.core.domain.models import (
    LiteralDirective,
    NounDirective,
    NounOptions,
    NumericDirective,
    NumericOptions,
    VariableDirective,
)
from inflexion.core.markup.compiler import DirectiveCompiler, unescape


class TestCompile:
    def test_directive_list(self, compiler):
        compiled = compiler.compile("<#n:0> <N:results>")
        assert compiled.directives == (
            NumericDirective(value=0, options=NumericOptions(zero_as_no=True)),
            LiteralDirective(" "),
            NounDirective(text="results"),
        )
        assert len(compiled) == 3

    def test_variable_bodies(self, compiler):
        compiled = compiler.compile("<#:$count> <Nc:$thing>")
        assert compiled.directives[0] == NumericDirective(variable="count")
        assert compiled.directives[2] == NounDirective(
            variable="thing", options=NounOptions(classical=True)
        )

    def test_variable_reference(self, compiler):
        compiled = compiler.compile("Hello $name")
        assert compiled.directives == (LiteralDirective("Hello "), VariableDirective("name"))

    def test_negative_literal_count(self, compiler):
        assert compiler.compile("<#:-3>").directives == (NumericDirective(value=-3),)

    def test_escaped_literal_text(self, compiler):
        assert compiler.compile(r"\<b\>").directives == (LiteralDirective("<b>"),)

    def test_compilation_is_deterministic(self, compiler):
        template = "<#a:1> <N:outcome> and $rest"
        assert compiler.compile(template).directives == compiler.compile(template).directives


class TestFormatErrors:
    def test_unknown_directive_kind(self, compiler):
        with pytest.raises(FormatError) as exc:
            compiler.compile("x <Q:foo>")
        issue = exc.value.issues[0]
        assert issue.position == 2
        assert issue.fragment == "<Q:foo>"
        assert "Unhandled directive type 'Q'" in issue.message

    def test_missing_separator(self, compiler):
        with pytest.raises(FormatError) as exc:
            compiler.compile("<#n0>")
        assert "Missing ':'" in exc.value.issues[0].message

    def test_non_integer_count(self, compiler):
        with pytest.raises(FormatError) as exc:
            compiler.compile("<#:abc>")
        assert "Non-integer parameter 'abc'" in exc.value.issues[0].message

    def test_every_error_is_collected(self, compiler):
        """Compilation continues past bad directives and reports them all."""
        with pytest.raises(FormatError) as exc:
            compiler.compile("<Q:a> and <#:x> and <Nz:y>")
        issues = exc.value.issues
        assert [i.position for i in issues] == [0, 10, 22]
        assert "Encountered 3 error(s)" in str(exc.value)

    def test_parse_does_not_raise(self, compiler):
        directives, issues = compiler.parse("<#:1> <Q:x>")
        assert len(issues) == 1
        assert directives[0] == NumericDirective(value=1)

    def test_tokenize_errors_are_fatal(self, compiler):
        with pytest.raises(TokenizeError):
            compiler.compile("<#n:0")


class TestKindCaseFolding:
    def test_kind_letter_does_not_fold_by_default(self, environment):
        compiled = DirectiveCompiler(environment, fold_from_kind=False).compile("<Nc:formula>")
        assert compiled.directives[0].options.classical

    def test_kind_letter_can_start_folding(self, environment):
        compiled = DirectiveCompiler(environment, fold_from_kind=True).compile("<Nc:formula>")
        assert not compiled.directives[0].options.classical

    def test_lowercase_kind_never_folds(self, environment):
        compiled = DirectiveCompiler(environment, fold_from_kind=True).compile("<nc:formula>")
        assert compiled.directives[0].options.classical


def test_unescape():
    assert unescape(r"\$5 \\ \<") == r"$5 \ <"
