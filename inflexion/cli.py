# inflexion/cli.py
"""
Command-line front end.

Usage:
    inflexion "<#n:$n> <N:result> found" -D n=0     # one template
    inflexion                                      # read templates from stdin
    inflexion --nouns my_nouns.txt "<#:2> <N:ox>"  # custom rule file
"""

import argparse
import re
import sys
from typing import Any, Dict, List, Optional, TextIO

import structlog

from inflexion.core.domain.exceptions import InflexionError
from inflexion.core.environment import Environment
from inflexion.core.markup.compiler import DirectiveCompiler
from inflexion.shared.config import LogFormat, settings
from inflexion.shared.logging_config import configure_logging
from inflexion.shared.observability import setup_observability

logger = structlog.get_logger()

_INT_RE = re.compile(r"[+-]?\d+")


def parse_binding(text: str) -> Dict[str, Any]:
    """Parse one `name=value` pair; integer-looking values become ints."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected name=value, got {text!r}")
    return {name: int(value) if _INT_RE.fullmatch(value) else value}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inflexion",
        description="Inflect English nouns and numbers in a template.",
    )
    parser.add_argument("template", nargs="?", help="Template to inflect (omit to read stdin)")
    parser.add_argument(
        "-D", "--define", dest="bindings", action="append", type=parse_binding, default=[],
        metavar="NAME=VALUE", help="Bind a template variable (repeatable)",
    )
    parser.add_argument("--nouns", default=settings.NOUNS_PATH, help="Noun rule file")
    parser.add_argument("--prepositions", default=settings.PREPOSITIONS_PATH, help="Preposition list")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    parser.add_argument(
        "--log-format", type=LogFormat, choices=list(LogFormat), default=settings.LOG_FORMAT,
        help="Log renderer",
    )
    parser.add_argument("--trace", action="store_true", help="Print OpenTelemetry spans")
    return parser


def run_template(compiler: DirectiveCompiler, template: str, bindings: Dict[str, Any]) -> str:
    return compiler.compile(template).execute(bindings)


def interactive(
    compiler: DirectiveCompiler,
    bindings: Dict[str, Any],
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Inflect one template per line until a blank line or end of input."""
    failures = 0
    for line in stdin:
        template = line.rstrip("\r\n")
        if not template.strip():
            break
        try:
            print(run_template(compiler, template, bindings), file=stdout)
        except InflexionError as e:
            failures += 1
            print(f"error: {e.message}", file=stderr)
    return 1 if failures else 0


def main(
    argv: Optional[List[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(level=args.log_level, log_format=args.log_format)
    if args.trace:
        setup_observability(export_to_console=True)

    bindings: Dict[str, Any] = {}
    for pair in args.bindings:
        bindings.update(pair)

    try:
        environment = Environment.from_files(
            args.nouns, args.prepositions, strict=settings.STRICT_NOUN_DB
        )
    except (InflexionError, OSError) as e:
        logger.error("rule_data_load_failed", error=str(e))
        print(f"error: {e}", file=stderr)
        return 2

    compiler = DirectiveCompiler(environment)

    if args.template is None:
        return interactive(compiler, bindings, stdin, stdout, stderr)

    try:
        print(run_template(compiler, args.template, bindings), file=stdout)
    except InflexionError as e:
        print(f"error: {e.message}", file=stderr)
        return 1
    return 0
