# inflexion/core/markup/tokenizer.py
"""
Split a template into raw tokens.

A token is one of:

    literal text          "Found "
    a variable reference  "$count"     (ends at a space, "<" or "$")
    a directive           "<#n:$count>" (may contain nested <...>)

The tokenizer only finds boundaries; the compiler decides what a token means.
A backslash escapes the next character for boundary purposes and is kept in
the token text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from inflexion.core.domain.exceptions import TokenizeError


@dataclass(frozen=True)
class Token:
    text: str
    position: int


class DirectiveTokenizer:
    """
    Lazy left-to-right scanner over a template.

    Each iteration starts a fresh scan, so one tokenizer can be iterated more
    than once.
    """

    def __init__(self, template: str) -> None:
        self.template = template

    def __iter__(self) -> Iterator[Token]:
        text = self.template
        length = len(text)
        pos = 0

        while pos < length:
            start = pos
            level = 0
            in_variable = False
            end = None

            while pos < length:
                c = text[pos]

                if c == "\\":
                    pos += 2
                    continue

                if c == "<":
                    if level == 0 and pos != start:
                        end = pos
                        break
                    level += 1

                elif c == ">":
                    if level == 0:
                        raise TokenizeError(
                            text, pos, "Attempted to close a directive without one open"
                        )
                    level -= 1
                    if level == 0:
                        pos += 1
                        end = pos
                        break

                elif c == "$" and level == 0:
                    if pos != start:
                        end = pos
                        break
                    in_variable = True

                elif c == " " and in_variable:
                    end = pos
                    break

                pos += 1

            if end is None:
                if level > 0:
                    raise TokenizeError(text, start, "Unclosed directive")
                end = length
                pos = length

            yield Token(text[start:end], start)


def tokenize(template: str) -> List[Token]:
    """Eagerly tokenize `template`."""
    return list(DirectiveTokenizer(template))


__all__ = ["Token", "DirectiveTokenizer", "tokenize"]
