# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw argument vector into positional arguments, long options and
short option flags.

Grammar:
- `--name` and `--name=value` are long options. A bare flag stores `True`,
  a value is coerced with `coerce_option_value`. Dashes in the name are
  stored as underscores.
- `-xyz` is a cluster of short flags `x`, `y` and `z`.
- A lone `-` and empty tokens are ignored.
- Everything else is a positional argument, kept verbatim.

Malformed option tokens (`--9lives`, `-x1`) are dropped without raising;
command line parsing stays forgiving of stray input.

Example:
    ArgvTokenizer().tokenize(["deploy", "staging", "--force", "-y"])
    # ParsedInput(arguments=['deploy', 'staging'], options={'force': True},
    #             short_options={'y'})
"""
from __future__ import annotations

from typing import Any, Sequence

from cmdmap.logger import logger
from cmdmap.parser.parser_types import ParsedInput
from cmdmap.parser.utils import (
    OPTION_NAME_PATTERN,
    SHORT_OPTIONS_PATTERN,
    coerce_option_value,
    normalize_option_name,
)


class ArgvTokenizer:
    """Turns an argument vector (program name excluded) into a `ParsedInput`."""

    def tokenize(self, argv: Sequence[str]) -> ParsedInput:
        parsed = ParsedInput()
        for token in argv:
            if not token or token == "-":
                continue
            if token.startswith("--"):
                self._handle_long_option(token, parsed)
            elif token.startswith("-"):
                self._handle_short_options(token, parsed)
            else:
                parsed.arguments.append(token)
        return parsed

    def _handle_long_option(self, token: str, parsed: ParsedInput) -> None:
        name, separator, raw_value = token[2:].partition("=")
        value: Any = coerce_option_value(raw_value) if separator else True
        if not OPTION_NAME_PATTERN.fullmatch(name):
            logger.debug("Ignoring malformed long option token: %r", token)
            return
        parsed.options[normalize_option_name(name)] = value

    def _handle_short_options(self, token: str, parsed: ParsedInput) -> None:
        cluster = token[1:]
        if not SHORT_OPTIONS_PATTERN.fullmatch(cluster):
            logger.debug("Ignoring malformed short option token: %r", token)
            return
        parsed.short_options.update(cluster)

    def __call__(self, argv: Sequence[str]) -> ParsedInput:
        return self.tokenize(argv)
