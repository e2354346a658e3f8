# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves tokenized command line input to exactly one registered command.

Resolution order:
1. `--help` / `-h` always selects the built-in help command. A positional
   argument, if any, becomes its `topic`.
2. Otherwise the first positional argument selects a command by name. The
   remaining positionals bind onto the command's argument slots in order,
   `--yes` / `-y` and `--no` / `-n` are consumed as pre-confirmation flags,
   and long and short options are checked against the declaration.
3. If nothing matched, the help command is selected and an unknown first
   positional argument is reported.

User-input problems never raise. They are collected on the returned
`BoundCommand.input_errors`, and the caller decides how to report them.

Example:
    matcher = CommandMatcher(registry)
    bound = matcher.match_argv(["deploy", "staging", "--force", "-y"])
    # bound.name == "deploy"
    # bound.arguments == {"environment": "staging"}
    # bound.options == {"force": True}
    # bound.pre_confirmed is True
"""
from __future__ import annotations

from typing import Any, Sequence

from cmdmap.command import (
    CANCEL_OPTION,
    CANCEL_SHORT_OPTION,
    CONFIRM_OPTION,
    CONFIRM_SHORT_OPTION,
    HELP_OPTION,
    HELP_SHORT_OPTION,
    BoundCommand,
    Command,
)
from cmdmap.logger import logger
from cmdmap.parser.parser_types import ParsedInput
from cmdmap.parser.tokenizer import ArgvTokenizer
from cmdmap.parser.utils import normalize_option_name
from cmdmap.registry import HELP_TOPIC_ARGUMENT, CommandRegistry


class CommandMatcher:
    """
    Matches `ParsedInput` against a `CommandRegistry`.

    The registry's declarations are never modified; every call to `match()`
    returns a new `BoundCommand`, so the same input can be matched any number
    of times.
    """

    def __init__(
        self, registry: CommandRegistry, tokenizer: ArgvTokenizer | None = None
    ) -> None:
        self.registry = registry
        self.tokenizer = tokenizer or ArgvTokenizer()

    def match_argv(self, argv: Sequence[str]) -> BoundCommand:
        """Tokenize `argv` (program name excluded) and match it."""
        return self.match(self.tokenizer.tokenize(argv))

    def match(self, parsed: ParsedInput) -> BoundCommand:
        parsed = parsed.copy()

        if parsed.has_option(HELP_OPTION, HELP_SHORT_OPTION):
            return self._bind_help(parsed, keep_topic=True)

        if parsed.arguments:
            command = self.registry.lookup(parsed.arguments[0])
            if command is not None:
                return self._bind_command(command, parsed)

        bound = self._bind_help(parsed, keep_topic=False)
        if parsed.arguments:
            bound.add_input_error(f"Unknown command '{parsed.arguments[0]}'.")
        return bound

    def _bind_help(self, parsed: ParsedInput, keep_topic: bool) -> BoundCommand:
        bound = self.registry.help_command.bind()
        if keep_topic and parsed.arguments:
            bound.arguments[HELP_TOPIC_ARGUMENT] = parsed.arguments[0]
        else:
            bound.arguments.pop(HELP_TOPIC_ARGUMENT, None)
        bound.finalize_options({})
        logger.debug(
            "Resolved input to help command (topic=%r).",
            bound.arguments.get(HELP_TOPIC_ARGUMENT),
        )
        return bound

    def _bind_command(self, command: Command, parsed: ParsedInput) -> BoundCommand:
        bound = command.bind()
        parsed.arguments.pop(0)
        logger.debug("Resolved input to command '%s'.", command.name)

        self._bind_arguments(bound, parsed.arguments)
        self._consume_confirmation(bound, parsed)

        selected: dict[str, Any] = {}
        option_errors = self._select_long_options(bound, parsed.options, selected)
        option_errors |= self._select_short_options(
            bound, parsed.short_options, selected
        )
        if not option_errors:
            bound.finalize_options(selected)
        return bound

    def _bind_arguments(self, bound: BoundCommand, values: list[str]) -> None:
        declared = list(bound.arguments)
        supplied = len(values)

        if supplied and not declared:
            bound.add_input_error(
                f"Command '{bound.name}' accepts no arguments, saw {supplied} args."
            )
            return

        for slot, value in zip(declared, values):
            bound.arguments[slot] = value
        for slot in declared[supplied:]:
            del bound.arguments[slot]

        if supplied > len(declared):
            bound.add_input_error(
                f"Command '{bound.name}' only accepts {len(declared)} arguments, "
                f"saw {supplied} args."
            )

    def _consume_confirmation(self, bound: BoundCommand, parsed: ParsedInput) -> None:
        confirmed = self._pop_flag(parsed, CONFIRM_OPTION, CONFIRM_SHORT_OPTION)
        declined = self._pop_flag(parsed, CANCEL_OPTION, CANCEL_SHORT_OPTION)
        if confirmed and declined:
            bound.add_input_error(
                f"Command '{bound.name}' received both '{CONFIRM_OPTION}' and "
                f"'{CANCEL_OPTION}' confirmation options."
            )
            return
        bound.pre_confirmed = confirmed
        bound.pre_declined = declined

    def _pop_flag(self, parsed: ParsedInput, option: str, short: str) -> bool:
        present = False
        if option in parsed.options:
            present = parsed.options.pop(option) is True
        if short in parsed.short_options:
            parsed.short_options.discard(short)
            present = True
        return present

    def _select_long_options(
        self, bound: BoundCommand, supplied: dict[str, Any], selected: dict[str, Any]
    ) -> bool:
        declared = {normalize_option_name(option): option for option in bound.command.options}
        unsupported = []
        for name, value in supplied.items():
            option = declared.get(name)
            if option is None:
                unsupported.append(name)
            else:
                selected[option] = value
        if unsupported:
            bound.add_input_error(
                f"Command '{bound.name}' doesn't support option(s): "
                f"{', '.join(unsupported)}."
            )
            return True
        return False

    def _select_short_options(
        self, bound: BoundCommand, supplied: set[str], selected: dict[str, Any]
    ) -> bool:
        aliases = bound.short_to_long_option or {}
        unsupported = []
        for short in sorted(supplied):
            option = aliases.get(short)
            if option is None:
                unsupported.append(short)
            elif option not in selected:
                selected[option] = True
        if unsupported:
            bound.add_input_error(
                f"Command '{bound.name}' doesn't support short option(s): "
                f"{', '.join(unsupported)}."
            )
            return True
        return False
