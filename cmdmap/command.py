# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the declared `Command` and the `BoundCommand` produced by matching
command line input against it.

A `Command` is a static declaration: name, description, ordered argument
slots, options and single-letter option aliases, plus the provider that
executes it. Declarations are validated on construction and never change
afterwards; a malformed declaration raises `InvalidCommandError`.

Matching never touches the declaration. `Command.bind()` hands out a fresh
`BoundCommand` whose `arguments` and `options` start as copies of the
declared descriptions and are then overwritten with the values actually
supplied on the command line.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cmdmap.exceptions import InvalidCommandError, InvalidProviderError
from cmdmap.logger import logger
from cmdmap.parser.utils import (
    ARGUMENT_NAME_PATTERN,
    COMMAND_NAME_PATTERN,
    OPTION_NAME_PATTERN,
    normalize_option_name,
)

HELP_COMMAND_NAME = "help"
HELP_OPTION = "help"
HELP_SHORT_OPTION = "h"

CONFIRM_OPTION = "yes"
CONFIRM_SHORT_OPTION = "y"
CANCEL_OPTION = "no"
CANCEL_SHORT_OPTION = "n"

# Reserved for generic confirm/cancel, as long options and as short aliases.
RESERVED_OPTIONS = (CONFIRM_OPTION, CANCEL_OPTION, CONFIRM_SHORT_OPTION, CANCEL_SHORT_OPTION)


class Command(BaseModel):
    """
    Declaration of a command line command.

    Attributes:
        name (str): Lisp-cased command name, unique within a registry.
        description (str): Non-empty human readable description.
        arguments (dict[str, str]): Ordered argument name to description.
        options (dict[str, str]): Option name to description.
        short_to_long_option (dict[str, str]): Single ASCII letter to a declared
            option name.
        provider (CommandProvider | None): Object that executes the command.

    Raises:
        InvalidCommandError: If a name, description or alias is malformed,
            reserved, or refers to an undeclared option.
        InvalidProviderError: If the provider lacks a valid alias or an
            `execute_command` method.
    """

    name: str
    description: str
    arguments: dict[str, str] = Field(default_factory=dict)
    options: dict[str, str] = Field(default_factory=dict)
    short_to_long_option: dict[str, str] = Field(default_factory=dict)
    provider: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def model_post_init(self, _: Any) -> None:
        """Validate the declaration."""
        self._validate_provider()
        if not COMMAND_NAME_PATTERN.fullmatch(self.name):
            raise InvalidCommandError(
                f"Command name '{self.name}' is not a valid lisp-cased name, "
                f"pattern {COMMAND_NAME_PATTERN.pattern}."
            )
        if not self.description.strip():
            raise InvalidCommandError(
                f"Command '{self.name}' description must be non-empty."
            )
        self._validate_arguments()
        self._validate_options()
        self._validate_short_to_long_option()

    def _validate_provider(self) -> None:
        if self.provider is None:
            return
        alias = getattr(self.provider, "alias", None)
        if not isinstance(alias, str) or not COMMAND_NAME_PATTERN.fullmatch(alias):
            raise InvalidProviderError(
                f"Alias of command provider {type(self.provider).__name__} is not "
                f"a valid lisp-cased name, pattern {COMMAND_NAME_PATTERN.pattern}."
            )
        if not callable(getattr(self.provider, "execute_command", None)):
            raise InvalidProviderError(
                f"Command provider '{alias}' has no callable execute_command()."
            )

    def _validate_arguments(self) -> None:
        for index, (arg_name, description) in enumerate(self.arguments.items()):
            if not ARGUMENT_NAME_PATTERN.fullmatch(arg_name):
                raise InvalidCommandError(
                    f"Command '{self.name}' argument {index} name '{arg_name}' is "
                    "not valid; it must be non-empty and not start with a dash."
                )
            if not description.strip():
                raise InvalidCommandError(
                    f"Command '{self.name}' argument '{arg_name}' description must "
                    "be non-empty."
                )

    def _validate_options(self) -> None:
        normalized: dict[str, str] = {}
        for index, (option, description) in enumerate(self.options.items()):
            if not OPTION_NAME_PATTERN.fullmatch(option):
                raise InvalidCommandError(
                    f"Command '{self.name}' option {index} name '{option}' is not "
                    f"valid, pattern {OPTION_NAME_PATTERN.pattern}."
                )
            if option in RESERVED_OPTIONS:
                raise InvalidCommandError(
                    f"Command '{self.name}' option '{option}' is reserved for "
                    "generic confirm/cancel."
                )
            if option == HELP_OPTION and self.name != HELP_COMMAND_NAME:
                raise InvalidCommandError(
                    f"Command '{self.name}' option '{option}' is reserved by the "
                    "help command."
                )
            if not description.strip():
                raise InvalidCommandError(
                    f"Command '{self.name}' option '{option}' description must be "
                    "non-empty."
                )
            clash = normalized.setdefault(normalize_option_name(option), option)
            if clash != option:
                raise InvalidCommandError(
                    f"Command '{self.name}' options '{clash}' and '{option}' are "
                    "the same option on the command line."
                )

    def _validate_short_to_long_option(self) -> None:
        for index, (short, option) in enumerate(self.short_to_long_option.items()):
            if len(short) != 1 or not (short.isascii() and short.isalpha()):
                raise InvalidCommandError(
                    f"Command '{self.name}' short option {index} '{short}' is not a "
                    "single ASCII letter."
                )
            if short in RESERVED_OPTIONS:
                raise InvalidCommandError(
                    f"Command '{self.name}' short option '{short}' is reserved for "
                    "generic confirm/cancel."
                )
            if short == HELP_SHORT_OPTION and self.name != HELP_COMMAND_NAME:
                raise InvalidCommandError(
                    f"Command '{self.name}' short option '{short}' is reserved by "
                    "the help command."
                )
            if option not in self.options:
                raise InvalidCommandError(
                    f"Command '{self.name}' short option '{short}' refers to "
                    f"'{option}', which is not a declared option."
                )

    @property
    def provider_alias(self) -> str | None:
        return getattr(self.provider, "alias", None)

    def short_options_for(self, option: str) -> list[str]:
        """Return the short aliases declared for a long option."""
        return [
            short for short, long in self.short_to_long_option.items() if long == option
        ]

    def bind(self) -> BoundCommand:
        """Return a fresh, unbound result for matching input onto this command."""
        return BoundCommand(
            command=self,
            arguments=dict(self.arguments),
            options=dict(self.options),
            short_to_long_option=dict(self.short_to_long_option),
        )

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', description='{self.description}', "
            f"provider='{self.provider_alias}')"
        )


@dataclass
class BoundCommand:
    """
    A command resolved from command line input.

    `arguments` and `options` start out as copies of the declared descriptions.
    Supplied positional values replace argument descriptions slot by slot and
    unfilled slots are removed. Options are replaced wholesale by the supplied
    selection via `finalize_options()`, which only happens when the input had
    no option errors.
    """

    command: Command
    arguments: dict[str, Any]
    options: dict[str, Any]
    short_to_long_option: dict[str, str] | None
    pre_confirmed: bool = False
    pre_declined: bool = False
    input_errors: list[str] = field(default_factory=list)
    options_finalized: bool = False

    @property
    def name(self) -> str:
        return self.command.name

    @property
    def description(self) -> str:
        return self.command.description

    @property
    def provider(self) -> Any:
        return self.command.provider

    @property
    def has_errors(self) -> bool:
        return bool(self.input_errors)

    def add_input_error(self, message: str) -> None:
        logger.info("[Command:%s] Input error: %s", self.name, message)
        self.input_errors.append(message)

    def finalize_options(self, selected: dict[str, Any]) -> None:
        """Replace declared option descriptions with the supplied values."""
        self.options = dict(selected)
        self.short_to_long_option = None
        self.options_finalized = True
