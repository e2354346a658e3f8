# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry of declared commands, keyed by command name.

The registry is append-only: commands are registered at startup and only
looked up afterwards. The built-in `help` command is always registered first
and owns the `--help` / `-h` options for every command line.
"""
from __future__ import annotations

from typing import Any, Iterator

from cmdmap.command import HELP_COMMAND_NAME, HELP_OPTION, HELP_SHORT_OPTION, Command
from cmdmap.exceptions import CommandAlreadyExistsError, CmdMapError
from cmdmap.logger import logger

HELP_TOPIC_ARGUMENT = "topic"


def build_help_command(provider: Any = None, invocation: str = "cmdmap") -> Command:
    """Return the declaration of the built-in help command."""
    return Command(
        name=HELP_COMMAND_NAME,
        description=(
            "Lists commands available. Example:\n"
            f"{invocation} command-name 'first arg value' --some-option=whatever -x"
        ),
        arguments={
            HELP_TOPIC_ARGUMENT: (
                "(optional) Help for all that provider's commands. "
                "Or help for that command."
            ),
        },
        options={HELP_OPTION: "Show this help message."},
        short_to_long_option={HELP_SHORT_OPTION: HELP_OPTION},
        provider=provider,
    )


class CommandRegistry:
    """
    Maps command names to declared `Command` objects.

    Args:
        help_command (Command | None): Declaration to use for the built-in
            help command. Defaults to `build_help_command()`.

    Raises:
        CommandAlreadyExistsError: On registering a name twice.
    """

    def __init__(self, help_command: Command | None = None) -> None:
        self._commands: dict[str, Command] = {}
        help_command = help_command or build_help_command()
        if help_command.name != HELP_COMMAND_NAME:
            raise CmdMapError(
                f"Help command must be named '{HELP_COMMAND_NAME}', "
                f"got '{help_command.name}'."
            )
        self.register(help_command)

    def register(self, *commands: Command) -> None:
        for command in commands:
            if not isinstance(command, Command):
                raise CmdMapError("command must be an instance of Command.")
            existing = self._commands.get(command.name)
            if existing is not None:
                raise CommandAlreadyExistsError(
                    f"Command '{command.name}' is not unique, already registered by "
                    f"provider '{existing.provider_alias}' (new registrant: provider "
                    f"'{command.provider_alias}')."
                )
            self._commands[command.name] = command
            logger.debug(
                "Registered command '%s' (provider '%s').",
                command.name,
                command.provider_alias,
            )

    def lookup(self, name: str) -> Command | None:
        return self._commands.get(name)

    @property
    def help_command(self) -> Command:
        return self._commands[HELP_COMMAND_NAME]

    def names(self) -> list[str]:
        return list(self._commands)

    def by_provider(self, alias: str) -> list[Command]:
        """Return the commands declared by the provider with the given alias."""
        return [
            command for command in self._commands.values() if command.provider_alias == alias
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return f"CommandRegistry(commands={self.names()})"
