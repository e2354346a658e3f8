# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command line entry point that ties tokenizing, matching and dispatch together.

`CliEnvironment` owns a `CommandRegistry` (with the built-in `help` command),
maps the process argument vector onto one command and forwards the result to
the provider that declared it. It is itself the provider of `help`, which
lists all registered commands, the commands of one provider, or the help of a
single command.

Input errors are reported, never raised: when the resolved command carries
input errors, each message is echoed as a notice followed by the command's
help text, and the command is not executed.

Example:
    env = CliEnvironment()
    env.register_provider(DeployCommands())
    sys.exit(env.forward_matched_command(sys.argv[1:]))
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console
from rich.text import Text

from cmdmap.command import HELP_COMMAND_NAME, BoundCommand, Command
from cmdmap.console import console as default_console
from cmdmap.exceptions import CmdMapError, InvalidProviderError
from cmdmap.help import HelpRenderer
from cmdmap.logger import logger
from cmdmap.matcher import CommandMatcher
from cmdmap.parser.parser_types import ParsedInput
from cmdmap.parser.tokenizer import ArgvTokenizer
from cmdmap.protocols import CommandProvider
from cmdmap.registry import HELP_TOPIC_ARGUMENT, CommandRegistry, build_help_command
from cmdmap.utils import get_program_invocation

EXIT_OK = 0
EXIT_USAGE = 2

MESSAGE_STATUSES = ("error", "warning", "notice", "info", "success")


class CliEnvironment:
    """
    Maps command line input to a registered command and forwards it.

    Args:
        registry (CommandRegistry | None): Registry to use. A new registry whose
            help command is provided by this environment is created if omitted.
        console (Console | None): Rich console for output.
        help_renderer (HelpRenderer | None): Formatter for help blocks.
        tokenizer (ArgvTokenizer | None): Tokenizer for raw argv.
        program (str | None): Program invocation shown in the help example.
    """

    alias = "cli-environment"

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        console: Console | None = None,
        help_renderer: HelpRenderer | None = None,
        tokenizer: ArgvTokenizer | None = None,
        program: str | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self.program: str = program or get_program_invocation()
        self.registry: CommandRegistry = registry or CommandRegistry(
            build_help_command(provider=self, invocation=self.program)
        )
        for command in self.registry:
            self._check_provider(command)
        self.tokenizer: ArgvTokenizer = tokenizer or ArgvTokenizer()
        self.matcher = CommandMatcher(self.registry, self.tokenizer)
        self.help_renderer: HelpRenderer = help_renderer or HelpRenderer()
        self._parsed_input: ParsedInput | None = None
        self._command: BoundCommand | None = None

    def register_commands(self, *commands: Command) -> None:
        """
        Register commands with the environment.

        Raises:
            InvalidProviderError: If a command has no provider to execute it.
            CommandAlreadyExistsError: If a command name is already registered.
        """
        for command in commands:
            self._check_provider(command)
        self.registry.register(*commands)

    def _check_provider(self, command: Command) -> None:
        if command.provider is None and command.name != HELP_COMMAND_NAME:
            raise InvalidProviderError(
                f"Command '{command.name}' has no provider to execute it."
            )

    def register_provider(self, provider: Any) -> None:
        """Register every command a provider declares via `get_commands()`."""
        if not isinstance(provider, CommandProvider):
            raise InvalidProviderError(
                f"{type(provider).__name__} does not implement CommandProvider."
            )
        get_commands = getattr(provider, "get_commands", None)
        if not callable(get_commands):
            raise InvalidProviderError(
                f"Command provider '{provider.alias}' has no get_commands()."
            )
        self.register_commands(*get_commands())

    @property
    def command(self) -> BoundCommand | None:
        return self._command

    @property
    def parsed_input(self) -> ParsedInput | None:
        return self._parsed_input

    @property
    def input_errors(self) -> list[str]:
        return list(self._command.input_errors) if self._command else []

    def map_input(self, argv: Sequence[str] | None = None) -> BoundCommand:
        """
        Tokenize and match the argument vector, once per environment.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.
        """
        if self._command is not None:
            return self._command
        if argv is None:
            argv = sys.argv[1:]
        self._parsed_input = self.tokenizer.tokenize(argv)
        self._command = self.matcher.match(self._parsed_input)
        return self._command

    def reset(self) -> None:
        self._parsed_input = None
        self._command = None

    def forward_matched_command(self, argv: Sequence[str] | None = None) -> int:
        """
        Map input and hand the resolved command to its provider.

        Returns:
            int: Exit status; the provider's integer return value, 0 for any
                other return value, or 2 when the input had errors.
        """
        command = self.map_input(argv)
        provider = self._provider_for(command)

        if command.has_errors and command.name != HELP_COMMAND_NAME:
            self.report_input_errors(command)
            return EXIT_USAGE

        logger.info(
            "Forwarding command '%s' to provider '%s'.", command.name, provider.alias
        )
        result = provider.execute_command(command)
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return EXIT_OK

    def _provider_for(self, command: BoundCommand) -> Any:
        if command.provider is None and command.name == HELP_COMMAND_NAME:
            return self
        return command.provider

    def report_input_errors(self, command: BoundCommand) -> None:
        for message in command.input_errors:
            self.echo_message(message.replace("\n", "\n  "), "notice")
        self.echo_message("")
        self.print_help(command)

    def echo_message(
        self, message: Any, status: str = "", no_trailing_newline: bool = False
    ) -> None:
        """
        Print a message, optionally prefixed with a styled status label.

        Args:
            message (Any): Gets stringified. Printed verbatim, without markup.
            status (str): One of error, warning, notice, info, success.
                Unknown statuses print as error.
            no_trailing_newline (bool): Do not end the line.
        """
        text = Text()
        if status:
            if status not in MESSAGE_STATUSES:
                status = "error"
            text.append(f"[{status}]", style=f"status.{status}")
            text.append(" ")
        text.append(str(message))
        self.console.print(
            text, end="" if no_trailing_newline else "\n", soft_wrap=True
        )

    def print_help(self, command: Command | BoundCommand) -> None:
        if isinstance(command, BoundCommand):
            command = command.command
        text = Text(self.help_renderer.render(command))
        start = len(self.help_renderer.indent)
        text.stylize("command", start, start + len(command.name))
        self.console.print(text, soft_wrap=True)

    def execute_command(self, command: BoundCommand) -> int:
        """
        Execute the built-in help command.

        Raises:
            CmdMapError: If given any command other than help.
        """
        if command.name != HELP_COMMAND_NAME:
            raise CmdMapError(
                f"Command '{command.name}' is not provided by '{self.alias}'."
            )

        status = EXIT_OK
        topic = command.arguments.get(HELP_TOPIC_ARGUMENT)
        if command.input_errors:
            for message in command.input_errors:
                self.echo_message(message.replace("\n", "\n  "), "notice")
            self.echo_message("")
            status = EXIT_USAGE
        elif topic:
            target = self.registry.lookup(topic)
            if target is not None:
                self.print_help(target)
                return EXIT_OK
            provided = self.registry.by_provider(topic)
            if provided:
                self.echo_message(f"{topic} commands:\n")
                for index, provided_command in enumerate(provided):
                    if index:
                        self.echo_message("")
                    self.print_help(provided_command)
                return EXIT_OK
            self.echo_message(f"Unknown provider or command '{topic}'.\n", "notice")
            status = EXIT_USAGE

        self.print_help(self.registry.help_command)
        others = [cmd for cmd in self.registry if cmd.name != HELP_COMMAND_NAME]
        if others:
            self.echo_message("\nCommands:")
            for other in others:
                self.echo_message("")
                self.print_help(other)
        return status

    def __str__(self) -> str:
        mapped = self._command.name if self._command else None
        return f"CliEnvironment(commands={self.registry.names()}, mapped={mapped!r})"
