import io

import pytest
from rich.console import Console

from cmdmap import BoundCommand, CliEnvironment, Command
from cmdmap.exceptions import InvalidProviderError
from cmdmap.registry import CommandRegistry
from cmdmap.themes import get_theme


class DeployCommands:
    alias = "deploy-tools"

    def __init__(self):
        self.executed: list[BoundCommand] = []

    def get_commands(self):
        return [
            Command(
                name="deploy",
                description="Deploy the application.",
                arguments={"environment": "Target environment."},
                options={"force": "Skip checks."},
                short_to_long_option={"f": "force"},
                provider=self,
            ),
            Command(name="rollback", description="Roll back.", provider=self),
        ]

    def execute_command(self, command):
        self.executed.append(command)
        if command.name == "rollback":
            return "rolled back"
        return 7


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def provider():
    return DeployCommands()


@pytest.fixture
def env(buffer, provider):
    console = Console(file=buffer, width=200, color_system=None, theme=get_theme())
    env = CliEnvironment(console=console, program="cmdmap")
    env.register_provider(provider)
    return env


def test_forward_to_provider(env, provider):
    status = env.forward_matched_command(["deploy", "staging", "-fy"])
    assert status == 7
    assert len(provider.executed) == 1
    bound = provider.executed[0]
    assert bound.name == "deploy"
    assert bound.arguments == {"environment": "staging"}
    assert bound.options == {"force": True}
    assert bound.pre_confirmed is True


def test_non_int_result_maps_to_zero(env):
    assert env.forward_matched_command(["rollback"]) == 0


def test_input_errors_block_execution(env, provider, buffer):
    status = env.forward_matched_command(["deploy", "a", "b", "--bogus"])
    assert status == 2
    assert provider.executed == []
    output = buffer.getvalue()
    assert "[notice] Command 'deploy' only accepts 1 arguments, saw 2 args." in output
    assert "[notice] Command 'deploy' doesn't support option(s): bogus." in output
    assert "Deploy the application." in output
    assert "--force -f" in output


def test_map_input_is_cached_until_reset(env):
    first = env.map_input(["deploy", "prod"])
    assert env.map_input(["rollback"]) is first
    assert env.command is first
    assert env.parsed_input.arguments == ["deploy", "prod"]
    env.reset()
    assert env.command is None
    assert env.map_input(["rollback"]).name == "rollback"


def test_input_errors_property_is_a_copy(env):
    assert env.input_errors == []
    env.map_input(["bogus-cmd"])
    errors = env.input_errors
    errors.clear()
    assert env.input_errors == ["Unknown command 'bogus-cmd'."]


def test_map_input_defaults_to_sys_argv(env, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "rollback"])
    assert env.map_input().name == "rollback"


def test_command_without_provider_is_rejected_at_registration(env):
    with pytest.raises(InvalidProviderError):
        env.register_commands(Command(name="ping", description="Ping."))
    assert "ping" not in env.registry


def test_provider_commands_must_carry_a_provider(env):
    class Careless:
        alias = "careless"

        def get_commands(self):
            return [Command(name="orphan", description="No provider.")]

        def execute_command(self, command):
            return 0

    with pytest.raises(InvalidProviderError):
        env.register_provider(Careless())


def test_external_registry_commands_must_carry_a_provider():
    registry = CommandRegistry()
    registry.register(Command(name="orphan", description="No provider."))
    with pytest.raises(InvalidProviderError):
        CliEnvironment(registry=registry)


def test_register_provider_rejects_non_providers(env):
    with pytest.raises(InvalidProviderError):
        env.register_provider(object())


def test_register_provider_requires_get_commands(env):
    class NoCommands:
        alias = "nothing"

        def execute_command(self, command):
            return 0

    with pytest.raises(InvalidProviderError):
        env.register_provider(NoCommands())


@pytest.mark.parametrize("status", ["error", "warning", "notice", "info", "success"])
def test_echo_message_status(env, buffer, status):
    env.echo_message("Hello [bold]world[/bold]", status)
    assert buffer.getvalue() == f"[{status}] Hello [bold]world[/bold]\n"


def test_echo_message_unknown_status_is_error(env, buffer):
    env.echo_message("Oops", "fatal")
    assert buffer.getvalue() == "[error] Oops\n"


def test_echo_message_without_newline(env, buffer):
    env.echo_message("Continue?", no_trailing_newline=True)
    assert buffer.getvalue() == "Continue?"
