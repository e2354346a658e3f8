import pytest

from cmdmap.command import Command
from cmdmap.exceptions import CmdMapError, CommandAlreadyExistsError
from cmdmap.registry import HELP_TOPIC_ARGUMENT, CommandRegistry, build_help_command


class Provider:
    def __init__(self, alias):
        self.alias = alias

    def execute_command(self, command):
        return 0


def make_command(name, provider=None):
    return Command(name=name, description=f"The {name} command.", provider=provider)


def test_help_is_registered_first():
    registry = CommandRegistry()
    registry.register(make_command("deploy"))
    assert registry.names() == ["help", "deploy"]
    help_command = registry.help_command
    assert list(help_command.arguments) == [HELP_TOPIC_ARGUMENT]
    assert help_command.short_to_long_option == {"h": "help"}


def test_lookup():
    registry = CommandRegistry()
    deploy = make_command("deploy")
    registry.register(deploy)
    assert registry.lookup("deploy") is deploy
    assert registry.lookup("missing") is None
    assert "deploy" in registry
    assert "missing" not in registry
    assert len(registry) == 2
    assert list(registry)[1] is deploy


def test_register_many():
    registry = CommandRegistry()
    registry.register(make_command("a"), make_command("b"))
    assert registry.names() == ["help", "a", "b"]


def test_duplicate_name_identifies_both_registrants():
    registry = CommandRegistry()
    registry.register(make_command("deploy", Provider("first-tools")))
    with pytest.raises(CommandAlreadyExistsError) as excinfo:
        registry.register(make_command("deploy", Provider("second-tools")))
    message = str(excinfo.value)
    assert "'deploy'" in message
    assert "first-tools" in message
    assert "second-tools" in message
    assert registry.lookup("deploy").provider_alias == "first-tools"


def test_help_cannot_be_registered_twice():
    registry = CommandRegistry()
    with pytest.raises(CommandAlreadyExistsError):
        registry.register(build_help_command())


def test_register_rejects_non_commands():
    registry = CommandRegistry()
    with pytest.raises(CmdMapError):
        registry.register({"name": "deploy"})


def test_custom_help_command_must_be_named_help():
    with pytest.raises(CmdMapError):
        CommandRegistry(help_command=make_command("assist"))


def test_by_provider():
    tools = Provider("tools")
    registry = CommandRegistry()
    registry.register(
        make_command("a", tools), make_command("b", Provider("other")), make_command("c", tools)
    )
    assert [command.name for command in registry.by_provider("tools")] == ["a", "c"]
    assert registry.by_provider("nobody") == []
