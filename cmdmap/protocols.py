# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocol implemented by command providers.

A provider is any object that declares commands and knows how to execute
them once the environment has resolved one from the command line. Providers
are identified by a lisp-cased `alias`, which the built-in help command
accepts as a topic to list all of that provider's commands.

Protocols:
- CommandProvider: Object with an `alias` and an `execute_command(command)` method.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cmdmap.command import BoundCommand


@runtime_checkable
class CommandProvider(Protocol):
    alias: str

    def execute_command(self, command: BoundCommand) -> Any: ...
