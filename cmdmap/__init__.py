"""
cmdmap CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import BoundCommand, Command
from .environment import CliEnvironment
from .help import HelpRenderer
from .logger import logger
from .matcher import CommandMatcher
from .parser import ArgvTokenizer, ParsedInput
from .protocols import CommandProvider
from .registry import CommandRegistry

__all__ = [
    "ArgvTokenizer",
    "BoundCommand",
    "CliEnvironment",
    "Command",
    "CommandMatcher",
    "CommandProvider",
    "CommandRegistry",
    "HelpRenderer",
    "ParsedInput",
    "logger",
]
