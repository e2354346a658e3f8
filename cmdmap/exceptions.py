# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdmap.

Only configuration and programming errors are raised: a broken command
declaration, a duplicate registration or an unusable configuration file.
Problems with end-user input are never raised; they are accumulated as
messages on the resolved `BoundCommand` instead.

Exception Hierarchy:
- CmdMapError
    ├── CommandAlreadyExistsError
    ├── InvalidCommandError
    ├── InvalidProviderError
    └── ConfigError
"""


class CmdMapError(Exception):
    """Base exception for cmdmap."""


class CommandAlreadyExistsError(CmdMapError):
    """Exception raised when a command with the same name is already registered."""


class InvalidCommandError(CmdMapError):
    """Exception raised when a command declaration is malformed."""


class InvalidProviderError(CmdMapError):
    """Exception raised when a command provider has no usable alias or interface."""


class ConfigError(CmdMapError):
    """Exception raised when a configuration file cannot be turned into commands."""
