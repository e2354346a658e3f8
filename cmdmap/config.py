# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for cmdmap commands and command providers.

A configuration file (YAML or TOML) lists provider objects by dotted import
path and, optionally, extra command declarations:

    providers:
      - my_pkg.cli.CacheCommands
    commands:
      - name: deploy
        description: Deploy the application.
        provider: my_pkg.cli.deployer
        arguments:
          environment: Target environment.
        options:
          force: Skip safety checks.
        short_to_long_option:
          f: force

A provider path may point at a class (instantiated without arguments) or at
an object. A command's `provider` is either the alias of a listed provider or
a dotted import path.
"""
from __future__ import annotations

import importlib
import inspect
import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field

from cmdmap.command import Command
from cmdmap.environment import CliEnvironment
from cmdmap.exceptions import ConfigError
from cmdmap.logger import logger


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdmap.yaml",
        Path.cwd() / "cmdmap.toml",
        Path.cwd() / ".cmdmap.yaml",
        Path.cwd() / ".cmdmap.toml",
        Path(os.environ.get("CMDMAP_CONFIG", "cmdmap.yaml")),
        Path.home() / ".config" / "cmdmap" / "cmdmap.yaml",
        Path.home() / ".config" / "cmdmap" / "cmdmap.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def import_object(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.obj'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid import path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        return getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'."
        ) from error


def load_provider(dotted_path: str) -> Any:
    provider = import_object(dotted_path)
    if inspect.isclass(provider):
        provider = provider()
    return provider


class RawCommand(BaseModel):
    """Raw command model for cmdmap configuration."""

    name: str
    description: str
    provider: str | None = None
    arguments: dict[str, str] = Field(default_factory=dict)
    options: dict[str, str] = Field(default_factory=dict)
    short_to_long_option: dict[str, str] = Field(default_factory=dict)


class CommandConfig(BaseModel):
    """cmdmap configuration model."""

    program: str | None = None
    providers: list[str] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_environment(self) -> CliEnvironment:
        env = CliEnvironment(program=self.program)
        providers: dict[str, Any] = {}
        for dotted_path in self.providers:
            provider = load_provider(dotted_path)
            env.register_provider(provider)
            providers[provider.alias] = provider
        env.register_commands(*convert_commands(self.commands, providers))
        return env


def convert_commands(
    raw_commands: list[RawCommand], providers: dict[str, Any] | None = None
) -> list[Command]:
    providers = providers or {}
    commands = []
    for raw_command in raw_commands:
        provider = None
        if raw_command.provider:
            provider = providers.get(raw_command.provider) or load_provider(
                raw_command.provider
            )
        commands.append(
            Command(
                **raw_command.model_dump(exclude={"provider"}),
                provider=provider,
            )
        )
    return commands


def loader(file_path: Path | str) -> CliEnvironment:
    """
    Load cmdmap configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CliEnvironment: An environment with all configured commands registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or not a mapping.
        ConfigError: If a provider or command cannot be imported.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with providers and/or commands.\n"
            "Example:\n"
            "providers:\n"
            "  - 'my_module.MyCommands'\n"
            "commands:\n"
            "  - name: 'example'\n"
            "    description: 'Example command'\n"
            "    provider: 'my_module.provider'"
        )

    logger.debug("Loading command configuration from '%s'.", path)
    return CommandConfig.model_validate(raw_config).to_environment()
