"""
cmdmap CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from pathlib import Path

from cmdmap.config import find_config, loader
from cmdmap.environment import CliEnvironment
from cmdmap.utils import setup_logging


def bootstrap() -> Path | None:
    config_path = find_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_environment() -> CliEnvironment:
    config_path = bootstrap()
    if not config_path:
        return CliEnvironment()
    return loader(config_path)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    env = get_environment()
    return env.forward_matched_command(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
