# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name patterns and value coercion shared by the tokenizer and command declarations.

Patterns:
- COMMAND_NAME_PATTERN: lisp-cased command names (`cache-clear`).
- ARGUMENT_NAME_PATTERN: argument names; anything not starting with a dash.
- OPTION_NAME_PATTERN: long option names (`dry-run`, `max_age`).
- SHORT_OPTIONS_PATTERN: a cluster of single-letter flags (`xvf`).

Functions:
- coerce_option_value: Speculatively convert a long option value string.
- normalize_option_name: Map an option name onto its underscore form.
"""
import re
from typing import Any

COMMAND_NAME_PATTERN = re.compile(r"[a-z][a-z0-9\-]*")
ARGUMENT_NAME_PATTERN = re.compile(r"[^\-].*", re.DOTALL)
OPTION_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_\-]*")
SHORT_OPTIONS_PATTERN = re.compile(r"[a-zA-Z]+")

_NUMERIC_PATTERN = re.compile(r"[+\-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+\-]?[0-9]+)?")


def coerce_option_value(value: str) -> Any:
    """
    Convert a long option value the way a shell user most likely meant it.

    - "true" / "false" become booleans.
    - Digit-only strings become integers.
    - Any other numeric literal ("1.5", "-3", "2e10") becomes a float.
    - Everything else, including the empty string, stays a string.

    Args:
        value (str): The raw text after `=` in `--name=value`.

    Returns:
        str | int | float | bool: The coerced value.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    if value.isascii() and value.isdigit():
        return int(value)
    if _NUMERIC_PATTERN.fullmatch(value):
        return float(value)
    return value


def normalize_option_name(name: str) -> str:
    """Return the option name with dashes replaced by underscores."""
    return name.replace("-", "_")
