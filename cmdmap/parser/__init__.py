"""
cmdmap CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser_types import ParsedInput
from .tokenizer import ArgvTokenizer
from .utils import coerce_option_value

__all__ = [
    "ArgvTokenizer",
    "ParsedInput",
    "coerce_option_value",
]
