# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Data structures produced by the argv tokenizer.

`ParsedInput` holds the three kinds of tokens found in an argument vector:
positional arguments in encountered order, long options keyed by their
normalized name, and the set of short option letters seen.
"""
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParsedInput:
    """Tokenized command line input."""

    arguments: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    short_options: set[str] = field(default_factory=set)

    def has_option(self, name: str, short: str | None = None) -> bool:
        """Check if a long option, or its short alias, was supplied."""
        return name in self.options or (short is not None and short in self.short_options)

    def copy(self) -> "ParsedInput":
        return ParsedInput(
            arguments=list(self.arguments),
            options=dict(self.options),
            short_options=set(self.short_options),
        )

    def is_empty(self) -> bool:
        return not (self.arguments or self.options or self.short_options)
