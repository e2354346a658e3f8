# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text, fixed-width help rendering for declared commands.

Layout of a rendered block (column 40, width 100 by default):

     deploy                                 Deploy the application.
      Arguments:
       environment                          Target environment.
      Options:
       --force -f                           Skip safety checks.

Descriptions start at a fixed column and are word-wrapped at the configured
width; newlines inside a description continue at the same column. A label
that reaches the column pushes its description onto the next line.

Rendering always uses the declaration, so a `BoundCommand` renders the same
help as the `Command` it was bound from. Output is pure text; styling is left
to the console that prints it.
"""
from __future__ import annotations

import textwrap

from cmdmap.command import BoundCommand, Command


class HelpRenderer:
    """
    Formats commands as fixed-width help blocks.

    Args:
        column (int): Column at which descriptions start.
        width (int): Maximum line width for wrapped descriptions.
        indent (str): Indent unit; the command line uses one, the section
            headings two and the entries three.
    """

    def __init__(self, column: int = 40, width: int = 100, indent: str = " ") -> None:
        if width <= column:
            raise ValueError("width must be greater than column")
        self.column = column
        self.width = width
        self.indent = indent

    def render(self, command: Command | BoundCommand) -> str:
        if isinstance(command, BoundCommand):
            command = command.command

        lines = [self._entry(self.indent + command.name, command.description)]

        section_indent = self.indent * 2
        entry_indent = self.indent * 3
        if command.arguments:
            lines.append(f"{section_indent}Arguments:")
            for name, description in command.arguments.items():
                lines.append(self._entry(entry_indent + name, description))
        else:
            lines.append(f"{section_indent}Arguments: none")

        if command.options:
            lines.append(f"{section_indent}Options:")
            for name, description in command.options.items():
                label = " ".join(
                    [f"--{name}"] + [f"-{short}" for short in command.short_options_for(name)]
                )
                lines.append(self._entry(entry_indent + label, description))
        else:
            lines.append(f"{section_indent}Options: none")

        return "\n".join(lines)

    def render_many(self, commands: list[Command] | list[BoundCommand]) -> str:
        return "\n\n".join(self.render(command) for command in commands)

    def _entry(self, label: str, description: str) -> str:
        body = self._wrap(description)
        if len(label) >= self.column:
            entry = f"{label}\n{' ' * self.column}{body}"
        else:
            entry = f"{label:<{self.column}}{body}"
        return "\n".join(line.rstrip() for line in entry.split("\n"))

    def _wrap(self, description: str) -> str:
        wrapped: list[str] = []
        for paragraph in description.split("\n"):
            wrapped.extend(
                textwrap.wrap(paragraph, self.width - self.column, break_on_hyphens=False)
                or [""]
            )
        return ("\n" + " " * self.column).join(wrapped)
