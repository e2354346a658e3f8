# cmdmap CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for cmdmap CLI applications."""
from rich.console import Console

from cmdmap.themes import get_theme

console = Console(color_system="truecolor", theme=get_theme())
