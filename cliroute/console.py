# cliroute — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for cliroute output."""
from rich.console import Console

from cliroute.themes import get_cliroute_theme

console = Console(theme=get_cliroute_theme())
