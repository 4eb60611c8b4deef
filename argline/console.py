# Argline Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argline rendering."""
from rich.console import Console

console = Console(color_system="truecolor")
