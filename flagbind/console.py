# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Flagbind output helpers."""
from rich.console import Console

console = Console()
