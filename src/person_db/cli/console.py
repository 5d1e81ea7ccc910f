"""Rich console singleton."""

from rich.console import Console

# Global console instance
console = Console(force_terminal=False, legacy_windows=False)
