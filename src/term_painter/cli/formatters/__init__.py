"""Rich formatters for CLI output.

Help, version and configuration output of the CLI go through rich; the demo
output itself goes through term-painter so it exercises the library.

Semantic Colors:
- green: success
- yellow: warning
- red: error
- blue: info
"""

from rich.console import Console
from rich.theme import Theme

PAINTER_THEME = Theme(
    {
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "blue",
        "muted": "dim",
        "highlight": "bold cyan",
    }
)

# Shared Console instance for all CLI modules
console = Console(theme=PAINTER_THEME)

__all__ = ["console", "PAINTER_THEME"]
