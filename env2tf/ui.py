"""Central UI handler for env2tf.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from env2tf.ui import console, print_header, print_warning

    console.print("[success]Done[/success]")
    print_header("VARIABLES")
    print_warning("No KEY=VALUE declarations found")
"""

import sys

from rich.console import Console
from rich.theme import Theme

ENV2TF_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "cmd": "bold magenta",
    "path": "bold cyan",
    "dim": "dim white",
})

console = Console(
    theme=ENV2TF_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[warning]WARNING:[/warning] {msg}")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")
