"""Interactive prompting capability.

The workflow never talks to the terminal directly; it asks a Prompter.
Production code uses ClickPrompter, tests pass a scripted stand-in.
"""

from typing import Protocol

import click


class Prompter(Protocol):
    """Capability set the generation workflow needs from the user."""

    def prompt_string(self, title: str, default: str | None = None) -> str:
        ...

    def prompt_confirm(self, title: str, default: bool = False) -> bool:
        ...


class ClickPrompter:
    """Prompter backed by ``click.prompt`` and ``click.confirm``."""

    def prompt_string(self, title: str, default: str | None = None) -> str:
        return click.prompt(title, default=default, type=str).strip()

    def prompt_confirm(self, title: str, default: bool = False) -> bool:
        return click.confirm(title, default=default)
