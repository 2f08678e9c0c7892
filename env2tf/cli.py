"""env2tf CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click
from rich.table import Table

from env2tf import __version__
from env2tf.ui import console
from env2tf.utils.logging import set_level


class CategorizedGroup(click.Group):
    """Help output grouped by category instead of click's flat command list."""

    def format_commands(self, ctx, formatter):
        """Suppress the default listing, format_help prints the categorized one."""
        pass

    COMMAND_CATEGORIES = {
        "GENERATION": {
            "title": "GENERATION",
            "description": "Write Terraform files from a .env file",
            "commands": ["generate"],
        },
        "INSPECTION": {
            "title": "INSPECTION",
            "description": "Check how a .env file is parsed",
            "commands": ["inspect"],
        },
    }

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd
            for name, cmd in self.commands.items()
            if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")

        for category_data in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category_data['title']}[/bold cyan]")
            console.print(f"[dim]{category_data['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=12)
            table.add_column("Description", style="white")

            for cmd_name in category_data["commands"]:
                if cmd_name not in registered:
                    continue
                first_line = (registered[cmd_name].help or "").split("\n")[0].strip()
                table.add_row(cmd_name, first_line.rstrip("."))

            console.print(table)

        console.print()
        console.rule()
        console.print("For detailed options: [cmd]env2tf <command> --help[/cmd]")


@click.group(cls=CategorizedGroup)
@click.version_option(version=__version__, prog_name="env2tf")
@click.help_option("-h", "--help")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr")
def cli(verbose):
    """env2tf - turn .env files into Terraform variable files.

    \b
    QUICK START:
      env2tf generate           # Interactive .env -> terraform.tfvars
      env2tf inspect .env       # Preview parsed variables"""
    if verbose:
        set_level("DEBUG")


from env2tf.commands.generate import generate
from env2tf.commands.inspect import inspect_command

cli.add_command(generate)
cli.add_command(inspect_command)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
