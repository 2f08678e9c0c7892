"""Show how a .env file will be interpreted, without writing anything."""

import click
from rich.table import Table

from env2tf.config_runtime import load_runtime_config
from env2tf.envfile import read_env_file
from env2tf.models import EntryOrder
from env2tf.ui import console, print_header, print_warning
from env2tf.utils.error_handler import handle_exceptions


@click.command("inspect")
@handle_exceptions
@click.argument("env_file", required=False)
@click.option("--root", default=".", help="Directory holding the optional .env2tf.json config")
@click.option(
    "--order",
    type=click.Choice(EntryOrder.CHOICES),
    default=None,
    help="Row order (default: sorted)",
)
def inspect_command(env_file, root, order):
    """List the variables parsed from a .env file.

    Prints one row per variable with its value and description exactly
    as they would be written by 'env2tf generate'. Lines without '=' and
    comment lines are not shown.

    Examples:
      env2tf inspect
      env2tf inspect config/.env --order file"""
    config = load_runtime_config(root)
    path = env_file or config["paths"]["env_file"]
    env_set = read_env_file(path)

    print_header(f"VARIABLES: {path}")
    if not env_set:
        print_warning("No KEY=VALUE declarations found")
        return

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Key", style="cmd")
    table.add_column("Value", style="white")
    table.add_column("Description", style="dim")

    for entry in env_set.ordered(order or config["render"]["order"]):
        table.add_row(entry.key, entry.value, entry.description or "")

    console.print(table)
    console.print(f"\n{len(env_set)} variables, {len(env_set.descriptions())} with descriptions")
