"""Generate Terraform .tfvars and variables.tf files from a .env file."""

import click

from env2tf.config_runtime import load_runtime_config
from env2tf.models import EntryOrder
from env2tf.prompts import ClickPrompter
from env2tf.terraform.emitter import DescriptionFallback, TerraformEmitter
from env2tf.ui import console, print_success
from env2tf.utils.error_handler import handle_exceptions
from env2tf.workflow import GenerationRequest, GenerationWorkflow


@click.command()
@handle_exceptions
@click.option("--root", default=".", help="Directory holding the optional .env2tf.json config")
@click.option("--env-file", default=None, help="Input .env file (skips the prompt)")
@click.option("--tfvars-file", default=None, help="Output .tfvars path (skips the prompt)")
@click.option(
    "--variables/--no-variables",
    default=None,
    help="Generate variables.tf without asking (or skip it)",
)
@click.option("--variables-file", default=None, help="Output variables.tf path (skips the prompt)")
@click.option("--fallback", default=None, help="Description for variables without a # comment")
@click.option(
    "--placeholder-fallback",
    is_flag=True,
    help=f"Use '{DescriptionFallback.PLACEHOLDER}' for variables without a # comment",
)
@click.option(
    "--order",
    type=click.Choice(EntryOrder.CHOICES),
    default=None,
    help="Variable order in output files (default: sorted)",
)
def generate(root, env_file, tfvars_file, variables, variables_file, fallback, placeholder_fallback, order):
    """Convert a .env file into Terraform variable files.

    Reads KEY=VALUE pairs from a .env file and writes a .tfvars file with
    one assignment per variable. Optionally writes a variables.tf file
    declaring each variable as a string, using the trailing # comment of
    each line as its description.

    Any value not given on the command line is asked for interactively.
    When ./.env exists it is picked up without asking.

    Examples:
      env2tf generate
      env2tf generate --env-file config/.env --tfvars-file prod.tfvars --no-variables
      env2tf generate --variables --placeholder-fallback --order file

    Input format:
      PORT=8080              # HTTP port
      STATIC=/app/assets

    Output (terraform.tfvars):
      PORT = "8080"
      STATIC = "/app/assets"

    Exit codes:
      0  files written
      1  the .env file could not be read or an output could not be written"""
    if fallback is not None and placeholder_fallback:
        raise click.UsageError("--fallback and --placeholder-fallback are mutually exclusive")

    config = load_runtime_config(root)
    render = config["render"]

    if placeholder_fallback:
        fallback = DescriptionFallback.PLACEHOLDER
    emitter = TerraformEmitter(
        description_fallback=render["description_fallback"] if fallback is None else fallback,
        order=order or render["order"],
    )

    workflow = GenerationWorkflow(ClickPrompter(), emitter, config)
    result = workflow.run(
        GenerationRequest(
            env_path=env_file,
            tfvars_path=tfvars_file,
            create_variables=variables,
            variables_path=variables_file,
        )
    )

    if result.env_auto_detected:
        console.print(f"Found [path]{result.env_path}[/path] in the current directory.")
    print_success(f"Wrote {len(result.env_set)} variables to [path]{result.tfvars_path}[/path]")
    if result.variables_path is not None:
        print_success(f"Wrote variable declarations to [path]{result.variables_path}[/path]")
    console.print("[success]Process completed successfully.[/success]")
