"""Terraform text emitters for parsed ``.env`` content.

Two output formats are produced from one EnvSet:

    terraform.tfvars         variables.tf
    ----------------         ------------
    PORT = "8080"            variable "PORT" {
                               description = "HTTP port"
                               type        = string
                             }
                             <blank line>

Values and descriptions are written verbatim inside double quotes; embedded
quotes are not escaped. Every variable is declared with ``type = string``.
"""

from pathlib import Path

from env2tf.errors import OutputUnwritableError
from env2tf.models import EntryOrder, EnvSet
from env2tf.utils.logging import logger

TFVARS_LINE = '{key} = "{value}"\n'

VARIABLE_BLOCK = (
    'variable "{key}" {{\n'
    '  description = "{description}"\n'
    "  type        = string\n"
    "}}\n"
    "\n"
)


class DescriptionFallback:
    """Description used for variables without an inline ``#`` comment."""

    EMPTY = ""
    PLACEHOLDER = "No description available"


class TerraformEmitter:
    """Render an EnvSet as ``.tfvars`` and ``variables.tf`` text."""

    def __init__(
        self,
        description_fallback: str = DescriptionFallback.EMPTY,
        order: str = EntryOrder.SORTED,
    ):
        if order not in EntryOrder.CHOICES:
            raise ValueError(
                f"Unknown entry order '{order}' (expected one of: {', '.join(EntryOrder.CHOICES)})"
            )
        self.description_fallback = description_fallback
        self.order = order

    def render_tfvars(self, env_set: EnvSet) -> str:
        """Render one ``KEY = "VALUE"`` line per variable."""
        return "".join(
            TFVARS_LINE.format(key=entry.key, value=entry.value)
            for entry in env_set.ordered(self.order)
        )

    def render_variables_tf(self, env_set: EnvSet) -> str:
        """Render one ``variable`` block per variable, each followed by a blank line."""
        return "".join(
            VARIABLE_BLOCK.format(
                key=entry.key,
                description=entry.description or self.description_fallback,
            )
            for entry in env_set.ordered(self.order)
        )

    def write_tfvars(self, env_set: EnvSet, path: str | Path) -> int:
        """Write the ``.tfvars`` rendering to *path*, returning the variable count."""
        _write_text(Path(path), self.render_tfvars(env_set))
        logger.info("Wrote {count} values to {path}", count=len(env_set), path=str(path))
        return len(env_set)

    def write_variables_tf(self, env_set: EnvSet, path: str | Path) -> int:
        """Write the ``variables.tf`` rendering to *path*, returning the variable count."""
        _write_text(Path(path), self.render_variables_tf(env_set))
        logger.info("Wrote {count} declarations to {path}", count=len(env_set), path=str(path))
        return len(env_set)


def _write_text(path: Path, text: str) -> None:
    """Create or truncate *path* and write *text* as UTF-8 with LF newlines."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise OutputUnwritableError(f"Could not write {path}: {e.strerror or e}", path) from e
