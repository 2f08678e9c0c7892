"""Exceptions raised by env2tf.

Only I/O failures are errors. Malformed ``.env`` lines are skipped by the
parser and never surface here.
"""

from pathlib import Path


class Env2TfError(Exception):
    """Base class for every failure that aborts a generation run.

    Attributes:
        path: The file the failed operation was working on
    """

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class InputNotFoundError(Env2TfError):
    """Raised when the source ``.env`` file does not exist."""


class InputUnreadableError(Env2TfError):
    """Raised when the source ``.env`` file exists but cannot be read or decoded."""


class OutputUnwritableError(Env2TfError):
    """Raised when a ``.tfvars`` or ``variables.tf`` destination cannot be written."""
