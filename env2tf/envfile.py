"""Permissive ``.env`` parser.

Each line is handled independently:

    KEY=VALUE                -> value "VALUE", no description
    KEY=VALUE # the port     -> value "VALUE", description "the port"
    # comment / blank line   -> skipped
    NO_EQUALS_SIGN           -> skipped

The split on ``#`` is purely textual and first-match: a ``#`` inside quotes
still starts the description. Lines that don't look like declarations are
skipped, never reported as errors.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from env2tf.errors import InputNotFoundError, InputUnreadableError
from env2tf.models import EnvEntry, EnvSet
from env2tf.utils.logging import logger


def parse_line(line: str) -> EnvEntry | None:
    """Parse a single line, returning None when it declares nothing."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    raw_key, sep, rest = line.partition("=")
    if not sep:
        return None

    key = raw_key.strip()
    if not key:
        return None

    raw_value, hash_sign, raw_description = rest.partition("#")
    description = raw_description.strip() if hash_sign else ""

    return EnvEntry(key=key, value=raw_value.strip(), description=description or None)


def _iter_entries(lines: Iterable[str]) -> Iterator[EnvEntry]:
    for lineno, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is None:
            if line.strip() and not line.strip().startswith("#"):
                logger.debug("Skipping line {lineno}: no KEY=VALUE declaration", lineno=lineno)
            continue
        yield entry


def parse_lines(lines: Iterable[str]) -> EnvSet:
    """Parse an iterable of lines into an EnvSet (later duplicates win)."""
    return EnvSet.from_entries(_iter_entries(lines))


def parse_text(text: str) -> EnvSet:
    """Parse the full text of a ``.env`` file."""
    return parse_lines(text.splitlines())


def read_env_file(path: str | Path) -> EnvSet:
    """Read and parse a ``.env`` file.

    Args:
        path: Location of the UTF-8 encoded ``.env`` file

    Returns:
        The parsed EnvSet

    Raises:
        InputNotFoundError: The path does not exist or is not a regular file
        InputUnreadableError: The file could not be opened, read or decoded
    """
    path = Path(path)
    if not path.is_file():
        raise InputNotFoundError(f"Env file not found: {path}", path)

    try:
        with open(path, encoding="utf-8") as f:
            env_set = parse_lines(f)
    except UnicodeDecodeError as e:
        raise InputUnreadableError(f"Env file is not valid UTF-8: {path} ({e.reason})", path) from e
    except OSError as e:
        raise InputUnreadableError(f"Could not read env file {path}: {e.strerror or e}", path) from e

    logger.info("Parsed {count} variables from {path}", count=len(env_set), path=str(path))
    return env_set
