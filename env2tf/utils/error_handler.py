"""Centralized error handler for env2tf commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from env2tf.errors import Env2TfError
from env2tf.utils.logging import logger


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that turns any failure into a ClickException (exit status 1)."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper that implements the try-except logic."""
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.Abort):
            raise
        except Env2TfError as e:
            logger.error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            raise click.ClickException(str(e)) from e
        except Exception as e:
            logger.opt(exception=True).debug("Unexpected failure in '{cmd}'", cmd=func.__name__)
            raise click.ClickException(f"{type(e).__name__}: {e}") from e

    return wrapper
