"""Centralized logging configuration using Loguru.

Diagnostics go to stderr through loguru; user-facing messages go through
the Rich console in ``env2tf.ui``.

Usage:
    from env2tf.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if ENV2TF_LOG_LEVEL=DEBUG

Environment Variables:
    ENV2TF_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    ENV2TF_LOG_JSON: 0|1 (default: 0, human-readable)
    ENV2TF_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys

from loguru import logger

logger.remove()

NUMERIC_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("ENV2TF_LOG_LEVEL", "WARNING").upper()
_json_mode = os.environ.get("ENV2TF_LOG_JSON", "0") == "1"
_log_file = os.environ.get("ENV2TF_LOG_FILE")


def _to_ndjson(record) -> str:
    payload = {
        "level": NUMERIC_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }
    for key, value in record["extra"].items():
        payload[key] = value if isinstance(value, (str, int, float, bool)) or value is None else str(value)

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(payload)


def ndjson_sink(message):
    """Write one NDJSON record per log message to stderr."""
    # Never call logger.* inside a sink
    sys.stderr.write(_to_ndjson(message.record) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

_console_handler_id: int | None = None


def _add_console_handler(level: str) -> int:
    if _json_mode:
        return logger.add(ndjson_sink, level=level, colorize=False)
    return logger.add(
        sys.stderr,
        level=level,
        format=_human_format,
        colorize=None,
    )


def set_level(level: str) -> None:
    """Replace the console handler with one at *level*.

    Args:
        level: Loguru level name (DEBUG, INFO, WARNING, ...)
    """
    global _console_handler_id, _log_level

    if _console_handler_id is not None:
        try:
            logger.remove(_console_handler_id)
        except ValueError:
            pass  # Already removed

    _log_level = level.upper()
    _console_handler_id = _add_console_handler(_log_level)


def get_level() -> str:
    """Return the current console log level name."""
    return _log_level


_console_handler_id = _add_console_handler(_log_level)

if _log_file:
    def _file_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_ndjson(message.record) + "\n")

    logger.add(_file_sink, level="DEBUG")


__all__ = [
    "logger",
    "get_level",
    "set_level",
]
