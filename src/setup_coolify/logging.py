"""Logging configuration for local runs and CI workflow commands."""

import json
import logging
import sys
from typing import Any, Dict

APP_LOGGER = "setup_coolify"


class ColorCodes:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    BOLD = "\033[1m"


LEVEL_COLORS = {
    "DEBUG": ColorCodes.BLUE,
    "INFO": ColorCodes.GREEN,
    "WARNING": ColorCodes.YELLOW,
    "ERROR": ColorCodes.RED + ColorCodes.BOLD,
    "CRITICAL": ColorCodes.MAGENTA + ColorCodes.BOLD,
}

WORKFLOW_COMMANDS = {
    "DEBUG": "debug",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "error",
}


class JsonFormatter(logging.Formatter):
    """Format log records as color-coded JSON."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname, "")

        output = {
            "ts": record.asctime if hasattr(record, "asctime") else "",
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if hasattr(record, "data"):
            output["data"] = record.data

        json_str = json.dumps(output, default=str)
        return f"{color}{json_str}{ColorCodes.RESET}"


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Format log records as GitHub Actions workflow commands.

    Debug, warning and error records become ``::debug::``, ``::warning::``
    and ``::error::`` annotations; info records are printed as plain lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if hasattr(record, "data"):
            msg = f"{msg} {json.dumps(record.data, default=str)}"

        command = WORKFLOW_COMMANDS.get(record.levelname)
        if command is None:
            return msg
        return f"::{command}::{escape_data(msg)}"


def configure_logging(style: str = "json", level: int = logging.DEBUG) -> None:
    """Set up application logging.

    ``style="json"`` writes colored JSON to stderr for local runs;
    ``style="actions"`` writes workflow commands to stdout where the runner
    reads them.
    """
    app_logger = logging.getLogger(APP_LOGGER)

    # Only configure if not already configured
    if app_logger.handlers:
        return

    if style == "actions":
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WorkflowCommandFormatter())
    elif style == "json":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
    else:
        raise ValueError(f"Unknown logging style: {style}")

    handler.setLevel(level)
    app_logger.setLevel(level)
    app_logger.addHandler(handler)
    app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    if name == APP_LOGGER or name.startswith(f"{APP_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER}.{name}")


def log_with_data(
    logger: logging.Logger, level: int, msg: str, data: Dict[str, Any] = None
):
    """Log a message with optional structured data."""
    if data:
        logger.log(level, msg, extra={"data": data})
    else:
        logger.log(level, msg)
