"""GitHub Actions host environment: inputs, PATH, secrets and status."""

import logging
import os
import sys
from pathlib import Path
from typing import MutableMapping, Optional, TextIO

from setup_coolify.config import ActionConfig
from setup_coolify.constants import DEFAULT_CONTEXT, LATEST
from setup_coolify.errors import MissingInputError
from setup_coolify.logging import escape_data, get_logger, log_with_data
from setup_coolify.types import ActionInputs

logger = get_logger(__name__)


def issue_command(command: str, message: str = "", stream: Optional[TextIO] = None) -> None:
    """Write a workflow command line to stdout."""
    stream = stream or sys.stdout
    stream.write(f"::{command}::{escape_data(message)}\n")
    stream.flush()


def get_input(
    name: str,
    required: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> str:
    """Read a workflow input from its INPUT_<NAME> variable."""
    env = os.environ if environ is None else environ
    value = env.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    if required and not value:
        raise MissingInputError(name)
    return value


def read_inputs(
    config: ActionConfig, environ: Optional[MutableMapping[str, str]] = None
) -> ActionInputs:
    """Collect the action's inputs, applying defaults."""
    return ActionInputs(
        version=get_input("version", environ=environ) or LATEST,
        token=get_input("token", required=True, environ=environ),
        url=get_input("url", environ=environ) or config.fallback_url,
        context=get_input("context", environ=environ) or DEFAULT_CONTEXT,
    )


def add_path(path: Path, environ: Optional[MutableMapping[str, str]] = None) -> None:
    """Put a directory on PATH for this process and later job steps."""
    env = os.environ if environ is None else environ

    github_path = env.get("GITHUB_PATH")
    if github_path:
        with open(github_path, "a", encoding="utf-8") as f:
            f.write(f"{path}\n")

    current = env.get("PATH", "")
    env["PATH"] = f"{path}{os.pathsep}{current}" if current else str(path)

    log_with_data(logger, logging.DEBUG, "Path added", {"path": str(path)})


def set_secret(value: str, stream: Optional[TextIO] = None) -> None:
    """Register a value to be masked in the job log."""
    issue_command("add-mask", value, stream)


def set_failed(message: str, stream: Optional[TextIO] = None) -> int:
    """Report a failed run and return the process exit status."""
    issue_command("error", message, stream)
    return 1
