"""Invoking the installed coolify CLI."""

import os
import shutil
from typing import Optional

from setup_coolify.errors import CommandError
from setup_coolify.logging import get_logger
from setup_coolify.types import ActionInputs, Installed
from setup_coolify.utils.fs import async_subprocess_run

logger = get_logger(__name__)

MASK = "***"


def find_executable(name: str, installed: Installed) -> str:
    """Locate the tool, preferring the fresh installation over PATH."""
    search_path = os.pathsep.join([str(installed.path), os.environ.get("PATH", "")])
    return shutil.which(name, path=search_path) or name


def context_add_args(executable: str, inputs: ActionInputs) -> list[str]:
    return [
        executable,
        "context",
        "add",
        inputs.context,
        inputs.token,
        inputs.url,
        "--default",
        "--force",
    ]


def mask_args(args: list[str], secret: Optional[str]) -> str:
    """Render a command line with the secret hidden."""
    return " ".join(MASK if secret and arg == secret else arg for arg in args)


async def add_context(tool_name: str, installed: Installed, inputs: ActionInputs) -> str:
    """Register the target instance as the CLI's default context.

    Returns the command's stdout.
    """
    args = context_add_args(find_executable(tool_name, installed), inputs)
    display = mask_args(args, inputs.token)

    logger.info(f"[command]{display}")
    returncode, stdout, stderr = await async_subprocess_run(*args)

    if stdout:
        logger.info(stdout.replace(inputs.token, MASK).rstrip())
    if returncode != 0:
        raise CommandError(display, returncode, stderr.replace(inputs.token, MASK))

    return stdout
