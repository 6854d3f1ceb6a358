"""Action entry point."""
import asyncio
import logging
import os
import sys
from typing import MutableMapping, Optional

from setup_coolify import actions
from setup_coolify.commands import add_context
from setup_coolify.config import ActionConfig
from setup_coolify.errors import log_error
from setup_coolify.fetcher import ensure_tool
from setup_coolify.logging import configure_logging, get_logger
from setup_coolify.platforms import get_platform_info
from setup_coolify.types import Installed

logger = get_logger(__name__)


async def run(
    config: Optional[ActionConfig] = None,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Installed:
    """Install the CLI, put it on PATH and log it into the target instance."""
    env = os.environ if environ is None else environ
    config = config or ActionConfig.from_env(env)

    inputs = actions.read_inputs(config, env)
    actions.set_secret(inputs.token)

    installed = await ensure_tool(config, inputs.version, get_platform_info())

    actions.add_path(installed.path, env)
    logger.info(f">>> {config.tool_name} version v{installed.version} installed to {installed.path}")

    await add_context(config.tool_name, installed, inputs)
    logger.info(f">>> Successfully logged into {config.tool_name}")

    return installed


def main() -> int:
    """Run the action and translate failures into a failed status."""
    configure_logging(style="actions" if os.environ.get("GITHUB_ACTIONS") else "json")

    try:
        asyncio.run(run())
    except Exception as e:
        log_error(e, logger=logger, level=logging.DEBUG)
        return actions.set_failed(str(e) or e.__class__.__name__)

    return 0


if __name__ == "__main__":
    sys.exit(main())
