import asyncio
from typing import Mapping, Optional

from setup_coolify.logging import get_logger

logger = get_logger(__name__)


async def async_subprocess_run(*args, env: Optional[Mapping[str, str]] = None):
    """
    Run a command asynchronously and return its exit code, stdout, and stderr.

    :param args: Command and arguments to run
    :param env: Environment for the child process, inherited when omitted
    :return: Tuple of (returncode, stdout, stderr)
    """
    proc = await asyncio.create_subprocess_exec(
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=dict(env) if env is not None else None,
    )
    stdout, stderr = await proc.communicate()
    return proc.returncode, stdout.decode(), stderr.decode()
