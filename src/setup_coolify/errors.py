"""Error handling for the setup-coolify action."""
import logging
from typing import Any, Dict, List, Optional


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with context."""
    logger = logger or logging.getLogger(__name__)

    error_info = {
        "error_type": error.__class__.__name__,
        "error_message": str(error)
    }
    if context:
        error_info["context"] = context
    if isinstance(error, ActionError):
        error_info["details"] = error.details

    logger.log(level, "Action failed", extra={"data": error_info})


class ActionError(Exception):
    """Base error class for the action."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class DownloadError(ActionError):
    """A single version could not be downloaded or extracted."""
    def __init__(self, version: str, url: str, reason: str):
        super().__init__(
            f"Download failed for version {version}: {reason}",
            details={"version": version, "url": url, "reason": reason}
        )
        self.version = version


class ReleaseLookupError(ActionError):
    """Release index query failed."""
    def __init__(self, owner: str, repo: str, reason: str):
        super().__init__(
            f"Failed to query releases of {owner}/{repo}: {reason}",
            details={"owner": owner, "repo": repo, "reason": reason}
        )


class FallbackExhaustedError(ActionError):
    """Every candidate version failed."""
    def __init__(self, tool_name: str, attempted: List[str]):
        super().__init__(
            f"Failed to download {tool_name}. Tried versions: {', '.join(attempted)}",
            details={"attempted": list(attempted)}
        )
        self.attempted = list(attempted)


class MissingInputError(ActionError):
    """Required workflow input not supplied."""
    def __init__(self, name: str):
        super().__init__(
            f"Input required and not supplied: {name}",
            details={"input": name}
        )


class CommandError(ActionError):
    """Installed tool exited with a non-zero status."""
    def __init__(self, command: str, returncode: int, stderr: str = ""):
        super().__init__(
            f"Command {command!r} failed with code {returncode}",
            details={"command": command, "returncode": returncode, "stderr": stderr}
        )
        self.returncode = returncode
