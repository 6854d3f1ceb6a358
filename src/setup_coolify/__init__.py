"""Install the coolify CLI in CI and configure it for a Coolify instance."""

from setup_coolify.config import ActionConfig
from setup_coolify.errors import (
    ActionError,
    CommandError,
    DownloadError,
    FallbackExhaustedError,
    MissingInputError,
    ReleaseLookupError,
)
from setup_coolify.fetcher import ensure_tool, resolve_version, download_with_fallback
from setup_coolify.types import Exhausted, Installed, PlatformInfo

__version__ = "0.1.0"

__all__ = [
    "ActionConfig",
    "ensure_tool",
    "resolve_version",
    "download_with_fallback",
    "Installed",
    "Exhausted",
    "PlatformInfo",
    "ActionError",
    "CommandError",
    "DownloadError",
    "FallbackExhaustedError",
    "MissingInputError",
    "ReleaseLookupError",
]
