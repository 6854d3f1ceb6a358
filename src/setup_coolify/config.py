"""Action configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import appdirs

from setup_coolify import constants

ENV_PREFIX = "SETUP_COOLIFY_"


@dataclass(frozen=True)
class ActionConfig:
    """Settings shared by every step of a run.

    Built once at startup and passed explicitly; nothing in the package
    reads the module-level defaults directly.
    """

    tool_cache_dir: Path
    tool_name: str = constants.TOOL_NAME
    artifact_name: str = constants.ARTIFACT_NAME
    download_base_url: str = constants.DOWNLOAD_BASE_URL
    fallback_version: str = constants.FALLBACK_VERSION
    fallback_url: str = constants.FALLBACK_URL
    release_owner: str = constants.RELEASE_OWNER
    release_repo: str = constants.RELEASE_REPO
    latest_owner: str = constants.LATEST_OWNER
    latest_repo: str = constants.LATEST_REPO
    release_count: int = constants.RELEASE_COUNT
    github_api_base: str = constants.GITHUB_API_BASE
    github_token: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionConfig":
        """Build a config from defaults plus SETUP_COOLIFY_* overrides."""
        env = os.environ if environ is None else environ

        def override(name: str, default: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}") or default

        cache_dir = env.get("RUNNER_TOOL_CACHE") or appdirs.user_cache_dir("setup-coolify")

        return cls(
            tool_cache_dir=Path(override("TOOL_CACHE", cache_dir)),
            download_base_url=override("DOWNLOAD_BASE_URL", constants.DOWNLOAD_BASE_URL).rstrip("/"),
            fallback_version=override("FALLBACK_VERSION", constants.FALLBACK_VERSION),
            fallback_url=override("FALLBACK_URL", constants.FALLBACK_URL),
            release_owner=override("RELEASE_OWNER", constants.RELEASE_OWNER),
            release_repo=override("RELEASE_REPO", constants.RELEASE_REPO),
            latest_owner=override("LATEST_OWNER", constants.LATEST_OWNER),
            latest_repo=override("LATEST_REPO", constants.LATEST_REPO),
            release_count=int(override("RELEASE_COUNT", str(constants.RELEASE_COUNT))),
            github_api_base=override("GITHUB_API_BASE", constants.GITHUB_API_BASE).rstrip("/"),
            github_token=env.get("GITHUB_TOKEN") or None,
        )
