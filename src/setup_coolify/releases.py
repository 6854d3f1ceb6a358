"""GitHub release index lookups."""
import logging
from typing import Any, Dict, Optional

import aiohttp

from setup_coolify.config import ActionConfig
from setup_coolify.constants import GITHUB_REPOS_PATH, LATEST_PATH, RELEASES_PATH
from setup_coolify.errors import ReleaseLookupError
from setup_coolify.logging import get_logger, log_with_data

logger = get_logger(__name__)


def normalize_version(version: str) -> str:
    """Strip a single leading 'v' from a version token."""
    return version[1:] if version.startswith("v") else version


def github_headers(config: ActionConfig) -> Dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if config.github_token:
        headers["Authorization"] = f"Bearer {config.github_token}"
    return headers


def releases_url(config: ActionConfig, owner: str, repo: str) -> str:
    return f"{config.github_api_base}/{GITHUB_REPOS_PATH}/{owner}/{repo}/{RELEASES_PATH}"


def release_version(release: Dict[str, Any]) -> Optional[str]:
    """Version token of a release: its name, else its tag."""
    name = release.get("name") or release.get("tag_name")
    if not name:
        return None
    return normalize_version(str(name).strip())


async def get_latest_release(config: ActionConfig, owner: str, repo: str) -> str:
    """Fetch the latest release version of a GitHub repository."""
    url = f"{releases_url(config, owner, repo)}/{LATEST_PATH}"

    try:
        async with aiohttp.ClientSession(headers=github_headers(config)) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                data = await response.json()
    except (aiohttp.ClientError, TimeoutError, ValueError) as e:
        raise ReleaseLookupError(owner, repo, str(e)) from e

    version = release_version(data) if isinstance(data, dict) else None
    if not version:
        raise ReleaseLookupError(owner, repo, "latest release has no name or tag")

    log_with_data(logger, logging.DEBUG, "Latest release", {"repo": f"{owner}/{repo}", "version": version})
    return version


async def list_recent_releases(
    config: ActionConfig, owner: str, repo: str, count: int
) -> list[str]:
    """Fetch up to ``count`` release versions, newest first."""
    url = releases_url(config, owner, repo)

    try:
        async with aiohttp.ClientSession(headers=github_headers(config)) as session:
            async with session.get(url, params={"per_page": str(count)}) as response:
                response.raise_for_status()
                data = await response.json()
    except (aiohttp.ClientError, TimeoutError, ValueError) as e:
        raise ReleaseLookupError(owner, repo, str(e)) from e

    if not isinstance(data, list):
        raise ReleaseLookupError(owner, repo, "unexpected release list payload")

    releases = [r for r in data[:count] if isinstance(r, dict)]
    versions = [v for v in map(release_version, releases) if v]
    if not versions:
        raise ReleaseLookupError(owner, repo, "no published releases")

    log_with_data(logger, logging.DEBUG, "Recent releases", {"repo": f"{owner}/{repo}", "versions": versions})
    return versions
