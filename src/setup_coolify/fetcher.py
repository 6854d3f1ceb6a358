"""Version resolution and download with release fallback."""
import tempfile
from pathlib import Path

from setup_coolify import cache
from setup_coolify.config import ActionConfig
from setup_coolify.constants import LATEST
from setup_coolify.errors import (
    DownloadError,
    FallbackExhaustedError,
    ReleaseLookupError,
)
from setup_coolify.logging import get_logger
from setup_coolify.releases import (
    get_latest_release,
    list_recent_releases,
    normalize_version,
)
from setup_coolify.types import (
    Exhausted,
    InstallResult,
    Installed,
    PlatformInfo,
    ResolvedVersion,
)
from setup_coolify.utils.fetching import download_url, extract_archive

logger = get_logger(__name__)


def is_latest(requested: str) -> bool:
    return not requested or requested.strip().lower() == LATEST


def format_download_url(config: ActionConfig, version: str, platform_info: PlatformInfo) -> str:
    """Release artifact URL for a version on a platform."""
    archive = (
        f"{config.artifact_name}_{version}_{platform_info.platform}_{platform_info.arch}"
        f".{platform_info.extension}"
    )
    return f"{config.download_base_url}/v{version}/{archive}"


async def resolve_version(config: ActionConfig, requested: str) -> ResolvedVersion:
    """Turn the requested token into a concrete, normalized version.

    A failed "latest" lookup is not fatal: shared runner IPs get rate
    limited, so the built-in fallback version is used instead.
    """
    if not is_latest(requested):
        return ResolvedVersion(version=normalize_version(requested.strip()), requested_latest=False)

    try:
        version = await get_latest_release(config, config.latest_owner, config.latest_repo)
    except ReleaseLookupError as e:
        logger.warning(
            f"{e}\n\nFailed to retrieve latest version; falling back to: {config.fallback_version}"
        )
        version = config.fallback_version

    return ResolvedVersion(version=normalize_version(version), requested_latest=True)


async def download_tool(
    config: ActionConfig, version: str, platform_info: PlatformInfo, work_dir: Path
) -> Path:
    """Download and extract one version into work_dir.

    Any failure means the version is unusable and is raised as DownloadError.
    """
    url = format_download_url(config, version, platform_info)
    logger.debug(f"{config.tool_name} download url: {url}")

    archive_path = work_dir / url.rsplit("/", 1)[-1]
    try:
        await download_url(url, archive_path)
        return extract_archive(archive_path, work_dir / "extracted")
    except (RuntimeError, ValueError, OSError) as e:
        raise DownloadError(version, url, str(e)) from e


async def install_version(
    config: ActionConfig, version: str, platform_info: PlatformInfo
) -> Installed:
    """Return a cached installation of version, downloading it on a miss."""
    cached = cache.find(config.tool_cache_dir, config.tool_name, version, platform_info.arch)
    if cached:
        logger.info(f"Using cached {config.tool_name} v{version} from {cached}")
        return Installed(path=cached, version=version)

    with tempfile.TemporaryDirectory(prefix=f"{config.tool_name}-") as tmpdir:
        extracted = await download_tool(config, version, platform_info, Path(tmpdir))
        path = cache.cache_dir(
            extracted, config.tool_cache_dir, config.tool_name, version, platform_info.arch
        )

    return Installed(path=path, version=version)


async def get_candidate_versions(config: ActionConfig) -> list[str]:
    """Most recent published versions, newest first."""
    try:
        return await list_recent_releases(
            config, config.release_owner, config.release_repo, config.release_count
        )
    except ReleaseLookupError as e:
        logger.warning(f"Failed to fetch recent releases: {e}")
        return [config.fallback_version]


async def download_with_fallback(
    config: ActionConfig, platform_info: PlatformInfo
) -> InstallResult:
    """Try recent releases in order until one installs."""
    candidates = await get_candidate_versions(config)

    for version in candidates:
        logger.info(f"Attempting to download {config.tool_name} v{version}")
        try:
            installed = await install_version(config, version, platform_info)
        except DownloadError as e:
            logger.warning(f"Failed to download {config.tool_name} v{version}: {e}")
            continue

        logger.info(f"Successfully downloaded {config.tool_name} v{version}")
        return installed

    return Exhausted(attempted=candidates)


async def ensure_tool(
    config: ActionConfig, requested: str, platform_info: PlatformInfo
) -> Installed:
    """Install the requested version, or the newest release that works.

    The resolved version gets exactly one direct attempt; after that the
    recent-release list decides, even for an explicitly requested version.

    Raises:
        FallbackExhaustedError: If no candidate version could be installed
    """
    resolved = await resolve_version(config, requested)

    try:
        return await install_version(config, resolved.version, platform_info)
    except DownloadError as e:
        kind = "latest" if resolved.requested_latest else "requested"
        logger.warning(f"Failed to download {kind} version v{resolved.version}: {e}")

    result = await download_with_fallback(config, platform_info)
    if isinstance(result, Exhausted):
        raise FallbackExhaustedError(config.tool_name, result.attempted)
    return result
