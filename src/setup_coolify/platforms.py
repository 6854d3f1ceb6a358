"""Platform detection and mapping."""
import platform
from typing import NamedTuple, Optional

from setup_coolify.logging import get_logger
from setup_coolify.types import PlatformInfo

logger = get_logger(__name__)


class PlatformMapping(NamedTuple):
    """Platform-specific release values."""
    platform: str
    archive_format: str


DEFAULT_PLATFORM = "linux"
DEFAULT_ARCH = "amd64"

PLATFORM_MAPPINGS = {
    "linux": PlatformMapping(
        platform="linux",
        archive_format="tar.gz",
    ),
    "darwin": PlatformMapping(
        platform="darwin",
        archive_format="tar.gz",
    ),
    "windows": PlatformMapping(
        platform="windows",
        archive_format="zip",
    ),
}

# Spellings reported by platform.system(), sys.platform and the runner
OS_ALIASES = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
    "win32": "windows",
    "cygwin": "windows",
}

# Architecture mappings
ARCH_MAPPINGS = {
    "x64": "amd64",
    "x86_64": "amd64",
    "amd64": "amd64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "ia32": "386",
    "x86": "386",
    "i386": "386",
    "i686": "386",
}


def get_platform_info(
    os_name: Optional[str] = None, machine: Optional[str] = None
) -> PlatformInfo:
    """Map an (os, arch) pair onto the release artifact naming.

    Defaults to the current host. Unknown values fall back to linux/amd64
    with one warning per unmapped value rather than failing.
    """
    if os_name is None:
        os_name = platform.system()
    if machine is None:
        machine = platform.machine()

    system = OS_ALIASES.get(os_name.lower())
    if system is None:
        logger.warning(f"unknown platform: {os_name}; defaulting to {DEFAULT_PLATFORM}")
        system = DEFAULT_PLATFORM

    arch = ARCH_MAPPINGS.get(machine.lower())
    if arch is None:
        logger.warning(f"unknown architecture: {machine}; defaulting to {DEFAULT_ARCH}")
        arch = DEFAULT_ARCH

    platform_map = PLATFORM_MAPPINGS[system]

    return PlatformInfo(
        platform=platform_map.platform,
        arch=arch,
        extension=platform_map.archive_format,
    )
