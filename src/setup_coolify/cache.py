"""Tool cache management.

Installations live at ``<cache>/<tool>/<version>/<arch>`` with a sibling
``<arch>.complete`` marker, the layout the hosted runners' tool cache uses.
An entry without its marker is treated as absent.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from setup_coolify.logging import get_logger, log_with_data

logger = get_logger(__name__)


def _get_cache_path(cache_dir: Path, tool: str, version: str, arch: str) -> Path:
    return cache_dir / tool / version / arch


def _marker_path(cache_path: Path) -> Path:
    return cache_path.with_name(f"{cache_path.name}.complete")


def find(cache_dir: Path, tool: str, version: str, arch: str) -> Optional[Path]:
    """Get cached installation path if it exists."""
    if not tool or not version:
        return None

    cache_path = _get_cache_path(cache_dir, tool, version, arch)

    log_with_data(logger, logging.DEBUG, "Checking cache", {"cache_path": str(cache_path)})

    if not cache_path.is_dir() or not _marker_path(cache_path).exists():
        return None

    return cache_path


def cache_dir(source_dir: Path, cache_root: Path, tool: str, version: str, arch: str) -> Path:
    """Copy an extracted installation into the cache and return its path.

    Complete entries are never overwritten; a half-written entry left by an
    interrupted run is replaced.
    """
    cache_path = _get_cache_path(cache_root, tool, version, arch)
    marker = _marker_path(cache_path)

    if cache_path.is_dir() and marker.exists():
        log_with_data(logger, logging.INFO, "Cache entry exists", {"path": str(cache_path)})
        return cache_path

    if cache_path.exists():
        shutil.rmtree(cache_path)

    log_with_data(logger, logging.DEBUG, "Caching directory", {
        "source": str(source_dir),
        "cache_path": str(cache_path),
    })
    shutil.copytree(source_dir, cache_path)
    marker.write_text("")

    log_with_data(logger, logging.INFO, "Tool cached", {
        "tool": tool,
        "version": version,
        "path": str(cache_path),
    })

    return cache_path
