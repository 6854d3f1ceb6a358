import logging
import os
import tarfile
import zipfile
from pathlib import Path

import aiohttp

from setup_coolify.logging import get_logger, log_with_data

logger = get_logger(__name__)


async def download_url(url: str, dest: Path) -> None:
    """Stream a URL to a local file."""
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise RuntimeError(f"Download failed with status {response.status}")

                with open(dest, "wb") as f:
                    while chunk := await response.content.read(8192):
                        f.write(chunk)

    except Exception as e:
        if dest.exists():
            dest.unlink()
        raise RuntimeError(f"Failed to download url: {e}") from e


ARCHIVE_HANDLERS = {
    ".zip": zipfile.ZipFile,
    ".tar.gz": tarfile.open,
    ".tgz": tarfile.open,
}


def archive_format(archive_path: Path) -> str:
    # Versioned names like tool_1.4.0_windows_amd64.zip carry extra dots
    return next(
        (ext for ext in ARCHIVE_HANDLERS if archive_path.name.endswith(ext)),
        archive_path.suffix,
    )


def extract_archive(archive_path: Path, dest_dir: Path) -> Path:
    """Extract a zip or gzipped tar archive into dest_dir."""

    format = archive_format(archive_path)

    handler = ARCHIVE_HANDLERS.get(format)
    log_with_data(logger, logging.DEBUG, "Extracting archive", {"archive": str(archive_path), "format": format})

    if not handler:
        raise ValueError(f"Unsupported archive format: {format}")

    dest_dir.mkdir(parents=True, exist_ok=True)

    try:
        with handler(archive_path) as archive:
            if isinstance(archive, tarfile.TarFile):
                archive.extractall(dest_dir, filter="data")
            else:
                archive.extractall(dest_dir)
    except (tarfile.TarError, zipfile.BadZipFile, OSError) as e:
        raise ValueError(f"Failed to extract {archive_path.name}: {e}") from e

    log_with_data(logger, logging.INFO, "Archive extracted", {
        "archive": str(archive_path),
        "extracted_to": str(dest_dir),
    })

    os.chmod(dest_dir, 0o755)

    return dest_dir
