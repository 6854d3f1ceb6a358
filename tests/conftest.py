import io
import logging
import tarfile
import zipfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from setup_coolify.config import ActionConfig
from setup_coolify.types import PlatformInfo


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo configure_logging so caplog keeps seeing records"""
    yield
    app_logger = logging.getLogger("setup_coolify")
    app_logger.handlers = []
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def config(tmp_path: Path) -> ActionConfig:
    """Config with an isolated tool cache"""
    return ActionConfig(tool_cache_dir=tmp_path / "toolcache")


@pytest.fixture
def linux_platform() -> PlatformInfo:
    return PlatformInfo(platform="linux", arch="amd64", extension="tar.gz")


@pytest.fixture
def windows_platform() -> PlatformInfo:
    return PlatformInfo(platform="windows", arch="amd64", extension="zip")


def _tar_bytes(files: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tf:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o755
            tf.addfile(info, io.BytesIO(content))
    return buf.getvalue()


def _zip_bytes(files: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


@pytest.fixture
def tar_archive() -> bytes:
    """A release tarball holding a coolify executable"""
    return _tar_bytes({"coolify": b"#!/bin/sh\necho coolify\n", "LICENSE": b"MIT"})


@pytest.fixture
def zip_archive() -> bytes:
    return _zip_bytes({"coolify.exe": b"MZ", "LICENSE": b"MIT"})


class FakeReleaseHost:
    """Stands in for the artifact host: serves archives for known versions"""

    def __init__(self, archive: bytes):
        self.archive = archive
        self.available: set[str] = set()
        self.urls: list[str] = []

    def attempted_versions(self) -> list[str]:
        return [url.split("/")[-2].lstrip("v") for url in self.urls]

    async def download(self, url: str, dest: Path) -> None:
        self.urls.append(url)
        version = url.split("/")[-2].lstrip("v")
        if version not in self.available:
            raise RuntimeError("Failed to download url: Download failed with status 404")
        dest.write_bytes(self.archive)


@pytest.fixture
def release_host(tar_archive: bytes) -> FakeReleaseHost:
    return FakeReleaseHost(tar_archive)


@pytest.fixture
def mock_http():
    """Build a mocked aiohttp.ClientSession around a response"""

    def _build(status=200, json_data=None, chunks=(), error=None):
        response = MagicMock()
        response.status = status
        response.json = AsyncMock(return_value=json_data)
        response.content.read = AsyncMock(side_effect=[*chunks, b""])
        response.raise_for_status = MagicMock(side_effect=error)

        request = MagicMock()
        request.__aenter__ = AsyncMock(return_value=response)
        request.__aexit__ = AsyncMock(return_value=False)

        session = MagicMock()
        session.__aenter__ = AsyncMock(return_value=session)
        session.__aexit__ = AsyncMock(return_value=False)
        session.get = MagicMock(return_value=request)
        return session

    return _build
