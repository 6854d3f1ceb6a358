"""Tests for platform mapping."""
import logging

import pytest

from setup_coolify.platforms import get_platform_info
from setup_coolify.types import PlatformInfo


@pytest.mark.parametrize(
    "os_name,machine,expected",
    [
        ("linux", "x64", PlatformInfo("linux", "amd64", "tar.gz")),
        ("Linux", "x86_64", PlatformInfo("linux", "amd64", "tar.gz")),
        ("linux", "aarch64", PlatformInfo("linux", "arm64", "tar.gz")),
        ("darwin", "arm64", PlatformInfo("darwin", "arm64", "tar.gz")),
        ("Darwin", "x86_64", PlatformInfo("darwin", "amd64", "tar.gz")),
        ("win32", "x64", PlatformInfo("windows", "amd64", "zip")),
        ("Windows", "AMD64", PlatformInfo("windows", "amd64", "zip")),
        ("win32", "ia32", PlatformInfo("windows", "386", "zip")),
        ("linux", "i686", PlatformInfo("linux", "386", "tar.gz")),
    ],
)
def test_known_platforms(os_name, machine, expected, caplog):
    """Mapped values resolve without warnings"""
    with caplog.at_level(logging.WARNING):
        assert get_platform_info(os_name, machine) == expected
    assert not caplog.records


def test_unknown_platform_defaults_to_linux(caplog):
    with caplog.at_level(logging.WARNING):
        info = get_platform_info("freebsd", "arm64")

    assert info == PlatformInfo("linux", "arm64", "tar.gz")
    assert len(caplog.records) == 1
    assert "unknown platform: freebsd; defaulting to linux" in caplog.records[0].getMessage()


def test_unknown_architecture_defaults_to_amd64(caplog):
    with caplog.at_level(logging.WARNING):
        info = get_platform_info("darwin", "riscv64")

    assert info == PlatformInfo("darwin", "amd64", "tar.gz")
    assert len(caplog.records) == 1
    assert "unknown architecture: riscv64; defaulting to amd64" in caplog.records[0].getMessage()


def test_both_unknown_warns_once_each(caplog):
    """Platform mapping is total: one warning per unmapped dimension"""
    with caplog.at_level(logging.WARNING):
        info = get_platform_info("aix", "ppc64")

    assert info == PlatformInfo("linux", "amd64", "tar.gz")
    assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.WARNING]


def test_defaults_to_current_host():
    info = get_platform_info()
    assert info.platform in ("linux", "darwin", "windows")
    assert info.arch in ("amd64", "arm64", "386")
