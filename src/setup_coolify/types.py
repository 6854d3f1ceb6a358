"""Core type definitions"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class PlatformInfo:
    """Release artifact naming for the host platform"""
    platform: str
    arch: str
    extension: str


@dataclass(frozen=True)
class ActionInputs:
    """Inputs supplied by the workflow"""
    version: str
    token: str
    url: str
    context: str


@dataclass(frozen=True)
class ResolvedVersion:
    """Primary version to install"""
    version: str
    requested_latest: bool


@dataclass(frozen=True)
class Installed:
    """A usable installation"""
    path: Path
    version: str


@dataclass(frozen=True)
class Exhausted:
    """Every candidate version failed"""
    attempted: list[str]


InstallResult = Union[Installed, Exhausted]
