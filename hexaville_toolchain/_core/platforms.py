"""
Platform table for toolchain downloads.

A platform tag such as "ubuntu1404" is the directory name swift.org uses,
and its suffix ("ubuntu14.04") is appended to the archive file name.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class Platform:
    """
    A supported download platform.

    Attributes:
        tag: URL directory segment (e.g. "ubuntu1404")
        suffix: Archive file name suffix (e.g. "ubuntu14.04")
    """
    tag: str
    suffix: str


UBUNTU_1404 = Platform(tag="ubuntu1404", suffix="ubuntu14.04")

DEFAULT_PLATFORM = UBUNTU_1404.tag


def platform_table(platforms: Iterable[Platform]) -> Mapping[str, Platform]:
    """
    Build a read-only tag -> Platform mapping.

    Raises:
        ValueError: If two platforms share a tag
    """
    table = {}
    for platform in platforms:
        if platform.tag in table:
            raise ValueError(f"Duplicate platform tag: {platform.tag!r}")
        table[platform.tag] = platform
    return MappingProxyType(table)


DEFAULT_PLATFORMS: Mapping[str, Platform] = platform_table([UBUNTU_1404])
