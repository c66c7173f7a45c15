"""
Download URL resolution for Swift toolchain archives.

Given a version identifier and a platform tag, builds the archive base name
and full swift.org download URL. No network access happens here; callers
hand the URL to whatever downloads and extracts the toolchain.

URL shapes:
    Release "3.1.1":
        https://swift.org/builds/swift-3.1.1-release/ubuntu1404/
            swift-3.1.1-RELEASE/swift-3.1.1-RELEASE-ubuntu14.04.tar.gz
    Snapshot "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a":
        https://swift.org/builds/swift-4.0-branch/ubuntu1404/
            <snapshot-tag>/<snapshot-tag>-ubuntu14.04.tar.gz

Usage:
    from hexaville_toolchain import ToolchainResolver

    resolver = ToolchainResolver()
    toolchain = resolver.resolve("3.1.1", "ubuntu1404")
    print(toolchain.download_url)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from hexaville_toolchain._core.platforms import DEFAULT_PLATFORM, DEFAULT_PLATFORMS, Platform
from hexaville_toolchain._core.version import (
    ARCHIVE_EXTENSION,
    RELEASE_BRANCH_SUFFIX,
    RELEASE_TAG_SUFFIX,
    SNAPSHOT_BRANCH_SUFFIX,
    SWIFT_BUILDS_URL,
)
from hexaville_toolchain.errors import UnsupportedPlatform
from hexaville_toolchain.parser import parse_version_identifier
from hexaville_toolchain.versions import (
    SNAPSHOT_PREFIX,
    DevelopmentSnapshot,
    ReleaseVersion,
    VersionIdentifier,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedToolchain:
    """
    A version identifier resolved against one platform.

    Attributes:
        version: Parsed release or snapshot
        platform: Platform the archive targets
        archive_name: Archive file name without extension
        download_url: Full archive URL
    """
    version: VersionIdentifier
    platform: Platform
    archive_name: str
    download_url: str

    @property
    def archive_filename(self) -> str:
        return f"{self.archive_name}{ARCHIVE_EXTENSION}"


class ToolchainResolver:
    """
    Builds archive names and download URLs for toolchain versions.

    The platform table is passed in explicitly; the resolver keeps no other
    state and never changes after construction, so one instance can be
    shared between threads.
    """

    def __init__(
        self,
        platforms: Mapping[str, Platform] = DEFAULT_PLATFORMS,
        base_url: str = SWIFT_BUILDS_URL,
        default_platform: Optional[str] = DEFAULT_PLATFORM,
    ):
        # Copied so later edits to the caller's table do not leak in
        self._platforms: Mapping[str, Platform] = MappingProxyType(dict(platforms))
        self._base_url = base_url.rstrip("/")
        self._default_platform = default_platform

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def supported_platforms(self) -> Tuple[str, ...]:
        return tuple(sorted(self._platforms))

    def platform(self, tag: Optional[str] = None) -> Platform:
        """
        Look up a platform by tag.

        Args:
            tag: Platform tag (default: the resolver's default platform)

        Raises:
            UnsupportedPlatform: If the tag is not in the platform table
        """
        tag = tag if tag is not None else self._default_platform
        platform = self._platforms.get(tag) if tag is not None else None
        if platform is None:
            raise UnsupportedPlatform(str(tag), self._platforms.keys())
        return platform

    def branch_name(self, version: VersionIdentifier) -> str:
        """
        Directory name of the branch a toolchain was built from.

        "swift-3.1.1-release" for releases, "swift-4.0-branch" for snapshots.
        """
        if isinstance(version, ReleaseVersion):
            return f"{SNAPSHOT_PREFIX}{version.version_string}{RELEASE_BRANCH_SUFFIX}"
        if isinstance(version, DevelopmentSnapshot):
            return f"{SNAPSHOT_PREFIX}{version.branch_version}{SNAPSHOT_BRANCH_SUFFIX}"
        raise TypeError(f"Expected a version identifier, got {type(version).__name__}")

    def release_tag(self, version: VersionIdentifier) -> str:
        """
        Tag naming one toolchain build.

        "swift-3.1.1-RELEASE" for releases, the snapshot tag itself for
        snapshots.
        """
        if isinstance(version, ReleaseVersion):
            return f"{SNAPSHOT_PREFIX}{version.version_string}{RELEASE_TAG_SUFFIX}"
        if isinstance(version, DevelopmentSnapshot):
            return version.tag
        raise TypeError(f"Expected a version identifier, got {type(version).__name__}")

    def archive_name(self, version: VersionIdentifier, platform: Optional[str] = None) -> str:
        """
        Archive base name, e.g. "swift-3.1.1-RELEASE-ubuntu14.04".

        Raises:
            UnsupportedPlatform: If the platform is not in the platform table
        """
        return self._archive_name(version, self.platform(platform))

    def download_url(self, version: VersionIdentifier, platform: Optional[str] = None) -> str:
        """
        Full download URL of the toolchain archive.

        Args:
            version: Parsed release or snapshot
            platform: Platform tag (default: the resolver's default platform)

        Raises:
            UnsupportedPlatform: If the platform is not in the platform table
        """
        return self._download_url(version, self.platform(platform))

    def _archive_name(self, version: VersionIdentifier, target: Platform) -> str:
        return f"{self.release_tag(version)}-{target.suffix}"

    def _download_url(self, version: VersionIdentifier, target: Platform) -> str:
        url = (
            f"{self._base_url}/{self.branch_name(version)}/{target.tag}/"
            f"{self.release_tag(version)}/{self._archive_name(version, target)}{ARCHIVE_EXTENSION}"
        )
        logger.debug(f"Resolved {version} for {target.tag} to {url}")
        return url

    def resolve(
        self,
        version: Union[str, VersionIdentifier],
        platform: Optional[str] = None,
    ) -> ResolvedToolchain:
        """
        Parse (if needed) and resolve a version for one platform.

        Args:
            version: Raw version string or parsed identifier
            platform: Platform tag (default: the resolver's default platform)

        Returns:
            ResolvedToolchain with archive name and download URL

        Raises:
            VersionParseError: If a raw string cannot be parsed
            UnsupportedPlatform: If the platform is not in the platform table
        """
        if isinstance(version, str):
            version = parse_version_identifier(version)
        target = self.platform(platform)
        return ResolvedToolchain(
            version=version,
            platform=target,
            archive_name=self._archive_name(version, target),
            download_url=self._download_url(version, target),
        )


def resolve_download_url(
    version: Union[str, VersionIdentifier],
    platform: str = DEFAULT_PLATFORM,
    platforms: Mapping[str, Platform] = DEFAULT_PLATFORMS,
) -> str:
    """
    Resolve the download URL for a version and platform tag.

    Args:
        version: Raw version string or parsed identifier
        platform: Platform tag (e.g. "ubuntu1404")
        platforms: Platform table to resolve against

    Returns:
        Full swift.org archive URL

    Raises:
        VersionParseError: If a raw string cannot be parsed
        UnsupportedPlatform: If the platform is not in the table
    """
    resolver = ToolchainResolver(platforms=platforms, default_platform=None)
    return resolver.resolve(version, platform).download_url
