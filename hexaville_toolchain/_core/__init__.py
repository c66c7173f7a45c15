"""
Shared constants and configuration for hexaville-toolchain.

This module handles:
- Package and swift.org URL constants
- The platform table
- Resolver configuration from the environment
"""

from hexaville_toolchain._core.version import (
    PACKAGE_VERSION,
    SWIFT_BUILDS_URL,
    ARCHIVE_EXTENSION,
)
from hexaville_toolchain._core.platforms import (
    Platform,
    UBUNTU_1404,
    DEFAULT_PLATFORM,
    DEFAULT_PLATFORMS,
    platform_table,
)
from hexaville_toolchain._core.config import ResolverConfig

__all__ = [
    # Version
    "PACKAGE_VERSION",
    "SWIFT_BUILDS_URL",
    "ARCHIVE_EXTENSION",
    # Platforms
    "Platform",
    "UBUNTU_1404",
    "DEFAULT_PLATFORM",
    "DEFAULT_PLATFORMS",
    "platform_table",
    # Config
    "ResolverConfig",
]
