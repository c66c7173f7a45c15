"""
hexaville-toolchain: Swift toolchain version resolution for Hexaville.

This package provides:
- Parsing of release versions ("3.1.1") and development snapshot tags
  ("swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a")
- A single total order over releases and snapshots
- Deterministic swift.org archive names and download URLs per platform

Quickstart:
    from hexaville_toolchain import parse_version_identifier, ToolchainResolver

    version = parse_version_identifier("3.1.1")
    url = ToolchainResolver().download_url(version, "ubuntu1404")

Configuration from the environment:
    from hexaville_toolchain import ResolverConfig

    resolver = ResolverConfig.from_env().create_resolver()
    toolchain = resolver.resolve("swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a")
"""

from hexaville_toolchain.types import (
    VersionKind,
    ParseErrorCode,
)
from hexaville_toolchain.errors import (
    HexavilleToolchainError,
    VersionParseError,
    MalformedVersionString,
    NonNumericComponent,
    InvalidDate,
    MissingRequiredComponent,
    UnsupportedPlatform,
    ResolverConfigError,
)
from hexaville_toolchain.versions import (
    ReleaseVersion,
    SwiftVersion,
    DevelopmentSnapshot,
    VersionIdentifier,
)
from hexaville_toolchain.parser import (
    parse_version_identifier,
    parse_release,
    parse_snapshot,
)
from hexaville_toolchain.resolver import (
    ToolchainResolver,
    ResolvedToolchain,
    resolve_download_url,
)
from hexaville_toolchain._core import (
    PACKAGE_VERSION,
    Platform,
    DEFAULT_PLATFORM,
    DEFAULT_PLATFORMS,
    ResolverConfig,
)

__version__ = PACKAGE_VERSION

__all__ = [
    # Version
    "__version__",
    "PACKAGE_VERSION",
    # Types
    "VersionKind",
    "ParseErrorCode",
    # Errors
    "HexavilleToolchainError",
    "VersionParseError",
    "MalformedVersionString",
    "NonNumericComponent",
    "InvalidDate",
    "MissingRequiredComponent",
    "UnsupportedPlatform",
    "ResolverConfigError",
    # Model
    "ReleaseVersion",
    "SwiftVersion",
    "DevelopmentSnapshot",
    "VersionIdentifier",
    # Parser
    "parse_version_identifier",
    "parse_release",
    "parse_snapshot",
    # Resolver
    "ToolchainResolver",
    "ResolvedToolchain",
    "resolve_download_url",
    # Config
    "Platform",
    "DEFAULT_PLATFORM",
    "DEFAULT_PLATFORMS",
    "ResolverConfig",
]
