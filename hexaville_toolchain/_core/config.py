"""
Resolver configuration.

Environment Variables:
    HEXAVILLE_SWIFT_BUILDS_URL: Override the swift.org build root
    HEXAVILLE_SWIFT_PLATFORM: Platform tag used when none is given
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Optional

from hexaville_toolchain._core.platforms import DEFAULT_PLATFORM, DEFAULT_PLATFORMS, Platform
from hexaville_toolchain._core.version import SWIFT_BUILDS_URL
from hexaville_toolchain.errors import ResolverConfigError

if TYPE_CHECKING:
    from hexaville_toolchain.resolver import ToolchainResolver

logger = logging.getLogger(__name__)

BUILDS_URL_ENV = "HEXAVILLE_SWIFT_BUILDS_URL"
PLATFORM_ENV = "HEXAVILLE_SWIFT_PLATFORM"


@dataclass
class ResolverConfig:
    """
    Configuration for ToolchainResolver.

    Attributes:
        base_url: Root URL of the toolchain build tree
        platform: Platform tag used when a call does not name one
        platforms: Table of supported platforms, keyed by tag
    """
    base_url: str = SWIFT_BUILDS_URL
    platform: str = DEFAULT_PLATFORM
    platforms: Mapping[str, Platform] = field(default_factory=lambda: DEFAULT_PLATFORMS)

    def __post_init__(self) -> None:
        """Validate configuration on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.base_url.startswith(("https://", "http://")):
            raise ResolverConfigError(
                f"base_url must be an http(s) URL, got {self.base_url!r}"
            )

        if not self.platforms:
            raise ResolverConfigError("platforms must contain at least one platform")

        for tag, platform in self.platforms.items():
            if tag != platform.tag:
                raise ResolverConfigError(
                    f"platform table key {tag!r} does not match tag {platform.tag!r}"
                )

        if self.platform not in self.platforms:
            raise ResolverConfigError(
                f"default platform {self.platform!r} is not in the platform table "
                f"({', '.join(sorted(self.platforms))})"
            )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        platforms: Optional[Mapping[str, Platform]] = None,
    ) -> "ResolverConfig":
        """
        Build configuration from environment variables.

        Unset or empty variables keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ
            platforms: Platform table (default: DEFAULT_PLATFORMS)

        Raises:
            ResolverConfigError: If an override is invalid
        """
        environ = os.environ if environ is None else environ
        kwargs = {}

        base_url = environ.get(BUILDS_URL_ENV)
        if base_url:
            logger.info(f"Using toolchain build root from {BUILDS_URL_ENV}: {base_url}")
            kwargs["base_url"] = base_url.rstrip("/")
        elif base_url is not None:
            logger.warning(f"{BUILDS_URL_ENV} is set but empty, using {SWIFT_BUILDS_URL}")

        platform = environ.get(PLATFORM_ENV)
        if platform:
            logger.info(f"Using platform from {PLATFORM_ENV}: {platform}")
            kwargs["platform"] = platform
        elif platform is not None:
            logger.warning(f"{PLATFORM_ENV} is set but empty, using {DEFAULT_PLATFORM}")

        if platforms is not None:
            kwargs["platforms"] = platforms

        return cls(**kwargs)

    def create_resolver(self) -> "ToolchainResolver":
        """Build a ToolchainResolver from this configuration."""
        from hexaville_toolchain.resolver import ToolchainResolver

        return ToolchainResolver(
            platforms=self.platforms,
            base_url=self.base_url,
            default_platform=self.platform,
        )
