"""
Exception types for hexaville-toolchain.

Provides typed exceptions for:
- Version string parsing
- Platform resolution
- Resolver configuration
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from hexaville_toolchain.types import ParseErrorCode


class HexavilleToolchainError(Exception):
    """Base exception for all hexaville-toolchain errors."""
    pass


# =============================================================================
# Parse Errors
# =============================================================================


class VersionParseError(HexavilleToolchainError):
    """
    Raised when a version string cannot be turned into a version identifier.

    Every parse error includes:
    - code: Specific failure code
    - detail: Human-readable explanation
    - raw: The string that was rejected

    Callers usually catch one of the subclasses below; catching
    VersionParseError handles all of them.

    Example:
        try:
            version = parse_version_identifier(user_input)
        except NonNumericComponent as e:
            logger.warning(f"Bad number in {e.raw!r}: {e.detail}")
    """

    code: ParseErrorCode = ParseErrorCode.MALFORMED

    def __init__(
        self,
        detail: str,
        raw: str = "",
        code: Optional[ParseErrorCode] = None,
    ):
        if code is not None:
            self.code = code
        self.detail = detail
        self.raw = raw

        super().__init__(f"{self.code.value}: {detail}")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"detail={self.detail!r}, raw={self.raw!r})"
        )


class MalformedVersionString(VersionParseError):
    """Raised when input matches neither the release nor the snapshot shape."""
    code = ParseErrorCode.MALFORMED


class NonNumericComponent(VersionParseError):
    """Raised when a component that must be an integer contains other characters."""
    code = ParseErrorCode.NON_NUMERIC


class InvalidDate(VersionParseError):
    """Raised when a snapshot date is not a real calendar date."""
    code = ParseErrorCode.INVALID_DATE


class MissingRequiredComponent(VersionParseError):
    """Raised when a required segment, such as the minor version, is absent."""
    code = ParseErrorCode.MISSING_COMPONENT


# =============================================================================
# Resolution Errors
# =============================================================================


class UnsupportedPlatform(HexavilleToolchainError):
    """
    Raised when a platform tag is not in the resolver's platform table.

    No URL is produced when this is raised.
    """

    def __init__(self, platform: str, supported: Iterable[str] = ()):
        self.platform = platform
        self.supported: Tuple[str, ...] = tuple(sorted(supported))

        message = f"Unsupported platform: {platform!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"

        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"UnsupportedPlatform(platform={self.platform!r}, "
            f"supported={self.supported!r})"
        )


class ResolverConfigError(HexavilleToolchainError):
    """
    Raised when resolver configuration is invalid.

    This includes:
    - A base URL that is not http(s)
    - A default platform missing from the platform table
    - An empty platform table
    """
    pass
