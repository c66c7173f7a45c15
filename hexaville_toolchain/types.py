"""
Type definitions for hexaville-toolchain.

Defines enums shared across the package for:
- Toolchain version variants
- Parse failure codes
"""

from __future__ import annotations

from enum import Enum


class VersionKind(str, Enum):
    """
    Variant of a parsed toolchain version.

    - RELEASE: A tagged, numbered toolchain build (e.g. "3.1.1")
    - SNAPSHOT: A dated development snapshot cut from a release branch
      (e.g. "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a")
    """
    RELEASE = "release"
    SNAPSHOT = "snapshot"


class ParseErrorCode(str, Enum):
    """
    Reason a version string could not be parsed.
    """
    MALFORMED = "malformed_version_string"              # Matches no known shape
    NON_NUMERIC = "non_numeric_component"               # e.g. "3.foo"
    INVALID_DATE = "invalid_date"                       # Snapshot date is not a real day
    MISSING_COMPONENT = "missing_required_component"    # e.g. "3" or "3."
