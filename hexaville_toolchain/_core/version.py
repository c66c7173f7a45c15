"""
Version constants for hexaville-toolchain.

- PACKAGE_VERSION: Version of this package
- SWIFT_BUILDS_URL: Root of the swift.org toolchain build tree
- ARCHIVE_EXTENSION: Extension of every published toolchain archive
"""

from __future__ import annotations

# hexaville-toolchain version (user-facing semver)
PACKAGE_VERSION = "0.1.0"

# swift.org toolchain downloads
SWIFT_BUILDS_URL = "https://swift.org/builds"
ARCHIVE_EXTENSION = ".tar.gz"

# Path segment markers used by swift.org
RELEASE_BRANCH_SUFFIX = "-release"
RELEASE_TAG_SUFFIX = "-RELEASE"
SNAPSHOT_BRANCH_SUFFIX = "-branch"
