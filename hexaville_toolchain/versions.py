"""
Toolchain version identifiers and their ordering.

Two variants exist:
- ReleaseVersion: "3.1", "3.1.1"
- DevelopmentSnapshot: "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a"

Both share one total order. Within a variant, components compare
lexicographically. Across variants, (major, minor) decides first; on a tie
the release is greater, since a snapshot precedes the release it leads up to.

Usage:
    from hexaville_toolchain import ReleaseVersion, DevelopmentSnapshot

    assert ReleaseVersion(4, 0) > ReleaseVersion(3, 1)
    snapshot = DevelopmentSnapshot.parse("swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a")
    assert snapshot < ReleaseVersion(4, 0)
"""

from __future__ import annotations

import datetime
import string
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from hexaville_toolchain.types import VersionKind

SNAPSHOT_PREFIX = "swift-"
SNAPSHOT_MARKER = "DEVELOPMENT-SNAPSHOT"

# Position of the variant rank inside a sort key; snapshots rank below releases
_SNAPSHOT_RANK = 0
_RELEASE_RANK = 1

SortKey = Tuple[int, int, int, int, int]


def _check_component(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class _OrderedVersion:
    """Rich comparisons driven by a per-variant sort key."""

    __slots__ = ()

    kind: VersionKind

    def sort_key(self) -> SortKey:
        """
        Key that places this version in the shared order.

        Subclasses must override this. Keys are (major, minor, rank, ...),
        with snapshots ranked below releases of the same major.minor.
        """
        raise NotImplementedError

    def _compare_key(self, other: Any) -> Optional[SortKey]:
        if isinstance(other, _OrderedVersion):
            return other.sort_key()
        return None

    def __eq__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() == key

    def __ne__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() != key

    def __lt__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() < key

    def __le__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() <= key

    def __gt__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() > key

    def __ge__(self, other: Any) -> bool:
        key = self._compare_key(other)
        if key is None:
            return NotImplemented
        return self.sort_key() >= key

    def __hash__(self) -> int:
        return hash(self.sort_key())


@dataclass(frozen=True, eq=False)
class ReleaseVersion(_OrderedVersion):
    """
    A tagged, numbered toolchain release.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch number (0 when the source string omitted it)
    """
    major: int
    minor: int
    patch: int = 0

    kind = VersionKind.RELEASE

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)

    @classmethod
    def parse(cls, raw: str) -> "ReleaseVersion":
        """
        Parse a release string such as "3.1" or "3.1.1".

        Raises:
            VersionParseError: If raw is not a valid release version
        """
        from hexaville_toolchain.parser import parse_release
        return parse_release(raw)

    @property
    def version_string(self) -> str:
        """Dotted form used on swift.org; the patch is dropped when it is 0."""
        if self.patch == 0:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"

    def sort_key(self) -> SortKey:
        return (self.major, self.minor, _RELEASE_RANK, self.patch, 0)

    def __str__(self) -> str:
        return self.version_string


@dataclass(frozen=True, eq=False)
class DevelopmentSnapshot(_OrderedVersion):
    """
    A dated development snapshot cut from a release branch.

    Attributes:
        major: Major version of the branch
        minor: Minor version of the branch
        date: Day the snapshot was cut
        suffix: Single lowercase letter separating snapshots cut on the same day
    """
    major: int
    minor: int
    date: datetime.date
    suffix: Optional[str] = None

    kind = VersionKind.SNAPSHOT

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        # datetime is a date subclass but does not compare with plain dates
        if isinstance(self.date, datetime.datetime) or not isinstance(self.date, datetime.date):
            raise TypeError(f"date must be a datetime.date, got {type(self.date).__name__}")
        if self.suffix is not None and (
            len(self.suffix) != 1 or self.suffix not in string.ascii_lowercase
        ):
            raise ValueError(f"suffix must be one lowercase ASCII letter, got {self.suffix!r}")

    @classmethod
    def parse(cls, raw: str) -> "DevelopmentSnapshot":
        """
        Parse a snapshot tag such as "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a".

        Raises:
            VersionParseError: If raw is not a valid snapshot tag
        """
        from hexaville_toolchain.parser import parse_snapshot
        return parse_snapshot(raw)

    @property
    def branch_version(self) -> str:
        return f"{self.major}.{self.minor}"

    @property
    def tag(self) -> str:
        """The snapshot tag exactly as published on swift.org."""
        tag = f"{SNAPSHOT_PREFIX}{self.branch_version}-{SNAPSHOT_MARKER}-{self.date.isoformat()}"
        if self.suffix:
            tag += f"-{self.suffix}"
        return tag

    def sort_key(self) -> SortKey:
        # No suffix sorts before "a"
        suffix_rank = ord(self.suffix) if self.suffix else 0
        return (self.major, self.minor, _SNAPSHOT_RANK, self.date.toordinal(), suffix_rank)

    def __str__(self) -> str:
        return self.tag


VersionIdentifier = Union[ReleaseVersion, DevelopmentSnapshot]

# Name used throughout the Hexaville launcher
SwiftVersion = ReleaseVersion
