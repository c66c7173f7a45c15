"""
Parsing of raw version strings into version identifiers.

Two shapes are recognized, checked in this order:

1. Development snapshot:
   "swift-<major>.<minor>-DEVELOPMENT-SNAPSHOT-<YYYY>-<MM>-<DD>[-<letter>]"
2. Release:
   "<major>.<minor>[.<patch>]"

Input is never trimmed or normalized. Anything that fits neither shape
fails with MalformedVersionString; there is no fallback version.
"""

from __future__ import annotations

import datetime
import logging
import re
import string
from typing import List

from hexaville_toolchain.errors import (
    InvalidDate,
    MalformedVersionString,
    MissingRequiredComponent,
    NonNumericComponent,
)
from hexaville_toolchain.versions import (
    SNAPSHOT_MARKER,
    SNAPSHOT_PREFIX,
    DevelopmentSnapshot,
    ReleaseVersion,
    VersionIdentifier,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_SNAPSHOT_SEPARATOR = f"-{SNAPSHOT_MARKER}-"

# (name, width) of each dash-separated date field
_DATE_FIELDS = (("year", 4), ("month", 2), ("day", 2))


def _to_int(raw: str, name: str, value: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise NonNumericComponent(
            f"{name} component {value!r} is not a non-negative integer",
            raw=raw,
        )
    return int(value)


def _require_str(raw: object) -> None:
    if not isinstance(raw, str):
        raise MalformedVersionString(
            f"version must be a string, got {type(raw).__name__}",
            raw=repr(raw),
        )


def _is_snapshot_shape(raw: str) -> bool:
    return raw.startswith(SNAPSHOT_PREFIX) and _SNAPSHOT_SEPARATOR in raw


def _is_release_shape(raw: str) -> bool:
    return bool(raw) and raw[0] in string.digits


def _split_branch(raw: str, branch: str) -> List[int]:
    parts = branch.split(".")
    if len(parts) > 2:
        raise MalformedVersionString(
            f"snapshot branch {branch!r} must be <major>.<minor>",
            raw=raw,
        )
    if len(parts) < 2 or not parts[1]:
        raise MissingRequiredComponent(
            f"snapshot branch {branch!r} is missing the minor version",
            raw=raw,
        )
    if not parts[0]:
        raise MissingRequiredComponent(
            f"snapshot branch {branch!r} is missing the major version",
            raw=raw,
        )
    return [_to_int(raw, name, part) for name, part in zip(("major", "minor"), parts)]


def _parse_date(raw: str, fields: List[str]) -> datetime.date:
    text = "-".join(fields)
    if len(fields) != len(_DATE_FIELDS):
        raise InvalidDate(f"snapshot date {text!r} is not in YYYY-MM-DD form", raw=raw)

    values = []
    for (name, width), field in zip(_DATE_FIELDS, fields):
        if len(field) != width or not _DIGITS.fullmatch(field):
            raise InvalidDate(
                f"snapshot date {text!r} has a malformed {name} field {field!r}",
                raw=raw,
            )
        values.append(int(field))

    try:
        return datetime.date(*values)
    except ValueError as e:
        raise InvalidDate(f"snapshot date {text!r} is not a calendar date: {e}", raw=raw) from e


def parse_snapshot(raw: str) -> DevelopmentSnapshot:
    """
    Parse a development snapshot tag.

    Args:
        raw: Tag like "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a"

    Returns:
        The parsed DevelopmentSnapshot

    Raises:
        MalformedVersionString: If raw is not shaped like a snapshot tag
        NonNumericComponent: If major or minor is not an integer
        MissingRequiredComponent: If major or minor is absent
        InvalidDate: If the date is not a real YYYY-MM-DD day
    """
    _require_str(raw)
    if not _is_snapshot_shape(raw):
        raise MalformedVersionString(
            f"expected {SNAPSHOT_PREFIX}<major>.<minor>{_SNAPSHOT_SEPARATOR}<date>[-<letter>]",
            raw=raw,
        )

    head, _, tail = raw.partition(_SNAPSHOT_SEPARATOR)
    branch = head[len(SNAPSHOT_PREFIX):]
    major, minor = _split_branch(raw, branch)

    fields = tail.split("-")
    if len(fields) > len(_DATE_FIELDS) + 1:
        raise MalformedVersionString(
            f"unexpected trailing text after snapshot date in {tail!r}",
            raw=raw,
        )
    suffix = None
    if len(fields) > len(_DATE_FIELDS):
        suffix = fields.pop()
        if len(suffix) != 1 or suffix not in string.ascii_lowercase:
            raise MalformedVersionString(
                f"snapshot suffix {suffix!r} must be a single lowercase letter",
                raw=raw,
            )
    date = _parse_date(raw, fields)

    snapshot = DevelopmentSnapshot(major=major, minor=minor, date=date, suffix=suffix)
    logger.debug(f"Parsed {raw!r} as development snapshot {snapshot!r}")
    return snapshot


def parse_release(raw: str) -> ReleaseVersion:
    """
    Parse a release version string.

    Args:
        raw: Version like "3.1" or "3.1.1"

    Returns:
        The parsed ReleaseVersion; patch is 0 when omitted

    Raises:
        MalformedVersionString: If raw is not shaped like a release version
        NonNumericComponent: If a component is not an integer (e.g. "3.foo")
        MissingRequiredComponent: If the minor (or a dotted) component is absent
    """
    _require_str(raw)
    if not _is_release_shape(raw):
        raise MalformedVersionString("expected <major>.<minor>[.<patch>]", raw=raw)

    parts = raw.split(".")
    if len(parts) > 3:
        raise MalformedVersionString(
            f"release version has {len(parts)} components, at most 3 allowed",
            raw=raw,
        )
    if len(parts) < 2:
        raise MissingRequiredComponent("release version is missing the minor version", raw=raw)

    names = ("major", "minor", "patch")
    for name, part in zip(names, parts):
        if not part:
            raise MissingRequiredComponent(
                f"release version has an empty {name} component",
                raw=raw,
            )

    numbers = [_to_int(raw, name, part) for name, part in zip(names, parts)]
    version = ReleaseVersion(*numbers)
    logger.debug(f"Parsed {raw!r} as release {version!r}")
    return version


def parse_version_identifier(raw: str) -> VersionIdentifier:
    """
    Parse any supported version string.

    The snapshot shape is tried first, then the release shape.

    Args:
        raw: A release version ("3.1.1") or snapshot tag

    Returns:
        ReleaseVersion or DevelopmentSnapshot

    Raises:
        VersionParseError: A subclass naming the exact failure
    """
    _require_str(raw)
    if _is_snapshot_shape(raw):
        return parse_snapshot(raw)
    if _is_release_shape(raw):
        return parse_release(raw)
    raise MalformedVersionString(
        "expected <major>.<minor>[.<patch>] or a DEVELOPMENT-SNAPSHOT tag",
        raw=raw,
    )
