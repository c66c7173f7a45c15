"""
Pytest configuration for hexaville-toolchain tests.
"""

import datetime

import pytest

from hexaville_toolchain import (
    DevelopmentSnapshot,
    Platform,
    ReleaseVersion,
    ToolchainResolver,
)
from hexaville_toolchain._core.platforms import platform_table


@pytest.fixture
def snapshot_tag():
    """Snapshot tag used by the Hexaville launcher tests."""
    return "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-08-04-a"


@pytest.fixture
def snapshot():
    """Parsed form of snapshot_tag."""
    return DevelopmentSnapshot(4, 0, datetime.date(2017, 8, 4), "a")


@pytest.fixture
def release():
    """Release 3.1.1."""
    return ReleaseVersion(3, 1, 1)


@pytest.fixture
def resolver():
    """Resolver with the default platform table."""
    return ToolchainResolver()


@pytest.fixture
def extended_platforms():
    """Platform table with an extra Ubuntu 16.04 entry."""
    return platform_table([
        Platform(tag="ubuntu1404", suffix="ubuntu14.04"),
        Platform(tag="ubuntu1604", suffix="ubuntu16.04"),
    ])
