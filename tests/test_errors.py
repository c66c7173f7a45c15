"""
Tests for hexaville_toolchain.errors module.
"""

import pytest
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
from hexaville_toolchain.types import ParseErrorCode


class TestHexavilleToolchainError:
    """Tests for base HexavilleToolchainError."""

    def test_is_exception(self):
        assert issubclass(HexavilleToolchainError, Exception)

    def test_message(self):
        error = HexavilleToolchainError("Test error message")
        assert str(error) == "Test error message"


class TestVersionParseError:
    """Tests for VersionParseError and its subclasses."""

    def test_inheritance(self):
        assert issubclass(VersionParseError, HexavilleToolchainError)

    @pytest.mark.parametrize(
        "error_type, code",
        [
            (MalformedVersionString, ParseErrorCode.MALFORMED),
            (NonNumericComponent, ParseErrorCode.NON_NUMERIC),
            (InvalidDate, ParseErrorCode.INVALID_DATE),
            (MissingRequiredComponent, ParseErrorCode.MISSING_COMPONENT),
        ],
    )
    def test_subclass_codes(self, error_type, code):
        """Each subclass carries its own fixed code."""
        error = error_type("detail", raw="x")
        assert isinstance(error, VersionParseError)
        assert error.code == code

    def test_base_default_code(self):
        error = VersionParseError("bad input")
        assert error.code == ParseErrorCode.MALFORMED
        assert error.raw == ""

    def test_base_explicit_code(self):
        error = VersionParseError("bad date", code=ParseErrorCode.INVALID_DATE)
        assert error.code == ParseErrorCode.INVALID_DATE

    def test_explicit_code_does_not_leak_to_class(self):
        VersionParseError("bad date", code=ParseErrorCode.INVALID_DATE)
        assert VersionParseError.code == ParseErrorCode.MALFORMED

    def test_str_format(self):
        error = NonNumericComponent("minor component 'foo' is not a number", raw="3.foo")
        assert str(error) == "non_numeric_component: minor component 'foo' is not a number"

    def test_attributes(self):
        error = InvalidDate("not a day", raw="swift-4.0-DEVELOPMENT-SNAPSHOT-2017-02-30")
        assert error.detail == "not a day"
        assert error.raw == "swift-4.0-DEVELOPMENT-SNAPSHOT-2017-02-30"

    def test_repr(self):
        error = MissingRequiredComponent("missing minor", raw="3")
        repr_str = repr(error)
        assert "MissingRequiredComponent" in repr_str
        assert "MISSING_COMPONENT" in repr_str
        assert "'3'" in repr_str

    def test_can_be_caught_as_base(self):
        with pytest.raises(HexavilleToolchainError):
            raise MalformedVersionString("nope", raw="")


class TestUnsupportedPlatform:
    """Tests for UnsupportedPlatform."""

    def test_inheritance(self):
        assert issubclass(UnsupportedPlatform, HexavilleToolchainError)

    def test_basic_creation(self):
        error = UnsupportedPlatform("windows10")
        assert error.platform == "windows10"
        assert error.supported == ()
        assert str(error) == "Unsupported platform: 'windows10'"

    def test_lists_supported_sorted(self):
        error = UnsupportedPlatform("macos", ["ubuntu1604", "ubuntu1404"])
        assert error.supported == ("ubuntu1404", "ubuntu1604")
        assert "ubuntu1404, ubuntu1604" in str(error)

    def test_repr(self):
        error = UnsupportedPlatform("macos", ["ubuntu1404"])
        repr_str = repr(error)
        assert "UnsupportedPlatform" in repr_str
        assert "'macos'" in repr_str


class TestResolverConfigError:
    """Tests for ResolverConfigError."""

    def test_inheritance(self):
        assert issubclass(ResolverConfigError, HexavilleToolchainError)

    def test_message(self):
        error = ResolverConfigError("base_url must be an http(s) URL")
        assert "base_url" in str(error)
