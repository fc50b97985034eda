"""Tests for device error classification."""

import pytest

from pjlink_projector.exceptions import DeviceErrorKind, PjlinkDeviceError, PjlinkProjectorError
from pjlink_projector.protocol import classify_error_code, is_error_code


class TestClassifyErrorCode:
    """Tests for classify_error_code."""

    def test_known_codes_are_distinct(self):
        """Test that each documented code maps to its own kind."""
        kinds = [classify_error_code(code).kind for code in ("ERR1", "ERR2", "ERR3", "ERR4", "ERRA")]
        assert kinds == [
            DeviceErrorKind.UNDEFINED_COMMAND,
            DeviceErrorKind.INVALID_PARAMETER,
            DeviceErrorKind.TEMPORARILY_UNAVAILABLE,
            DeviceErrorKind.DEVICE_FAILURE,
            DeviceErrorKind.AUTHORIZATION_ERROR,
        ]
        assert len(set(kinds)) == 5

    @pytest.mark.parametrize("code", ["ERR5", "ERRZ", "ERR?"])
    def test_unknown_code(self, code):
        """Test that unrecognized codes still yield a device error."""
        error = classify_error_code(code)
        assert isinstance(error, PjlinkDeviceError)
        assert isinstance(error, PjlinkProjectorError)
        assert error.kind == DeviceErrorKind.UNKNOWN
        assert error.code == code
        assert code in str(error)

    def test_message_names_kind(self):
        """Test that the message includes the code and a readable kind."""
        assert str(classify_error_code("ERR3")) == "Device reported error ERR3 (temporarily unavailable)"


class TestIsErrorCode:
    """Tests for is_error_code."""

    @pytest.mark.parametrize("value,expected", [
        ("ERR1", True),
        ("ERRA", True),
        ("ERR", False),
        ("ERR12", False),
        ("OK", False),
        ("err1", False),
    ])
    def test_is_error_code(self, value, expected):
        """Test error marker detection."""
        assert is_error_code(value) is expected
