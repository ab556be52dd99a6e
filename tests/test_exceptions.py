"""Tests for public exceptions."""

import pytest

from directus_mcp.exceptions import (
    AuthenticationError,
    ConfigLoadError,
    DirectusAPIError,
    DirectusError,
    InvalidArgumentError,
    MissingPayloadError,
    RemoteCallError,
    UnknownOperationError,
)


class TestDirectusError:
    """Tests for base DirectusError."""

    def test_is_exception(self):
        """DirectusError should be an Exception."""
        assert issubclass(DirectusError, Exception)

    @pytest.mark.parametrize(
        "cls",
        [
            ConfigLoadError,
            UnknownOperationError,
            InvalidArgumentError,
            MissingPayloadError,
            DirectusAPIError,
            AuthenticationError,
            RemoteCallError,
        ],
    )
    def test_subclasses_inherit_from_directus_error(self, cls):
        """Every error in the taxonomy should be a DirectusError."""
        assert issubclass(cls, DirectusError)


class TestUnknownOperationError:
    """Tests for UnknownOperationError."""

    def test_message_names_tool(self):
        """Should format the message with the tool name."""
        error = UnknownOperationError("unknownOp")
        assert str(error) == 'Tool "unknownOp" not found'
        assert error.name == "unknownOp"


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError and MissingPayloadError."""

    def test_stores_argument(self):
        """Should store the offending argument name."""
        error = InvalidArgumentError("Missing required argument: data", argument="data")
        assert str(error) == "Missing required argument: data"
        assert error.argument == "data"

    def test_missing_payload_message(self):
        """MissingPayloadError should carry a fixed message."""
        error = MissingPayloadError()
        assert str(error) == "Either fileUrl or fileData must be provided"
        assert isinstance(error, InvalidArgumentError)


class TestDirectusAPIError:
    """Tests for DirectusAPIError and its subclasses."""

    def test_with_message_only(self):
        """Should create error with message only."""
        error = RemoteCallError("Request failed")
        assert str(error) == "Request failed"
        assert error.status_code is None
        assert error.errors is None

    def test_with_status_code_and_errors(self):
        """Should store status code and remote errors."""
        errors = [{"message": "Forbidden"}]
        error = AuthenticationError("Authentication failed", status_code=401, errors=errors)
        assert error.status_code == 401
        assert error.errors == errors

    def test_can_be_caught_as_api_error(self):
        """Subclasses should be catchable as DirectusAPIError."""
        with pytest.raises(DirectusAPIError):
            raise RemoteCallError("boom", status_code=500)


class TestConfigLoadError:
    """Tests for ConfigLoadError."""

    def test_stores_path(self):
        """Should store the config file path."""
        error = ConfigLoadError("Config file not found", path="/tmp/config.json")
        assert error.path == "/tmp/config.json"
