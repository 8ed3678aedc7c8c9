"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

import pytest

from portfolio_cli.client.errors import (
    ConfigurationError,
    FormValidationError,
    PortfolioCLIError,
    RequestFailedError,
    SiteConnectionError,
    error_handler,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = PortfolioCLIError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_connection_error(self):
        exc = SiteConnectionError("cannot connect")
        assert isinstance(exc, PortfolioCLIError)
        assert exc.exit_code == 2

    def test_request_failed(self):
        exc = RequestFailedError(500, "server error")
        assert isinstance(exc, PortfolioCLIError)
        assert exc.exit_code == 3
        assert exc.status_code == 500
        assert "500" in str(exc)
        assert "server error" in str(exc)

    def test_configuration_error(self):
        exc = ConfigurationError("no url")
        assert isinstance(exc, PortfolioCLIError)
        assert exc.exit_code == 4

    def test_form_validation_error(self):
        exc = FormValidationError({"title": "Title is required"})
        assert exc.exit_code == 5
        assert exc.field_errors == {"title": "Title is required"}
        assert "title: Title is required" in str(exc)

    def test_form_validation_error_empty(self):
        exc = FormValidationError()
        assert exc.field_errors == {}
        assert str(exc) == "Invalid project"


class TestErrorHandler:
    def test_catches_request_failure(self):
        @error_handler
        def raises_request():
            raise RequestFailedError(404, "gone")

        with pytest.raises(SystemExit) as exc_info:
            raises_request()
        assert exc_info.value.code == 3

    def test_catches_value_error(self):
        @error_handler
        def raises_value():
            raise ValueError("bad format")

        with pytest.raises(SystemExit) as exc_info:
            raises_value()
        assert exc_info.value.code == 1

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()
