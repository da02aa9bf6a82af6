"""
Tests for the error hierarchy and error_boundary decorator
"""

import logging

import pytest

from wonky.utils.errors import (
    CommandExecutionError,
    ConfigurationError,
    ParseError,
    ViewportError,
    WonkyError,
    error_boundary,
)


class TestErrorHierarchy:
    """Test exception types"""

    @pytest.mark.parametrize(
        "error_class", [ConfigurationError, CommandExecutionError, ParseError, ViewportError]
    )
    def test_all_errors_are_wonky_errors(self, error_class):
        assert issubclass(error_class, WonkyError)

    def test_configuration_error_with_path(self):
        error = ConfigurationError("Bad value", "/tmp/config.yaml")
        assert str(error) == "Bad value (config: /tmp/config.yaml)"
        assert error.path == "/tmp/config.yaml"

    def test_configuration_error_without_path(self):
        assert str(ConfigurationError("Bad value")) == "Bad value"

    def test_parse_error_keeps_output(self):
        error = ParseError("abc", "a non-negative integer")
        assert str(error) == "Cannot parse 'abc' as a non-negative integer"
        assert error.output == "abc"
        assert error.expected == "a non-negative integer"


class TestErrorBoundary:
    """Test the error_boundary decorator"""

    def test_passes_return_value_through(self):
        @error_boundary()
        def compute():
            return 42

        assert compute() == 42

    def test_returns_default_on_listed_error(self, caplog):
        @error_boundary(exceptions=(ParseError,), default_return=False, log_level=logging.WARNING)
        def refresh():
            raise ParseError("oops", "a boolean")

        with caplog.at_level(logging.WARNING):
            assert refresh() is False

        assert "Error in refresh: Cannot parse 'oops' as a boolean" in caplog.text
        assert caplog.records[0].levelno == logging.WARNING
        assert not caplog.records[0].exc_info

    def test_other_errors_propagate(self):
        @error_boundary(exceptions=(ParseError,))
        def refresh():
            raise CommandExecutionError("Failed to execute 'missing'")

        with pytest.raises(CommandExecutionError):
            refresh()

    def test_reraise_after_logging(self, caplog):
        @error_boundary(exceptions=(ValueError,), reraise=True)
        def explode():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            explode()

        assert caplog.records[0].exc_info is not None

    def test_preserves_function_metadata(self):
        @error_boundary()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
