"""Tests for exception hierarchy."""

import pytest


class TestExceptionHierarchy:
    """Tests for exception classes."""

    def test_base_exception_exists(self):
        """Should have ObsidianBridgeError base exception."""
        from exceptions import ObsidianBridgeError

        assert issubclass(ObsidianBridgeError, Exception)

    @pytest.mark.parametrize("name", ["ConversionError", "ConfigurationError"])
    def test_subclasses_inherit_from_base(self, name):
        import exceptions

        assert issubclass(getattr(exceptions, name), exceptions.ObsidianBridgeError)

    def test_all_exceptions_have_message(self):
        """All exception types should store messages correctly."""
        from exceptions import (
            ObsidianBridgeError,
            ConversionError,
            ConfigurationError,
        )

        exceptions = [
            (ObsidianBridgeError, "base error"),
            (ConversionError, "conversion failed"),
            (ConfigurationError, "config missing"),
        ]

        for exc_class, message in exceptions:
            err = exc_class(message)
            assert str(err) == message, f"{exc_class.__name__} did not store message"

    def test_exceptions_can_be_caught_by_base(self):
        """All exceptions should be catchable by ObsidianBridgeError."""
        from exceptions import (
            ObsidianBridgeError,
            ConversionError,
            ConfigurationError,
        )

        for exc_class in [ConversionError, ConfigurationError]:
            with pytest.raises(ObsidianBridgeError):
                raise exc_class("test")
