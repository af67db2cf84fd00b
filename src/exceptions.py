"""Centralized exception hierarchy for the Obsidian/Foundry journal bridge.

Usage:
    from exceptions import ConversionError, ConfigurationError

    raise ConversionError("Failed to convert journal HTML")
"""


class ObsidianBridgeError(Exception):
    """Base exception for all journal bridge errors."""
    pass


class ConversionError(ObsidianBridgeError):
    """Raised when Markdown/HTML conversion fails.

    Examples:
        - Prose converter failure while rendering a page
        - Malformed HTML rejected by the prose converter
    """
    pass


class ConfigurationError(ObsidianBridgeError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Unknown log level name
        - Invalid file path
    """
    pass

