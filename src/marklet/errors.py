"""Exception classes for marklet.

Parsing never raises: malformed Markdown always degrades to some node tree.
These exceptions cover the surfaces around the parser (serialized trees and
configuration coming from outside).
"""

from __future__ import annotations


class MarkletError(Exception):
    """Base exception for all marklet errors."""

    pass


class SerializationError(MarkletError, ValueError):
    """Error reconstructing a node tree from serialized data.

    Raised when a serialized node has a missing or unknown ``type`` tag, or
    when the root of a JSON document is not a document node.
    """

    def __init__(self, message: str, type_tag: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Error description
            type_tag: The offending ``type`` value, if any
        """
        self.type_tag = type_tag
        super().__init__(message)


class ConfigError(MarkletError, ValueError):
    """Invalid configuration value.

    Raised when a config option has the wrong type.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Config option '{option}': {message}")
