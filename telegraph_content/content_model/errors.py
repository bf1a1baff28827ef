"""Typed exception hierarchy for content and configuration errors.

All exceptions inherit from TelegraphError so callers can catch every
application-level error with one clause. Each exception keeps the context
it was raised with (paths, tags, fields) as attributes.
"""

from typing import Optional, Sequence, Tuple


def format_path(path: Sequence[int]) -> str:
    """Render a child-index path as ``[0, 2]``, or ``<root>`` when empty."""
    if not path:
        return "<root>"
    return "[" + ", ".join(str(i) for i in path) + "]"


class TelegraphError(Exception):
    """Base exception for all telegraph-content errors."""
    pass


class ContentError(TelegraphError):
    """Base exception for content tree errors."""
    pass


class DecodeError(ContentError):
    """Raised when a JSON-like value cannot be decoded into a Node or record."""

    def __init__(self, message: str, path: Sequence[int] = ()):
        self.path: Tuple[int, ...] = tuple(path)
        self.reason = message
        if self.path:
            message = f"{message} at {format_path(self.path)}"
        super().__init__(message)


class ValidationError(ContentError):
    """Raised when a node uses a tag or attribute outside the vocabulary."""

    def __init__(
        self,
        message: str,
        path: Sequence[int] = (),
        tag: Optional[str] = None,
        attribute: Optional[str] = None,
    ):
        self.path: Tuple[int, ...] = tuple(path)
        self.tag = tag
        self.attribute = attribute
        self.reason = message
        super().__init__(f"{message} at {format_path(self.path)}")


class ConfigError(TelegraphError):
    """Raised when a vocabulary configuration file is invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(TelegraphError):
    """Raised when filesystem operations fail (read, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
