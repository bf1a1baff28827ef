"""Typed exception hierarchy for Telegraph API transport errors.

All exceptions inherit from TransportError, itself a TelegraphError, and
carry the endpoint, method or variable involved in the failure.
"""

from telegraph_content.content_model.errors import TelegraphError


class TransportError(TelegraphError):
    """Raised when a call to the Telegraph API fails."""
    pass


class APIUnreachableError(TransportError):
    """Raised when the Telegraph API times out or refuses connections."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIResponseError(TransportError):
    """Raised when the API answers with ``{"ok": false, "error": ...}``."""

    def __init__(self, method: str, error: str):
        super().__init__(f"Telegraph API method '{method}' failed: {error}")
        self.method = method
        self.error = error


class MissingTokenError(TransportError):
    """Raised when an access token is required but not configured."""

    def __init__(self, variable: str):
        super().__init__(
            f"Access token is missing (set {variable} or pass access_token)"
        )
        self.variable = variable
