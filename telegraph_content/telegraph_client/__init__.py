"""Thin client for the Telegraph HTTP API.

Issues method calls and hands back decoded records; the content model and
records packages never touch the network themselves.
"""

from .errors import (
    TransportError,
    APIUnreachableError,
    APIResponseError,
    MissingTokenError,
)
from .auth import Authenticator, Credentials
from .api_wrapper import TelegraphAPI

__all__ = [
    "TransportError",
    "APIUnreachableError",
    "APIResponseError",
    "MissingTokenError",
    "Authenticator",
    "Credentials",
    "TelegraphAPI",
]
