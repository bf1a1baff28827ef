"""Authentication module for loading the Telegraph access token.

This module loads the account access token and API base URL from
environment variables using python-dotenv. The token is never logged.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import MissingTokenError

DEFAULT_API_URL = "https://api.telegra.ph"
TOKEN_VARIABLE = "TELEGRAPH_ACCESS_TOKEN"
API_URL_VARIABLE = "TELEGRAPH_API_URL"


class Credentials(NamedTuple):
    """Telegraph API credentials."""
    api_url: str
    access_token: str


class Authenticator:
    """Loads Telegraph settings from environment variables.

    Settings are loaded from a .env file using python-dotenv.

    Environment variables:
        TELEGRAPH_ACCESS_TOKEN: Account access token (required for calls
            that act on an account)
        TELEGRAPH_API_URL: API base URL (default https://api.telegra.ph)

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_api_url(self) -> str:
        """Get the API base URL without a trailing slash."""
        return (os.getenv(API_URL_VARIABLE) or DEFAULT_API_URL).rstrip('/')

    def get_credentials(self) -> Credentials:
        """Get the API URL and access token.

        Returns:
            Credentials: A named tuple containing api_url and access_token

        Raises:
            MissingTokenError: If TELEGRAPH_ACCESS_TOKEN is not set
        """
        access_token = os.getenv(TOKEN_VARIABLE)
        if not access_token:
            raise MissingTokenError(TOKEN_VARIABLE)

        return Credentials(api_url=self.get_api_url(), access_token=access_token)
