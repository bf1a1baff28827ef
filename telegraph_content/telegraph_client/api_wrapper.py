"""API wrapper for the Telegraph HTTP API.

This module sends method calls over a requests session, unwraps the
``{"ok": ..., "result": ...}`` envelope, translates failures to the typed
exception hierarchy and decodes results into records. It does not retry
or rate-limit; callers that need either wrap these calls.
"""

import json
import logging
import os
import re
from typing import Any, Dict, Iterable, Optional, Sequence

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from telegraph_content.content_model.node_models import Node
from telegraph_content.content_model.node_parser import dumps_content
from telegraph_content.content_model.validator import validate_content
from telegraph_content.content_model.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from telegraph_content.records.models import Account, Page, PageList, PageViews, Upload
from telegraph_content.records.options import (
    CreateAccountOpts,
    EditAccountInfoOpts,
    PageListOpts,
    PageOpts,
    PageViewsOpts,
)

from .auth import Authenticator
from .errors import APIResponseError, APIUnreachableError, TransportError

logger = logging.getLogger(__name__)

UPLOAD_URL = "https://telegra.ph/upload"

# Fields getAccountInfo can return
ACCOUNT_FIELDS = ("short_name", "author_name", "author_url", "auth_url", "page_count")


class TelegraphAPI:
    """Wrapper around the Telegraph HTTP API with error translation.

    This class provides:
    1. ``invoke`` - a raw method call returning the decoded ``result``
    2. Typed methods returning Account / Page / PageList / PageViews
    3. Translation of HTTP failures into TransportError subclasses
    4. Vocabulary validation of content before it is published

    Example:
        >>> api = TelegraphAPI()
        >>> page = api.get_page("Sample-Page-12-15", return_content=True)
    """

    def __init__(
        self,
        authenticator: Optional[Authenticator] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        """Initialize the API wrapper.

        Args:
            authenticator: Source of the API URL and default access token
            session: HTTP session to reuse (a new one is created if omitted)
            timeout: Per-request timeout in seconds
        """
        self._authenticator = authenticator or Authenticator()
        self._session = session or requests.Session()
        self._timeout = timeout

    def _resolve_token(self, access_token: Optional[str]) -> str:
        if access_token:
            return access_token
        return self._authenticator.get_credentials().access_token

    def _validate_path(self, path: str) -> None:
        """Validate that a page path is a single URL segment.

        Raises:
            ValueError: If path is empty or contains separators
        """
        if not path or not str(path).strip():
            raise ValueError("path cannot be empty")

        if not re.match(r'^[^/\s?#]+$', str(path)):
            raise ValueError(
                f"Invalid page path: '{path}'. "
                f"Paths are a single segment such as 'Sample-Page-12-15'."
            )

    def _sanitize_credentials(self, text: str) -> str:
        """Mask access tokens in error messages and log lines.

        Example:
            >>> api._sanitize_credentials("access_token=d3b25feccb89e508a9114afb82aa421fe2a9712b963b387cc5ad71e58722")
            'access_token=***REDACTED***'
        """
        if not text:
            return text

        sanitized = re.sub(
            r'(access_?token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            text,
            flags=re.IGNORECASE
        )

        # Bare tokens: long hex runs
        sanitized = re.sub(r'\b[0-9a-fA-F]{32,}\b', '***REDACTED***', sanitized)

        return sanitized

    @staticmethod
    def _encode_params(params: Dict[str, Any]) -> Dict[str, Any]:
        encoded = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            encoded[key] = value
        return encoded

    def _unwrap(self, response: requests.Response, method_name: str) -> Any:
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Telegraph API returned invalid JSON for {method_name} "
                f"(HTTP {response.status_code})"
            ) from e

        if not isinstance(body, dict):
            raise TransportError(f"Unexpected response shape for {method_name}")

        if not body.get("ok"):
            error = self._sanitize_credentials(str(body.get("error", "unknown error")))
            logger.error(f"API method {method_name} failed: {error}")
            raise APIResponseError(method_name, error)

        return body.get("result")

    def invoke(self, method_name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Call a Telegraph API method.

        Args:
            method_name: API method, e.g. ``getPage``
            params: Method parameters; None values are dropped

        Returns:
            The ``result`` member of the response

        Raises:
            APIUnreachableError: On timeouts and connection failures
            APIResponseError: If the API answers ``ok: false``
            TransportError: On other HTTP or response-format failures
        """
        url = f"{self._authenticator.get_api_url()}/{method_name}"
        logger.debug(f"Calling Telegraph API method {method_name}")

        try:
            response = self._session.post(
                url,
                data=self._encode_params(params or {}),
                timeout=self._timeout,
            )
        except (Timeout, ConnectionError) as e:
            raise APIUnreachableError(endpoint=url) from e
        except RequestException as e:
            safe_error_msg = self._sanitize_credentials(str(e))
            logger.error(f"API operation failed: {method_name} - {safe_error_msg}")
            raise TransportError(f"Telegraph API failure during {method_name}") from e

        return self._unwrap(response, method_name)

    def _content_param(
        self,
        content: Sequence[Node],
        validate: bool,
        vocabulary: Vocabulary,
    ) -> str:
        if validate:
            validate_content(content, vocabulary)
        return dumps_content(content)

    def create_account(
        self, short_name: str, opts: Optional[CreateAccountOpts] = None
    ) -> Account:
        """Create a new account. The result carries its access_token."""
        params = {"short_name": short_name, **(opts or CreateAccountOpts()).to_params()}
        return Account.from_dict(self.invoke("createAccount", params))

    def edit_account_info(
        self, opts: EditAccountInfoOpts, access_token: Optional[str] = None
    ) -> Account:
        """Update account information. Only fields set in opts change."""
        params = {"access_token": self._resolve_token(access_token), **opts.to_params()}
        return Account.from_dict(self.invoke("editAccountInfo", params))

    def get_account_info(
        self,
        fields: Optional[Iterable[str]] = None,
        access_token: Optional[str] = None,
    ) -> Account:
        """Get account information.

        Args:
            fields: Subset of ACCOUNT_FIELDS to return (server default:
                short_name, author_name, author_url)
            access_token: Token to use instead of the configured one
        """
        params: Dict[str, Any] = {"access_token": self._resolve_token(access_token)}
        if fields is not None:
            fields = list(fields)
            unknown = set(fields) - set(ACCOUNT_FIELDS)
            if unknown:
                raise ValueError(f"Unknown account fields: {', '.join(sorted(unknown))}")
            params["fields"] = json.dumps(fields)
        return Account.from_dict(self.invoke("getAccountInfo", params))

    def revoke_access_token(self, access_token: Optional[str] = None) -> Account:
        """Revoke the token and get a new one (returned in the Account)."""
        params = {"access_token": self._resolve_token(access_token)}
        return Account.from_dict(self.invoke("revokeAccessToken", params))

    def create_page(
        self,
        title: str,
        content: Sequence[Node],
        opts: Optional[PageOpts] = None,
        access_token: Optional[str] = None,
        validate: bool = True,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> Page:
        """Create a new page.

        Args:
            title: Page title
            content: Page body
            opts: Author and return_content options
            access_token: Token to use instead of the configured one
            validate: Check content against vocabulary before sending
            vocabulary: Allowed tags and attributes

        Raises:
            ValidationError: If validate is set and content is outside vocabulary
        """
        params = {
            "access_token": self._resolve_token(access_token),
            "title": title,
            "content": self._content_param(content, validate, vocabulary),
            **(opts or PageOpts()).to_params(),
        }
        return Page.from_dict(self.invoke("createPage", params))

    def edit_page(
        self,
        path: str,
        title: str,
        content: Sequence[Node],
        opts: Optional[PageOpts] = None,
        access_token: Optional[str] = None,
        validate: bool = True,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> Page:
        """Replace an existing page's title and content. See create_page."""
        self._validate_path(path)
        params = {
            "access_token": self._resolve_token(access_token),
            "path": path,
            "title": title,
            "content": self._content_param(content, validate, vocabulary),
            **(opts or PageOpts()).to_params(),
        }
        return Page.from_dict(self.invoke("editPage", params))

    def get_page(self, path: str, return_content: bool = False) -> Page:
        """Get a page. Content is only included when return_content is set."""
        self._validate_path(path)
        params = {"path": path, "return_content": return_content}
        return Page.from_dict(self.invoke("getPage", params))

    def get_page_list(
        self,
        opts: Optional[PageListOpts] = None,
        access_token: Optional[str] = None,
    ) -> PageList:
        """Get one slice of the account's pages, most recent first."""
        params = {
            "access_token": self._resolve_token(access_token),
            **(opts or PageListOpts()).to_params(),
        }
        return PageList.from_dict(self.invoke("getPageList", params))

    def get_views(self, path: str, opts: Optional[PageViewsOpts] = None) -> PageViews:
        """Get the view count of a page for the period opts selects."""
        self._validate_path(path)
        params = {"path": path, **(opts or PageViewsOpts()).to_params()}
        return PageViews.from_dict(self.invoke("getViews", params))

    def upload_file(self, file_path: str) -> Upload:
        """Upload an image or video to telegra.ph.

        Args:
            file_path: Local file to upload

        Returns:
            Upload whose src can be used in an img or video node

        Raises:
            APIUnreachableError: On timeouts and connection failures
            APIResponseError: If the upload endpoint reports an error
            TransportError: On other HTTP or response-format failures
        """
        logger.debug(f"Uploading {os.path.basename(file_path)}")
        try:
            with open(file_path, 'rb') as f:
                response = self._session.post(
                    UPLOAD_URL,
                    files={"file": (os.path.basename(file_path), f)},
                    timeout=self._timeout,
                )
        except (Timeout, ConnectionError) as e:
            raise APIUnreachableError(endpoint=UPLOAD_URL) from e
        except RequestException as e:
            logger.error(f"Upload failed: {self._sanitize_credentials(str(e))}")
            raise TransportError("Telegraph upload failure") from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Upload endpoint returned invalid JSON (HTTP {response.status_code})"
            ) from e

        # Success is a one-element list, failure an {"error": ...} object
        if isinstance(body, dict) and "error" in body:
            raise APIResponseError("upload", str(body["error"]))
        if not isinstance(body, list) or not body:
            raise TransportError("Unexpected upload response shape")

        return Upload.from_dict(body[0])
