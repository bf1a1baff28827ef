"""Account and page records returned by the Telegraph API.

Optional fields are None when the server did not return them. This keeps
"not returned" apart from an explicit empty value: ``access_token`` is
only present in createAccount and revokeAccessToken responses, and
``can_edit`` only when the request carried an access token. Every Account
field is optional because getAccountInfo returns only the fields asked for.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from telegraph_content.content_model.errors import DecodeError
from telegraph_content.content_model.node_models import Node
from telegraph_content.content_model.node_parser import decode_content, encode_content

logger = logging.getLogger(__name__)


def _require(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise DecodeError(f"missing field '{name}'")
    return data[name]


def _check_object(data: Any, record: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DecodeError(f"{record} must be an object, got {type(data).__name__}")
    return data


def _without_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class Account:
    """A Telegraph account.

    Each field is None when the response did not include it.

    Attributes:
        short_name: Account name shown above the "Edit/Publish" button
        author_name: Default author name for new pages
        author_url: Default profile link for the author name
        access_token: Only returned by createAccount and revokeAccessToken
        auth_url: Link that logs a browser into the account. Valid for one
            use and for 5 minutes after the response; not checked here.
        page_count: Number of pages belonging to the account
    """

    short_name: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    access_token: Optional[str] = None
    auth_url: Optional[str] = None
    page_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        data = _check_object(data, "Account")
        return cls(
            short_name=data.get("short_name"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
            access_token=data.get("access_token"),
            auth_url=data.get("auth_url"),
            page_count=data.get("page_count"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _without_none({
            "short_name": self.short_name,
            "author_name": self.author_name,
            "author_url": self.author_url,
            "access_token": self.access_token,
            "auth_url": self.auth_url,
            "page_count": self.page_count,
        })


@dataclass(frozen=True)
class Page:
    """A page on Telegraph.

    Attributes:
        path: Path to the page (the part after telegra.ph/)
        url: Full URL of the page
        title: Page title
        description: Page description
        views: Number of page views
        author_name: Author name displayed below the title
        author_url: Profile link opened from the author name
        image_url: Image URL of the page
        content: Page body; only present when return_content was requested
        can_edit: Only present when an access token was passed
    """

    path: str
    url: str
    title: str
    description: str
    views: int
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    image_url: Optional[str] = None
    content: Optional[Tuple[Node, ...]] = None
    can_edit: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Page":
        """Build a Page from an API response object.

        Args:
            data: Decoded ``Page`` JSON object

        Returns:
            Page record

        Raises:
            DecodeError: If a required field is missing or content is invalid
        """
        data = _check_object(data, "Page")
        content = data.get("content")
        return cls(
            path=_require(data, "path"),
            url=_require(data, "url"),
            title=_require(data, "title"),
            description=data.get("description", ""),
            views=_require(data, "views"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
            image_url=data.get("image_url"),
            content=decode_content(content) if content is not None else None,
            can_edit=data.get("can_edit"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _without_none({
            "path": self.path,
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "author_name": self.author_name,
            "author_url": self.author_url,
            "image_url": self.image_url,
            "content": encode_content(self.content) if self.content is not None else None,
            "views": self.views,
            "can_edit": self.can_edit,
        })


@dataclass(frozen=True)
class PageList:
    """Pages belonging to an account, most recently created first.

    The order is the server's; it is not re-sorted here.

    Attributes:
        total_count: Total number of pages of the account
        pages: Requested slice of the account's pages
    """

    total_count: int
    pages: Tuple[Page, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageList":
        data = _check_object(data, "PageList")
        pages = _require(data, "pages")
        if not isinstance(pages, list):
            raise DecodeError("field 'pages' must be an array")
        page_list = cls(
            total_count=_require(data, "total_count"),
            pages=tuple(Page.from_dict(page) for page in pages),
        )
        logger.debug(
            f"Decoded page list with {len(page_list.pages)} of {page_list.total_count} pages"
        )
        return page_list

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_count": self.total_count,
            "pages": [page.to_dict() for page in self.pages],
        }


@dataclass(frozen=True)
class PageViews:
    """Number of views of a page.

    The period counted (total, year, month, day or hour) is whatever the
    matching PageViewsOpts selected; the record itself does not carry it.
    """

    views: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageViews":
        data = _check_object(data, "PageViews")
        return cls(views=_require(data, "views"))

    def to_dict(self) -> Dict[str, Any]:
        return {"views": self.views}


@dataclass(frozen=True)
class Upload:
    """A file uploaded to telegra.ph/upload.

    Attributes:
        src: Path of the uploaded file, e.g. ``/file/abc123.jpg``
    """

    src: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Upload":
        data = _check_object(data, "Upload")
        return cls(src=_require(data, "src"))

    def to_dict(self) -> Dict[str, Any]:
        return {"src": self.src}
