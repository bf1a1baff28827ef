"""Optional request parameters for Telegraph API methods.

Each options record turns into a parameter dict with ``to_params``. Unset
fields are left out so the server applies its own defaults.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Server-side limit for getPageList
MAX_PAGE_LIST_LIMIT = 200


def _params(**values: Any) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class CreateAccountOpts:
    """Optional parameters for createAccount."""

    author_name: Optional[str] = None
    author_url: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        return _params(author_name=self.author_name, author_url=self.author_url)


@dataclass(frozen=True)
class EditAccountInfoOpts:
    """Optional parameters for editAccountInfo. Only set fields change."""

    short_name: Optional[str] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        return _params(
            short_name=self.short_name,
            author_name=self.author_name,
            author_url=self.author_url,
        )


@dataclass(frozen=True)
class PageOpts:
    """Optional parameters for createPage and editPage.

    Attributes:
        author_name: Author name displayed below the title
        author_url: Profile link opened from the author name
        return_content: Ask the server to include content in the result
    """

    author_name: Optional[str] = None
    author_url: Optional[str] = None
    return_content: bool = False

    def to_params(self) -> Dict[str, Any]:
        return _params(
            author_name=self.author_name,
            author_url=self.author_url,
            return_content=True if self.return_content else None,
        )


@dataclass(frozen=True)
class PageListOpts:
    """Optional parameters for getPageList.

    Attributes:
        offset: Sequential number of the first page (server default 0)
        limit: Number of pages to return, 0-200 (server default 50)
    """

    offset: Optional[int] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.limit is not None and not 0 <= self.limit <= MAX_PAGE_LIST_LIMIT:
            raise ValueError(
                f"limit must be between 0 and {MAX_PAGE_LIST_LIMIT}, got {self.limit}"
            )

    def to_params(self) -> Dict[str, Any]:
        return _params(offset=self.offset, limit=self.limit)


@dataclass(frozen=True)
class PageViewsOpts:
    """Optional parameters for getViews.

    The most specific field passed selects the period: year, month, day
    or hour. A field requires every coarser one to be passed too.
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    hour: Optional[int] = None

    def __post_init__(self) -> None:
        if self.month is not None and self.year is None:
            raise ValueError("year is required when month is passed")
        if self.day is not None and self.month is None:
            raise ValueError("month is required when day is passed")
        if self.hour is not None and self.day is None:
            raise ValueError("day is required when hour is passed")

        if self.year is not None and not 2000 <= self.year <= 2100:
            raise ValueError(f"year must be between 2000 and 2100, got {self.year}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")
        if self.day is not None and not 1 <= self.day <= 31:
            raise ValueError(f"day must be between 1 and 31, got {self.day}")
        if self.hour is not None and not 0 <= self.hour <= 24:
            raise ValueError(f"hour must be between 0 and 24, got {self.hour}")

    @property
    def granularity(self) -> str:
        """Period the resulting view count covers."""
        if self.hour is not None:
            return "hour"
        if self.day is not None:
            return "day"
        if self.month is not None:
            return "month"
        if self.year is not None:
            return "year"
        return "total"

    def to_params(self) -> Dict[str, Any]:
        return _params(year=self.year, month=self.month, day=self.day, hour=self.hour)
