"""Account and page records for the Telegraph API.

Records are immutable and built from decoded responses with ``from_dict``
or by the caller before a request. Optional fields are None when absent.
"""

from .models import Account, Page, PageList, PageViews, Upload
from .options import (
    CreateAccountOpts,
    EditAccountInfoOpts,
    PageListOpts,
    PageOpts,
    PageViewsOpts,
)

__all__ = [
    "Account",
    "Page",
    "PageList",
    "PageViews",
    "Upload",
    "CreateAccountOpts",
    "EditAccountInfoOpts",
    "PageListOpts",
    "PageOpts",
    "PageViewsOpts",
]
