"""Test fixtures for telegraph-content tests.

This module provides:
- Content JSON builders and a sample article body
- Sample Page and Account API responses
"""

from .content_fixtures import (
    ARTICLE_CONTENT,
    PAGE_RESPONSE,
    PAGE_RESPONSE_WITH_CONTENT,
    ACCOUNT_CREATED_RESPONSE,
    create_element,
    create_paragraph,
    create_link,
    create_figure,
)

__all__ = [
    "ARTICLE_CONTENT",
    "PAGE_RESPONSE",
    "PAGE_RESPONSE_WITH_CONTENT",
    "ACCOUNT_CREATED_RESPONSE",
    "create_element",
    "create_paragraph",
    "create_link",
    "create_figure",
]
