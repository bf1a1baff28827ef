"""Command-line interface for telegraph-content.

Commands:
    validate: Decode a content file and check it against a vocabulary
    to-html / to-markdown: Render a content file
    from-html: Convert an HTML fragment to content JSON
    get-page: Fetch and describe a page
"""

from .main import app, main
from .models import ExitCode
from .output import OutputHandler

__all__ = [
    "app",
    "main",
    "ExitCode",
    "OutputHandler",
]
