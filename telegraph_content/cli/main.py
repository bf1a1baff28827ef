"""Main CLI entry point for the telegraph-content command.

This module provides the Typer application for checking and converting
Telegraph content files and looking up pages.
"""

import json
import logging
import sys
from typing import Optional, Tuple

import typer

from telegraph_content.content_model.errors import (
    ConfigError,
    ContentError,
    FilesystemError,
)
from telegraph_content.content_model.html_converter import (
    html_to_nodes,
    nodes_to_html,
    nodes_to_markdown,
)
from telegraph_content.content_model.node_models import Node
from telegraph_content.content_model.node_parser import encode_content, parse_from_string
from telegraph_content.content_model.validator import validate_content
from telegraph_content.content_model.vocabulary import DEFAULT_VOCABULARY
from telegraph_content.content_model.vocabulary_loader import VocabularyLoader
from telegraph_content.telegraph_client.api_wrapper import TelegraphAPI
from telegraph_content.telegraph_client.errors import (
    APIResponseError,
    APIUnreachableError,
    MissingTokenError,
    TransportError,
)

from .models import ExitCode
from .output import OutputHandler

app = typer.Typer(
    name="telegraph-content",
    help="Check, convert and look up Telegraph page content.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

# API errors that mean the token was rejected
_AUTH_API_ERRORS = ("ACCESS_TOKEN_INVALID", "SHORT_NAME_REQUIRED")


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'telegraph_content' namespace logger to avoid
    affecting third-party libraries.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("telegraph_content")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)


def _read_file(file_path: str) -> str:
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        raise FilesystemError(file_path, 'read', 'File not found')
    except PermissionError:
        raise FilesystemError(file_path, 'read', 'Permission denied')


def _load_content(file_path: str) -> Tuple[Node, ...]:
    """Read a content JSON file holding a node array or a single node."""
    parsed = parse_from_string(_read_file(file_path))
    if isinstance(parsed, tuple):
        return parsed
    return (parsed,)


def _exit_code_for(error: Exception) -> ExitCode:
    if isinstance(error, MissingTokenError):
        return ExitCode.AUTH_ERROR
    if isinstance(error, APIResponseError) and error.error in _AUTH_API_ERRORS:
        return ExitCode.AUTH_ERROR
    if isinstance(error, APIUnreachableError):
        return ExitCode.NETWORK_ERROR
    return ExitCode.GENERAL_ERROR


VerboseOption = typer.Option(
    0, "--verbose", "-v", count=True, help="Increase verbosity (-v info, -vv debug)"
)
NoColorOption = typer.Option(False, "--no-color", help="Disable colored output")


@app.command()
def validate(
    file: str = typer.Argument(..., help="Content JSON file"),
    vocabulary_file: Optional[str] = typer.Option(
        None, "--vocabulary", help="YAML file with allowed tags and attrs", metavar="YAML"
    ),
    verbose: int = VerboseOption,
    no_color: bool = NoColorOption,
) -> None:
    """Check that a content file decodes and only uses allowed tags and attrs."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        vocabulary = (
            VocabularyLoader.load(vocabulary_file) if vocabulary_file else DEFAULT_VOCABULARY
        )
        nodes = _load_content(file)
        output.debug(f"Decoded {len(nodes)} top-level nodes from {file}")
        validate_content(nodes, vocabulary)
    except (ContentError, ConfigError, FilesystemError) as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.success(f"{file} is valid ({len(nodes)} top-level nodes)")
    raise typer.Exit(ExitCode.SUCCESS)


@app.command("to-html")
def to_html(
    file: str = typer.Argument(..., help="Content JSON file"),
    verbose: int = VerboseOption,
    no_color: bool = NoColorOption,
) -> None:
    """Render a content JSON file as HTML."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        rendered = nodes_to_html(_load_content(file))
    except (ContentError, FilesystemError) as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.document(rendered)


@app.command("to-markdown")
def to_markdown(
    file: str = typer.Argument(..., help="Content JSON file"),
    verbose: int = VerboseOption,
    no_color: bool = NoColorOption,
) -> None:
    """Render a content JSON file as markdown."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        rendered = nodes_to_markdown(_load_content(file))
    except (ContentError, FilesystemError) as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.document(rendered)


@app.command("from-html")
def from_html(
    file: str = typer.Argument(..., help="HTML fragment file"),
    indent: Optional[int] = typer.Option(2, "--indent", help="JSON indentation"),
    verbose: int = VerboseOption,
    no_color: bool = NoColorOption,
) -> None:
    """Convert an HTML fragment file to content JSON."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        nodes = html_to_nodes(_read_file(file))
    except FilesystemError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.document(json.dumps(encode_content(nodes), ensure_ascii=False, indent=indent))


@app.command("get-page")
def get_page(
    path: str = typer.Argument(..., help="Page path, e.g. Sample-Page-12-15"),
    content: bool = typer.Option(False, "--content", help="Also print the page body as HTML"),
    verbose: int = VerboseOption,
    no_color: bool = NoColorOption,
) -> None:
    """Fetch a page and print its metadata."""
    _configure_logging(verbose)
    output = OutputHandler(verbosity=verbose, no_color=no_color)

    try:
        api = TelegraphAPI()
        with output.spinner(f"Fetching {path}..."):
            page = api.get_page(path, return_content=content)
        rendered = None
        if content and page.content is not None:
            rendered = nodes_to_html(page.content)
    except ValueError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except (TransportError, ContentError) as e:
        logger.error(f"Fetching page {path} failed: {e}")
        output.error(str(e))
        raise typer.Exit(_exit_code_for(e))

    output.print_page(page)
    if rendered is not None:
        output.document(rendered)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
