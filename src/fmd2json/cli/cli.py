"""
fmd2json CLI Application.

Converts Markdown documents with YAML frontmatter into NDJSON records, one
line per document, optionally projected through a jq expression.

Input sources:
• Paths given as arguments, in order
• "-" reads a single document from standard input
• No arguments: a newline-separated list of paths is read from standard input
"""

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .. import format_version
from ..core.converter import DocumentConverter
from ..core.query import compile_query
from ..exceptions.config_exceptions import ConfigurationError
from ..exceptions.conversion_exceptions import Fmd2JsonError
from ..utils.config import ConfigManager

# Diagnostics only; stdout carries the NDJSON stream
console = Console(stderr=True)

app = typer.Typer(
    name="fmd2json",
    help="Convert Markdown frontmatter documents into NDJSON records",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_logger: Optional[logging.Logger] = None


def setup_logging(verbose: bool = False, level: Optional[str] = None) -> logging.Logger:
    """
    Set up logging on the stderr console.

    Args:
        verbose: Enable verbose (DEBUG) logging
        level: Level name used when not verbose (default: WARNING)

    Returns:
        Configured logger instance
    """
    logging.getLogger().handlers.clear()

    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or "WARNING").upper())
        if not isinstance(log_level, int):
            log_level = logging.WARNING

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    logger = logging.getLogger("fmd2json")
    logger.setLevel(log_level)

    return logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def version_callback(value: bool) -> None:
    if value:
        typer.echo(format_version())
        raise typer.Exit()


def handle_cli_error(error: Exception) -> None:
    """
    Print an error on stderr with a user-friendly prefix.

    Args:
        error: The exception that occurred
    """
    logger = get_logger()

    if isinstance(error, ConfigurationError):
        prefix = "Configuration Error"
    elif isinstance(error, FileNotFoundError) or isinstance(error.__cause__, FileNotFoundError):
        prefix = "File Not Found"
    elif isinstance(error, PermissionError) or isinstance(error.__cause__, PermissionError):
        prefix = "Permission Denied"
    else:
        prefix = "Error"

    console.print(f"[red]{prefix}:[/red] {escape(str(error))}", soft_wrap=True)
    logger.debug("Error details", exc_info=True)


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Documents to convert; '-' reads one document from stdin. "
             "Without paths, a list of paths is read from stdin.",
        show_default=False,
    ),
    jq_expression: Optional[str] = typer.Option(
        None,
        "--jq",
        help="jq expression applied to each record",
        metavar="EXPR",
    ),
    raw_output: Optional[bool] = typer.Option(
        None,
        "--raw-output/--no-raw-output",
        "-r",
        help="Print scalar jq results as raw text instead of JSON "
             "(default: raw_output from configuration)",
        show_default=False,
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: fmd2json.config.json)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level) on stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Display version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Convert frontmatter documents into NDJSON.

    Each record holds the frontmatter properties plus [bold]filename[/bold],
    [bold]body[/bold] and, for files, [bold]mtime[/bold]. These three always
    override frontmatter properties of the same name.

    Examples:
    • fmd2json notes/*.md
    • find notes -name '*.md' | fmd2json --jq '.title' -r
    • cat note.md | fmd2json -
    """
    global _logger

    try:
        config_manager = ConfigManager(config_file=config_path, load_env=True)
        config_manager.load_config()
        _logger = setup_logging(verbose, config_manager.log_level)

        # Compile before reading any document so a bad expression produces no output
        query = compile_query(jq_expression) if jq_expression is not None else None

        converter = DocumentConverter(
            out=sys.stdout,
            err=sys.stderr,
            query=query,
            raw_output=config_manager.raw_output if raw_output is None else raw_output,
            content_suffixes=config_manager.content_suffixes,
        )
        converter.run(paths or [])
    except (Fmd2JsonError, ConfigurationError, OSError) as e:
        handle_cli_error(e)
        raise typer.Exit(1)


def cli_main() -> None:
    """
    Main CLI entry point with error handling.

    This function is called by the console script entry point.
    """
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


if __name__ == "__main__":
    cli_main()
