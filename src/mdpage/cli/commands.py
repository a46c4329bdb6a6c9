"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from mdpage.config import Settings, load_config
from mdpage.core.errors import MdPageError, UsageError
from mdpage.core.pipeline import run_convert
from mdpage.logging_config import configure_logging


USAGE = "Usage: mdpage <file.md>"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _single_path(paths: Optional[List[str]]) -> Path:
    """Return the only positional argument, or raise UsageError."""
    if not paths or len(paths) != 1:
        raise UsageError(USAGE)
    return Path(paths[0])


def convert_cmd(
    paths: Annotated[Optional[List[str]], typer.Argument(help="Markdown (.md) file to convert", show_default=False)] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (default: beside the input)")] = None,
    lang: Annotated[Optional[str], typer.Option("--lang", help="Document language for <html lang>")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Convert a Markdown file into a styled standalone HTML page."""
    try:
        source = _single_path(paths)
    except UsageError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    settings = _settings(overrides={
        "output_dir": out, "lang": lang, "log_level": "DEBUG" if verbose else None,
    })
    configure_logging(settings.log_level)

    output_dir = Path(settings.output_dir) if settings.output_dir else None
    try:
        out_file = run_convert(source, output_dir, settings.lang, settings.encoding)
    except MdPageError as e:
        _fail(str(e), e.__cause__)
    typer.echo(f'Success! File "{out_file}" generated.')
