"""Typer-based command line interface for txt2pdf.

The single command reads a ``.txt`` file, wraps and paginates its text and
writes an A4 PDF.  All validation happens in :mod:`txt2pdf.converter`; this
module only maps the typed errors it raises to a one-line message on stderr
and an exit code.

Exit codes
----------
0 success
2 usage error (missing input, wrong extension, unsupported font)
3 I/O error (input missing or unreadable, output not writable)
4 configuration error
5 content error (input file empty)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from . import __version__
from .config import ConfigModel, load_config
from .converter import convert, validate_request
from .fonts import DEFAULT_FONT
from .utils.errors import ConfigError, Txt2PdfError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="txt2pdf",
    help="Convert a plain-text file into a paginated A4 PDF.",
    add_completion=False,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(code)


def _load_config(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "config"
        raise ConfigError(f"Invalid configuration: {where}: {first['msg']}") from exc
    except Exception as exc:  # yaml.YAMLError, OSError, malformed overrides
        raise ConfigError(f"Cannot load configuration: {exc}") from exc


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"txt2pdf {__version__}")
        raise typer.Exit()


@app.command()
def run(  # noqa: PLR0913
    input_file: str = typer.Option(  # noqa: B008
        "", "--input", "-i", help="Input text file (.txt)", show_default=False
    ),
    output_file: Optional[str] = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output PDF; defaults to <input stem>.pdf"
    ),
    font: str = typer.Option(  # noqa: B008
        DEFAULT_FONT.base_name,
        "--font",
        "-f",
        help="Builtin font: helvetica, times, times-roman, helvetica-bold, "
        "times-bold, helvetica-oblique, times-italic",
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override layout defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Convert INPUT (.txt) into a PDF document."""

    configure_logging(verbose)
    try:
        request = validate_request(input_file, output_file, font)
        cfg = _load_config(config_path)
        if verbose:
            typer.echo(f"Converting {request.input_path} with {request.font.base_name}", err=True)
        result = convert(request, cfg)
    except Txt2PdfError as exc:
        _safe_exit(exc.exit_code, str(exc))

    if verbose:
        typer.echo(
            f"Wrote {result.page_count} page(s), {result.line_count} line(s)",
            err=True,
        )
    typer.echo(str(result.output_path))


def main() -> None:
    """Console script entry point."""

    app()
