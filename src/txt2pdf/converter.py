"""End-to-end conversion of a text file into a PDF.

:func:`validate_request` performs every check that can run before the input
is read: a non-blank input path, the ``.txt`` extension, the file's existence
and the font name.  :func:`convert` then reads the file, rejects whitespace
only content, wraps and paginates the text and writes the PDF.

Nothing here terminates the process.  Failures surface as subclasses of
:class:`~txt2pdf.utils.errors.Txt2PdfError`, each carrying the exit code the
command line interface should use.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ConfigModel
from .fonts import BuiltinFont, resolve_font
from .io import read_text, write_pdf
from .layout import Document, paginate, wrap_text
from .utils.errors import (
    EmptyInputError,
    InputNotFoundError,
    InputReadError,
    MissingInputError,
    OutputWriteError,
    UnsupportedFormatError,
)
from .utils.logging import get_logger

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "derive_output_path",
    "validate_request",
    "convert",
]

log = get_logger(__name__)

INPUT_EXTENSION = ".txt"


@dataclass(frozen=True)
class ConversionRequest:
    """Validated arguments of a single conversion."""

    input_path: Path
    output_path: Path
    font: BuiltinFont


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful conversion."""

    output_path: Path
    document: Document

    @property
    def page_count(self) -> int:
        return self.document.page_count

    @property
    def line_count(self) -> int:
        return self.document.line_count


def derive_output_path(input_path: Path) -> Path:
    """Return ``<stem>.pdf`` next to ``input_path``."""

    return input_path.parent / f"{input_path.stem}.pdf"


def validate_request(
    input_file: str | None,
    output_file: str | None = None,
    font_name: str = "Helvetica",
) -> ConversionRequest:
    """Check the raw command line values and build a :class:`ConversionRequest`.

    Checks run in order, the first failure wins: input given, ``.txt``
    extension, input exists, font supported.
    """

    raw = (input_file or "").strip()
    if not raw:
        raise MissingInputError("You must provide an input file with -i or --input.")
    if not raw.endswith(INPUT_EXTENSION):
        raise UnsupportedFormatError("The input file must have a .txt extension.")
    input_path = Path(raw)
    if not input_path.exists():
        raise InputNotFoundError(f"The input file '{raw}' does not exist.")

    font = resolve_font(font_name)
    output_path = Path(output_file) if output_file else derive_output_path(input_path)
    log.debug("input=%s output=%s font=%s", input_path, output_path, font.base_name)
    return ConversionRequest(input_path=input_path, output_path=output_path, font=font)


def _read_input(path: Path) -> str:
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Cannot read '{path}': {exc}") from exc


def convert(request: ConversionRequest, config: ConfigModel) -> ConversionResult:
    """Convert the request's input file into a PDF at its output path.

    Raises
    ------
    InputReadError
        If the input cannot be read or decoded.
    EmptyInputError
        If the input holds only whitespace.  No output is written.
    OutputWriteError
        If serializing the PDF fails.  A partial file may remain.
    """

    text = _read_input(request.input_path)
    if not text.strip():
        raise EmptyInputError("The input text file is empty.")

    layout = config.layout
    lines = wrap_text(text, layout, request.font)
    document = paginate(lines, layout, request.font)

    try:
        write_pdf(
            request.output_path,
            document,
            title=config.output.title,
            author=config.output.author,
        )
    except OSError as exc:
        raise OutputWriteError(f"Cannot write '{request.output_path}': {exc}") from exc

    return ConversionResult(output_path=request.output_path, document=document)
