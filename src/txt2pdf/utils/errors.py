"""Typed exceptions for request validation, I/O formats and configuration.

Every exception carries the process exit code the command line interface maps
it to.  The conversion core only raises; translating an error into a message
and an exit status is left to :mod:`txt2pdf.cli`.
"""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    "EXIT_USAGE",
    "EXIT_IO",
    "EXIT_CONFIG",
    "EXIT_CONTENT",
    "Txt2PdfError",
    "UsageError",
    "MissingInputError",
    "UnsupportedFontError",
    "IOFormatError",
    "UnsupportedFormatError",
    "InputNotFoundError",
    "InputReadError",
    "OutputWriteError",
    "ConfigError",
    "EmptyInputError",
]

EXIT_USAGE = 2
EXIT_IO = 3
EXIT_CONFIG = 4
EXIT_CONTENT = 5


class Txt2PdfError(Exception):
    """Base class for all errors reported to the user."""

    exit_code: ClassVar[int] = 1


class UsageError(Txt2PdfError):
    """Raised for malformed or missing command line arguments."""

    exit_code = EXIT_USAGE


class MissingInputError(UsageError):
    """Raised when no input path was given or it is blank."""


class UnsupportedFontError(UsageError):
    """Raised when a font name does not match any builtin font."""


class IOFormatError(Txt2PdfError, ValueError):
    """Base class for I/O format related errors."""

    exit_code = EXIT_USAGE


class UnsupportedFormatError(IOFormatError):
    """Raised when a path has an extension no reader or writer handles."""


class InputNotFoundError(Txt2PdfError):
    """Raised when the input file does not exist."""

    exit_code = EXIT_IO


class InputReadError(Txt2PdfError):
    """Raised when the input file exists but cannot be read."""

    exit_code = EXIT_IO


class OutputWriteError(Txt2PdfError):
    """Raised when the PDF cannot be serialized to the output path."""

    exit_code = EXIT_IO


class ConfigError(Txt2PdfError):
    """Raised when the layout configuration cannot be loaded or is invalid."""

    exit_code = EXIT_CONFIG


class EmptyInputError(Txt2PdfError):
    """Raised when the input file holds nothing but whitespace."""

    exit_code = EXIT_CONTENT
