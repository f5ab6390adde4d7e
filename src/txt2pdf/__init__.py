"""Convert plain-text files into paginated A4 PDF documents.

The pipeline reads a ``.txt`` file, greedily word-wraps each paragraph to the
usable page width, paginates the resulting lines and renders them with one of
the builtin PDF fonts.  The command line interface lives in
:mod:`txt2pdf.cli`.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
