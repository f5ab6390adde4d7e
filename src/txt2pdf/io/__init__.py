"""File access: the UTF-8 text reader and the reportlab PDF writer."""

from .readers.txt_reader import read_text
from .writers.pdf_writer import write_pdf

__all__ = ["read_text", "write_pdf"]
