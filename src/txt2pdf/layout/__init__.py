"""Text layout: greedy word wrap followed by pagination."""

from .paginator import Document, Page, PlacedLine, max_lines_per_page, paginate
from .wrapper import estimate_width, split_paragraphs, wrap_paragraphs, wrap_text

__all__ = [
    "Document",
    "Page",
    "PlacedLine",
    "estimate_width",
    "max_lines_per_page",
    "paginate",
    "split_paragraphs",
    "wrap_paragraphs",
    "wrap_text",
]
