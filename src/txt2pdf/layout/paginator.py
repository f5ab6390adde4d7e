"""Pagination of display lines onto fixed-size pages.

Lines are placed top to bottom starting at ``page_height - margin_top`` with
the baseline one font size below the cursor.  After each line the cursor
moves down by the line height.  Once a page holds ``max_lines_per_page``
lines a new page is started and the cursor is reset.

Coordinates use the PDF convention (origin at the bottom-left corner) and are
expressed in millimetres.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..config import LayoutConfig
from ..fonts import DEFAULT_FONT, BuiltinFont
from ..utils.logging import get_logger

__all__ = ["PlacedLine", "Page", "Document", "max_lines_per_page", "paginate"]

log = get_logger(__name__)


@dataclass(frozen=True)
class PlacedLine:
    """A display line and the position of its baseline start."""

    text: str
    x: float
    y: float


@dataclass
class Page:
    """A single page and the lines placed on it."""

    width: float
    height: float
    lines: list[PlacedLine] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self.lines]


@dataclass
class Document:
    """Ordered pages sharing one font and font size."""

    font: BuiltinFont
    font_size: float
    pages: list[Page] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def line_count(self) -> int:
        return sum(len(page.lines) for page in self.pages)

    def new_page(self, width: float, height: float) -> Page:
        page = Page(width=width, height=height)
        self.pages.append(page)
        return page


def max_lines_per_page(usable_height: float, line_height: float) -> int:
    """Return how many lines fit in ``usable_height``.

    Never negative; ``0`` for a non-positive line height.
    """

    if line_height <= 0:
        return 0
    return max(0, math.floor(usable_height / line_height))


def paginate(
    lines: Iterable[str],
    config: LayoutConfig,
    font: BuiltinFont = DEFAULT_FONT,
) -> Document:
    """Distribute ``lines`` over pages laid out according to ``config``.

    The returned document always has at least one page.  With a capacity of
    zero each line gets a page of its own.
    """

    capacity = max_lines_per_page(config.usable_height, config.line_height)
    top = config.page_height - config.margin_top
    doc = Document(font=font, font_size=config.font_size)
    page = doc.new_page(config.page_width, config.page_height)
    cursor = top
    count = 0

    for text in lines:
        # zero capacity: one line per page, without a leading empty page
        if count >= max(capacity, 1):
            page = doc.new_page(config.page_width, config.page_height)
            cursor = top
            count = 0
        page.lines.append(PlacedLine(text=text, x=config.margin_left, y=cursor - config.font_size))
        cursor -= config.line_height
        count += 1

    log.debug(
        "paginated %d lines onto %d pages (capacity %d)",
        doc.line_count,
        doc.page_count,
        capacity,
    )
    return doc
