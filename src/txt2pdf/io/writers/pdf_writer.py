"""PDF document writer.

Renders a paginated :class:`~txt2pdf.layout.Document` with reportlab.  Each
page gets one text run per placed line in the document's builtin font; no
font data is embedded.  Coordinates in the document are millimetres and are
scaled to PDF points here.

The canvas is created in invariant mode so that the same document always
serializes to the same bytes.  A file left behind by a failed save is not
removed.
"""

from __future__ import annotations

import os
from pathlib import Path

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ...layout.paginator import Document
from ...utils.logging import get_logger

log = get_logger(__name__)

PathLikeStr = os.PathLike[str]


def write_pdf(
    path: str | PathLikeStr,
    document: Document,
    *,
    title: str = "Text to PDF",
    author: str | None = None,
) -> None:
    """Serialize ``document`` to ``path``.

    Parent directories are created with ``exist_ok=True``.  Errors raised by
    the filesystem or by reportlab propagate to the caller.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    first = document.pages[0] if document.pages else None
    pagesize = (first.width * mm, first.height * mm) if first else (210 * mm, 297 * mm)
    c = canvas.Canvas(str(file_path), pagesize=pagesize, invariant=True)
    c.setTitle(title)
    if author:
        c.setAuthor(author)

    for page in document.pages:
        c.setPageSize((page.width * mm, page.height * mm))
        c.setFont(document.font.base_name, document.font_size)
        for line in page.lines:
            c.drawString(line.x * mm, line.y * mm, line.text)
        c.showPage()

    c.save()
    log.debug("wrote %d pages to %s", document.page_count, file_path)


__all__ = ["write_pdf"]
