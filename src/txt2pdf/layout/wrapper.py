"""Greedy word wrapping under an approximate width model.

Paragraphs are split into whitespace-delimited words which are appended to
an accumulator line for as long as the estimated width of the result stays
within the usable width.  When a word does not fit, the accumulator is
emitted as a finished line and a new one starts with that word.  Every
paragraph ends by emitting its accumulator, even when empty, so blank lines
in the input survive as empty display lines.

A word that is wider than the usable width on its own is placed on a line by
itself and allowed to overflow; no hyphenation or truncation happens.

Two width models are available:

``approximate``
    ``len(text) * avg_char_width``.  Every character is assumed to be as wide
    as a fixed fraction of the font size.
``metrics``
    The glyph widths reportlab ships for the builtin font, converted from
    points to millimetres.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from ..config import LayoutConfig
from ..fonts import BuiltinFont

__all__ = [
    "WidthFunc",
    "estimate_width",
    "metrics_width",
    "make_measure",
    "split_paragraphs",
    "wrap_paragraphs",
    "wrap_text",
]

WidthFunc = Callable[[str], float]


def estimate_width(text: str, avg_char_width: float) -> float:
    """Return the approximate rendered width of ``text``."""

    return len(text) * avg_char_width


def metrics_width(text: str, font: BuiltinFont, font_size: float) -> float:
    """Return the width of ``text`` in millimetres using builtin glyph metrics.

    ``font_size`` is interpreted in points for the measurement, matching how
    the renderer hands it to the canvas.
    """

    return stringWidth(text, font.base_name, font_size) / mm


def make_measure(config: LayoutConfig, font: BuiltinFont) -> WidthFunc:
    """Return the width function selected by ``config.width_model``."""

    if config.width_model == "metrics":
        return lambda text: metrics_width(text, font, config.font_size)
    avg = config.avg_char_width
    return lambda text: estimate_width(text, avg)


def split_paragraphs(text: str) -> list[str]:
    """Split ``text`` into source lines.

    Lines end at ``\\n``; a ``\\r`` immediately before it is dropped.  A final
    newline terminates the last line rather than starting an empty one.
    """

    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def wrap_paragraphs(
    paragraphs: Iterable[str],
    usable_width: float,
    measure: WidthFunc,
) -> list[str]:
    """Greedily wrap ``paragraphs`` into display lines.

    Parameters
    ----------
    paragraphs:
        Source lines, without line terminators.
    usable_width:
        Maximum width a display line may occupy.
    measure:
        Width estimate for a candidate line, in the unit of ``usable_width``.

    Returns
    -------
    list[str]
        Display lines in input order.  Each paragraph contributes at least
        one line.
    """

    lines: list[str] = []
    for paragraph in paragraphs:
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if measure(candidate) > usable_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def wrap_text(text: str, config: LayoutConfig, font: BuiltinFont) -> list[str]:
    """Split ``text`` into paragraphs and wrap them for ``config``."""

    return wrap_paragraphs(
        split_paragraphs(text), config.usable_width, make_measure(config, font)
    )
