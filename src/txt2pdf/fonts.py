"""Builtin PDF fonts.

Only the standard Type 1 fonts that every PDF viewer provides are supported;
nothing is embedded.  Names given on the command line are matched
case-insensitively against a fixed alias table.
"""

from __future__ import annotations

from enum import Enum

from .utils.errors import UnsupportedFontError

__all__ = ["BuiltinFont", "DEFAULT_FONT", "resolve_font", "supported_font_names"]


class BuiltinFont(str, Enum):
    """Builtin fonts, valued by their PDF base font name."""

    HELVETICA = "Helvetica"
    TIMES_ROMAN = "Times-Roman"
    HELVETICA_BOLD = "Helvetica-Bold"
    TIMES_BOLD = "Times-Bold"
    HELVETICA_OBLIQUE = "Helvetica-Oblique"
    TIMES_ITALIC = "Times-Italic"

    @property
    def base_name(self) -> str:
        return self.value


DEFAULT_FONT = BuiltinFont.HELVETICA

# Courier is left out: its fixed pitch does not suit the width heuristic.
_ALIASES: dict[str, BuiltinFont] = {
    "helvetica": BuiltinFont.HELVETICA,
    "times": BuiltinFont.TIMES_ROMAN,
    "times-roman": BuiltinFont.TIMES_ROMAN,
    "helvetica-bold": BuiltinFont.HELVETICA_BOLD,
    "times-bold": BuiltinFont.TIMES_BOLD,
    "helvetica-oblique": BuiltinFont.HELVETICA_OBLIQUE,
    "times-italic": BuiltinFont.TIMES_ITALIC,
}


def supported_font_names() -> list[str]:
    """Return the accepted font names in display order."""

    return list(_ALIASES)


def resolve_font(name: str) -> BuiltinFont:
    """Map a user supplied font ``name`` to a :class:`BuiltinFont`.

    Raises
    ------
    UnsupportedFontError
        If ``name`` matches none of :func:`supported_font_names`.
    """

    font = _ALIASES.get(name.strip().lower())
    if font is None:
        raise UnsupportedFontError(
            f"Unsupported font '{name}'. Supported fonts: {', '.join(supported_font_names())}."
        )
    return font
