"""Reading conversion input."""

from __future__ import annotations

from pathlib import Path


def read_text(path: Path, encoding: str = "utf-8-sig") -> str:
    """Return the decoded content of ``path``.

    A leading UTF-8 byte-order mark is dropped.  ``\\r\\n`` sequences are kept
    so that the wrapper sees the file's own line endings.  Undecodable bytes
    raise ``UnicodeDecodeError``; filesystem errors raise ``OSError``.
    """

    return path.read_bytes().decode(encoding)


__all__ = ["read_text"]
