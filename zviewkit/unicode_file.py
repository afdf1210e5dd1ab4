"""Reading and writing UTF-16 text files that carry a byte-order mark."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

_BOM_LITTLE_ENDIAN = b"\xff\xfe"
_BOM_BIG_ENDIAN = b"\xfe\xff"
_LINE_END = "\r\n"


class NotUnicodeFileError(ValueError):
    """Raised when a file is not UTF-16 text starting with a byte-order mark."""


def read_unicode_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of a UTF-16 file, without carriage returns or newlines.

    The file must hold a byte-order mark followed by at least one code unit.
    A newline at the very end yields a final empty line.
    """
    data = Path(path).read_bytes()
    if len(data) < 4 or len(data) % 2:
        raise NotUnicodeFileError(f"{path}: not a UTF-16 file")

    bom = data[:2]
    if bom == _BOM_LITTLE_ENDIAN:
        encoding = "utf-16-le"
    elif bom == _BOM_BIG_ENDIAN:
        encoding = "utf-16-be"
    else:
        raise NotUnicodeFileError(f"{path}: missing byte-order mark")

    text = data[2:].decode(encoding, errors="surrogatepass")
    return [line.replace("\r", "") for line in text.split("\n")]


def write_unicode_lines(path: str | os.PathLike[str], lines: Iterable[str]) -> None:
    """Write lines as little-endian UTF-16 with a byte-order mark, each ending in CRLF."""
    with open(path, "wb") as stream:
        stream.write(_BOM_LITTLE_ENDIAN)
        for line in lines:
            stream.write((line + _LINE_END).encode("utf-16-le", errors="surrogatepass"))