"""Reading, writing and normalising the UTF-16 text files of the game client."""

from __future__ import annotations

import codecs
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

_BLANK_LINES = frozenset({"\r", "\t\r"})


def normalize_lines(lines: Iterable[str]) -> list[str]:
    """Split lines at every carriage return and drop blank ones.

    Each returned line ends with a single ``"\\r"``.  Lines consisting only
    of ``"\\r"`` or ``"\\t\\r"`` are discarded.
    """
    result: list[str] = []
    for line in lines:
        pieces = line.split("\r")
        tail = pieces.pop()
        for piece in pieces:
            segment = piece + "\r"
            if segment not in _BLANK_LINES:
                result.append(segment)
        if tail and tail not in _BLANK_LINES:
            result.append(tail + "\r")
    return result


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read a UTF-16 file and return its lines without the ``"\\n"``.

    The byte order is taken from the byte order mark; without one the file
    is read as big-endian.  A file that cannot be opened yields no lines.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        return []
    if data.startswith(codecs.BOM_UTF16_LE):
        text = data[len(codecs.BOM_UTF16_LE):].decode("utf-16-le")
    elif data.startswith(codecs.BOM_UTF16_BE):
        text = data[len(codecs.BOM_UTF16_BE):].decode("utf-16-be")
    else:
        text = data.decode("utf-16-be")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path: str | PathLike[str], lines: Iterable[str]) -> None:
    """Write lines as little-endian UTF-16 with a byte order mark.

    Every line is followed by ``"\\n"``.
    """
    text = "".join(line + "\n" for line in lines)
    Path(path).write_bytes(codecs.BOM_UTF16_LE + text.encode("utf-16-le"))