"""Parsing and merging of numbered string table (STF) files."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class StfEntry:
    """One string table entry: the separator after its id and its text."""

    space: str
    text: str


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _starts_id(line: str, index: int) -> bool:
    return index <= 1 and _is_digit(line[index])


def is_comment(line: str, index: int) -> bool:
    """Tell whether a ``//`` comment starts at ``index`` in ``line``."""
    return line[index:index + 2] == "//"


def _scan(lines: Sequence[str], keep_last: bool) -> dict[str, StfEntry]:
    entries: dict[str, StfEntry] = {}
    count = len(lines)
    i = 0
    while i < count:
        line = lines[i]
        ident = ""
        space = ""
        j = 0
        while j < len(line):
            char = line[j]
            if _is_digit(char):
                ident += char
            elif char in " \t":
                space += char
            elif ident:
                text: list[str] = []
                while not _starts_id(line, j):
                    text.append(line[j])
                    j += 1
                    while j >= len(line):
                        j = 0
                        i += 1
                        if i >= count:
                            if keep_last:
                                entries[ident] = StfEntry(space, "".join(text))
                            return entries
                        line = lines[i]
                entries[ident] = StfEntry(space, "".join(text))
                i -= 1
                break
            j += 1
        i += 1
    return entries


def parse_entries(lines: Sequence[str]) -> dict[str, StfEntry]:
    """Parse normalised STF lines into entries keyed by their id.

    An entry's text runs on across following lines until a line whose
    first or second character is a digit.
    """
    return _scan(lines, keep_last=True)


def parse_translations(lines: Sequence[str]) -> dict[str, str]:
    """Parse translated STF lines into texts keyed by id.

    The entry still open when the input ends is not kept.
    """
    return {ident: entry.text for ident, entry in _scan(lines, keep_last=False).items()}


def merge_entries(
    source: Mapping[str, StfEntry], translated: Mapping[str, str]
) -> list[str]:
    """Render the source entries, using translated texts where available.

    Lines are ordered by numeric id and begin with the id without leading
    zeros followed by the original separator.
    """
    rows = sorted(
        (int(ident), translated.get(ident, entry.text), entry.space)
        for ident, entry in source.items()
    )
    return [f"{number}{space}{text}" for number, text, space in rows]