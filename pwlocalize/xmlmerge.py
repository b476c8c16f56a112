"""Merging translated interface dialog XML into the original dialog files.

Controls are located by plain text search on normalised lines, the same
way the interface files are laid out by the game client tools.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pwlocalize.lines import normalize_lines

CONTROL_TAGS = (
    "IMAGEPICTURE",
    "EDIT",
    "LABEL",
    "STILLIMAGEBUTTON",
    "LIST",
    "RADIO",
    "CHECK",
    "TEXT",
    "COMBO",
    "CTRLFOLDER",
    "SUBDIALOG",
    "PROGRESS",
    "SCROLL",
    "TREE",
    "WINDOWPICTURE",
    "SLIDER",
)
OPEN_BRACKETS = tuple(f"<{tag}" for tag in CONTROL_TAGS)
CLOSE_BRACKETS = tuple(f"</{tag}>" for tag in CONTROL_TAGS)

_NAME_MARK = " Name="


def open_bracket(line: str) -> int | None:
    """Return the index of the first control tag opened in ``line``, if any."""
    return next(
        (index for index, tag in enumerate(OPEN_BRACKETS) if tag in line), None
    )


def close_bracket(line: str, index: int) -> bool:
    """Tell whether ``line`` closes the control tag numbered ``index``."""
    return CLOSE_BRACKETS[index] in line


def end_line(start: int, current: int, line: str) -> bool:
    """Tell whether a control that began on ``start`` ends on its own line."""
    return start == current and "/>" in line


def extract_name(line: str) -> str | None:
    """Return the value of the ``Name`` attribute on ``line``, if present."""
    position = line.find(_NAME_MARK)
    if position == -1:
        return None
    open_quote = line.find('"', position)
    if open_quote == -1:
        return None
    close_quote = line.find('"', open_quote + 1)
    if close_quote == -1:
        return line[open_quote + 1:]
    return line[open_quote + 1:close_quote]


def _coordinate_is_negative(block: str, mark: str) -> bool:
    position = block.find(mark)
    if position == -1:
        return False
    index = position + len(mark) + 1
    return index < len(block) and block[index] == "-"


def is_usable(block: str) -> bool:
    """Tell whether a translated control block may replace the original.

    Blocks that nest further controls or sit at negative coordinates are
    rejected.
    """
    if any(block.find(tag, len(tag)) != -1 for tag in OPEN_BRACKETS):
        return False
    return not (
        _coordinate_is_negative(block, " x=")
        or _coordinate_is_negative(block, " y=")
    )


def collect_blocks(lines: Sequence[str]) -> dict[str, str]:
    """Map every control name in normalised ``lines`` to its text block."""
    blocks: dict[str, str] = {}
    count = len(lines)
    index = 0
    while index < count:
        current = lines[index]
        bracket = open_bracket(current)
        if bracket is not None:
            data = ""
            name = ""
            second = index
            while not close_bracket(current, bracket) and not end_line(
                second, index, current
            ):
                data += current
                found = extract_name(current)
                if found is not None:
                    name = found
                second += 1
                if second == count:
                    break
                current = lines[second]
            if end_line(second, index, current) or close_bracket(current, bracket):
                data += current
            if name == "":
                found = extract_name(current)
                if found is not None:
                    name = found
            blocks[name] = data
            index = second
        index += 1
    return blocks


def _replacement(
    name: str, blocks: dict[str, str], seen: set[str]
) -> str | None:
    seen.add(name)
    block = blocks.get(name)
    if block is not None and is_usable(block):
        return block
    return None


def merge(source_lines: Iterable[str], translated_lines: Iterable[str]) -> list[str]:
    """Merge a translated dialog file into the original one.

    Controls of the original are replaced by translated controls of the same
    name where those are usable; translated controls missing from the
    original are appended.  The first line is taken from the translation.
    """
    translated = normalize_lines(translated_lines)
    blocks = collect_blocks(translated)
    source = normalize_lines(source_lines)
    if translated and source:
        source[0] = translated[0]

    seen: set[str] = set()
    output: list[str] = []
    count = len(source)
    index = 0
    while index < count:
        current = source[index]
        data = current
        bracket = open_bracket(current)
        if bracket is not None:
            data = ""
            name = ""
            replaced = False
            second = index
            while not close_bracket(current, bracket) and not end_line(
                second, index, current
            ):
                found = extract_name(current)
                if found is not None:
                    name = found
                    block = _replacement(name, blocks, seen)
                    if block is not None:
                        data = block
                        replaced = True
                if not replaced:
                    data += current
                second += 1
                if second == count:
                    break
                current = source[second]
            if not replaced:
                if end_line(second, index, current) or close_bracket(
                    current, bracket
                ):
                    data += current
                if name == "":
                    found = extract_name(current)
                    if found is not None:
                        name = found
                        block = _replacement(name, blocks, seen)
                        if block is not None:
                            data = block
            index = second
        output.append(data)
        index += 1

    output.extend(block for name, block in blocks.items() if name not in seen)
    return output