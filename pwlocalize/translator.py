"""Applying a translated copy of the game interface to the original one."""

from __future__ import annotations

from os import PathLike
from pathlib import Path, PurePosixPath

from pwlocalize.lines import read_lines, write_lines
from pwlocalize.xmlmerge import merge

OUTPUT_FOLDERS = (
    "ani",
    "commeratebook",
    "faces",
    "faces_new",
    "faces_new/sliders",
    "script",
    "script/config",
    "terrain",
    "version01",
    "version01/faces",
    "version01/wiki",
    "wiki",
)


def _sorted_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError:
        return []


def _walk_xml(directory: Path, prefix: PurePosixPath) -> list[str]:
    entries = _sorted_entries(directory)
    found = [
        str(prefix / entry.name)
        for entry in entries
        if entry.is_file() and entry.name.lower().endswith(".xml")
    ]
    for entry in entries:
        if entry.name.startswith(".") or entry.is_symlink() or not entry.is_dir():
            continue
        found.extend(_walk_xml(entry, prefix / entry.name))
    return found


def find_xml_files(root: str | PathLike[str]) -> list[str]:
    """List the ``.xml`` files below ``root`` as ``/``-separated relative paths.

    Files of a directory come before those of its subdirectories; hidden
    and symlinked directories are not entered.
    """
    return _walk_xml(Path(root), PurePosixPath())


def find_stf_files(root: str | PathLike[str]) -> list[str]:
    """List the names of the ``.stf`` files directly inside ``root``."""
    return [
        entry.name
        for entry in _sorted_entries(Path(root))
        if entry.is_file() and entry.name.lower().endswith(".stf")
    ]


def create_output_folders(root: str | PathLike[str]) -> None:
    """Create the folder layout of the interface package under ``root``."""
    base = Path(root)
    for folder in OUTPUT_FOLDERS:
        (base / folder).mkdir(parents=True, exist_ok=True)


class Translator:
    """Builds a translated interface from an original and a translated copy."""

    def __init__(
        self,
        source_dir: str | PathLike[str],
        translated_dir: str | PathLike[str],
        output_dir: str | PathLike[str],
    ) -> None:
        self.source_dir = Path(source_dir)
        self.translated_dir = Path(translated_dir)
        self.output_dir = Path(output_dir)
        self.files = find_xml_files(self.source_dir)
        create_output_folders(self.output_dir)
        self.stf_files = find_stf_files(self.source_dir)

    def _output_path(self, name: str) -> Path:
        target = self.output_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        return target

    def translate_file(self, name: str) -> Path:
        """Merge one dialog file and write it to the output directory."""
        source = read_lines(self.source_dir / name)
        translated = read_lines(self.translated_dir / name)
        target = self._output_path(name)
        write_lines(target, merge(source, translated))
        return target

    def translate_stf_file(self, name: str) -> Path:
        """Write the translated copy of one string table to the output."""
        translated = read_lines(self.translated_dir / name)
        target = self._output_path(name)
        write_lines(target, translated)
        return target

    def translate_all(self) -> list[Path]:
        """Translate every dialog file and string table that was found."""
        written = [self.translate_file(name) for name in self.files]
        written.extend(self.translate_stf_file(name) for name in self.stf_files)
        return written