# pwlocalize

pwlocalize builds a localized copy of a game's interface files. It reads
two directory trees, the original interface and a translated copy of it,
and writes the result to a third directory.

## What it does

- **Dialog files** (`*.xml`, found recursively below the original
  directory): each control block (`<LABEL>`, `<EDIT>`, `<TEXT>`,
  `<STILLIMAGEBUTTON>` and the other control tags) is matched by its `Name`
  attribute. If the translated file has a block with the same name, that
  block replaces the original one. A translated block is not used if it
  contains further controls or if its `x` or `y` coordinate is negative.
  Blocks that appear only in the translated file are added at the end. The
  first line of the output comes from the translated file. Hidden and
  symlinked directories are skipped.
- **String tables** (`*.stf`, only at the top level of the original
  directory): the lines of the translated table with the same name are
  written to the output unchanged.

Input files are read as UTF-16. The byte order comes from the byte order
mark, and big-endian is assumed when there is none. If an input file is
missing or cannot be opened, it is treated as empty. Output files are
written as UTF-16 little-endian with a byte order mark. Each line ends in
`"\r\n"`.

Before any files are written, the output directory gets the usual interface
subfolders: `ani`, `commeratebook`, `faces`, `faces_new/sliders`,
`script/config`, `terrain`, `version01/faces`, `version01/wiki` and `wiki`.

## Installation

```
pip install .
```

## Command line

```
pwlocalize SOURCE_DIR TRANSLATED_DIR OUTPUT_DIR
```

The command prints the path of each file it writes. Use `-q` / `--quiet`
to suppress this output. If `SOURCE_DIR` is not a directory, the command
stops with a usage error.

## Library use

```python
from pwlocalize.translator import Translator

translator = Translator("interfaces/original", "interfaces/translated", "interfaces/out")
written = translator.translate_all()   # list of output paths
```

`Translator.files` and `Translator.stf_files` hold the relative names that
were found. To process one file at a time, call
`Translator.translate_file(name)` or `Translator.translate_stf_file(name)`.
Both return the path they wrote. For directory scanning, use
`find_xml_files`, `find_stf_files` and `create_output_folders` in
`pwlocalize.translator`.

These helpers work on lists of lines and never touch the file system:

- `pwlocalize.lines`: `normalize_lines`, plus `read_lines` and
  `write_lines` for the UTF-16 file format.
- `pwlocalize.xmlmerge`: `merge`, `collect_blocks`, `extract_name`,
  `is_usable`, `open_bracket`, `close_bracket` and `end_line`.
- `pwlocalize.stf`: `parse_entries` (returns `StfEntry` values),
  `parse_translations`, `merge_entries` and `is_comment`.

## What it does not do

- There is no graphical interface. Only the command line and the Python API
  are available.
- The string table merge in `pwlocalize.stf` (`merge_entries`) is not used
  by `Translator`. String tables are copied from the translated directory
  as they are, and entries are not merged by id. Call the `pwlocalize.stf`
  helpers directly if you want an id-based merge.

## Running the tests

```
pip install .[test]
pytest
```