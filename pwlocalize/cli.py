"""Command line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from pwlocalize.translator import Translator


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwlocalize",
        description="Apply a translated copy of the interface to the original files.",
    )
    parser.add_argument("source", type=Path, help="directory of the original interface")
    parser.add_argument("translated", type=Path, help="directory of the translated interface")
    parser.add_argument("output", type=Path, help="directory to write the result to")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not list written files")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the translation and return the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if not args.source.is_dir():
        parser.error(f"not a directory: {args.source}")
    translator = Translator(args.source, args.translated, args.output)
    for path in translator.translate_all():
        if not args.quiet:
            print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())