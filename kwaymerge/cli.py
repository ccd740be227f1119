"""Command line entry: merge integer lists stored in text files."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence

from kwaymerge.merger import ListCollection

DEFAULT_DATA_DIR = "../test_data/"


def build_paths(names: Iterable[str], data_dir: str = DEFAULT_DATA_DIR) -> list[str]:
    """Turn bare list names into paths of .txt files inside data_dir."""
    return [os.path.join(data_dir, f"{name}.txt") for name in names]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kwaymerge",
        description="Merge sorted integer lists read from text files and check the result.",
    )
    parser.add_argument("names", nargs="*", help="list names (file names without .txt)")
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DATA_DIR,
        help=f"directory holding the list files (default: {DEFAULT_DATA_DIR})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Merge the named lists, print the result and the check against a sort."""
    args = _parser().parse_args(argv)
    paths = build_paths(args.names, args.data_dir)

    try:
        merged = ListCollection.from_files(paths).merge()
        expected, ok = merged.verify_merge(paths)
    except (OSError, ValueError) as exc:
        print(f"kwaymerge: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    out.write("-----MERGED LIST-----\n")
    out.write(merged.format() + "\n")
    out.write("\n-----TEST-----\n")
    out.write("".join(f"{value} " for value in expected) + "\n")
    out.write("DATA SE SHODUJI\n" if ok else "CHYBA\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())