"""A list of integers with a read cursor, loadable from a text file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _parse_int(line: str) -> int:
    """Parse the leading integer of a line, ignoring anything after it."""
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"no integer in line {line!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range in line {line!r}")
    return value


def read_ints(path: str | os.PathLike[str]) -> list[int]:
    """Read one integer per line from a text file."""
    with open(path, encoding="utf-8") as handle:
        return [_parse_int(line) for line in handle]


class IntList:
    """A list of integers walked from the front by an internal cursor."""

    def __init__(self, data: Iterable[int] = ()) -> None:
        self._data = list(data)
        self._index = 0

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> IntList:
        """Build a list from a file holding one integer per line."""
        return cls(read_ints(path))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"IntList({self._data!r})"

    def advance(self) -> int:
        """Return the value under the cursor and move the cursor forward."""
        value = self.peek()
        self._index += 1
        return value

    def peek(self) -> int:
        """Return the value under the cursor without moving it."""
        if self.exhausted():
            raise IndexError("list is exhausted")
        return self._data[self._index]

    def exhausted(self) -> bool:
        """True once the cursor has passed the last value."""
        return self._index >= len(self._data)

    def remaining(self) -> list[int]:
        """The values from the cursor to the end."""
        return self._data[self._index:]

    def format(self) -> str:
        """All values, each followed by a space."""
        return "".join(f"{value} " for value in self._data)

    def verify_merge(
        self, paths: Sequence[str | os.PathLike[str]]
    ) -> tuple[list[int], bool]:
        """Compare this list with the sorted contents of all the given files.

        Returns the sorted reference data and whether it equals this list.
        """
        expected = sorted(value for path in paths for value in read_ints(path))
        return expected, expected == self._data