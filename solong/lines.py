"""Line-by-line reading of a text stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

BUFFER_SIZE = 42


class LineReader:
    """Read lines, newline included, from a text stream in fixed-size chunks."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash = ""

    def read_line(self) -> str | None:
        """Return the next line with its newline, or None when none is left.

        The last line of a stream that does not end in a newline is returned
        without one.
        """
        while "\n" not in self._stash:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash += chunk
        if not self._stash:
            return None
        end = self._stash.find("\n")
        if end < 0:
            line, self._stash = self._stash, ""
        else:
            line, self._stash = self._stash[: end + 1], self._stash[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path: str | Path) -> list[str]:
    """Return every line of a text file, newlines included."""
    with open(path, encoding="utf-8", newline="") as stream:
        return list(LineReader(stream))