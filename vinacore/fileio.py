"""File opening with uniform errors, parse errors and output duplication."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO, Union

PathLike = Union[str, "os.PathLike[str]"]

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FileError(OSError):
    """A file could not be opened for reading or writing."""

    def __init__(self, name: PathLike, is_input: bool):
        self.name = Path(name)
        self.is_input = is_input
        direction = "reading" if is_input else "writing"
        super().__init__(f"could not open {self.name} for {direction}")


class ParseError(ValueError):
    """Malformed input at a given line of a file."""

    def __init__(self, file: PathLike, line: int, reason: str = ""):
        self.file = Path(file)
        self.line = line
        self.reason = reason
        super().__init__(f"parse error on line {line} in file {self.file}: {reason}")


def open_input(path: PathLike) -> TextIO:
    """Open a text file for reading, with line endings left untouched."""
    try:
        return open(path, "r", encoding=_ENCODING, errors=_ERRORS, newline="")
    except OSError as error:
        raise FileError(path, True) from error


def open_output(path: PathLike) -> TextIO:
    """Open a text file for writing, with line endings left untouched."""
    try:
        return open(path, "w", encoding=_ENCODING, errors=_ERRORS, newline="")
    except OSError as error:
        raise FileError(path, False) from error


class Tee:
    """Writes everything to standard output and, optionally, to a log file."""

    def __init__(self, path: PathLike | None = None):
        self._file: TextIO | None = open_output(path) if path is not None else None

    def __enter__(self) -> "Tee":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def write(self, text) -> "Tee":
        """Write str(text) to both destinations; returns self for chaining."""
        value = str(text)
        sys.stdout.write(value)
        if self._file is not None:
            self._file.write(value)
        return self

    def flush(self) -> None:
        sys.stdout.flush()
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        """Flush and close the log file; standard output stays open."""
        sys.stdout.flush()
        if self._file is not None:
            self._file.close()
            self._file = None