"""
Sequential writer for delimited text files.

Responsibilities:
- open the target (path or already-open handle) for truncate or append
- enforce the column count on every row
- format rows through the LineFormat template and write them out
- release the handle exactly once
"""

from __future__ import annotations

import codecs
import logging
import os
from typing import Any, Iterable, Optional, Sequence, TextIO, Union

from .errors import InvalidArgument, IOFailure, NotFound, WriterClosed
from .line_format import LineFormat
from .models import LineFormatSettings
from .rules import DEFAULT_COLUMNS, DEFAULT_ENCODING

logger = logging.getLogger(__name__)

Target = Union[str, "os.PathLike[str]", TextIO]


def _open_path(path: Any, append: bool, encoding: str) -> TextIO:
    if isinstance(path, str) and not path.strip():
        raise InvalidArgument("Path cannot be blank")

    if os.path.isdir(path):
        raise InvalidArgument(f"File cannot be a directory: {path}")

    # The target must already exist, in both write and append mode.
    if not os.path.exists(path):
        raise NotFound(f"File does not exist: {path}")

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidArgument(f"Unknown encoding: {encoding}") from e

    mode = "a" if append else "w"
    try:
        # newline="" keeps the configured terminator byte-exact on every platform
        return open(path, mode, newline="", encoding=encoding)
    except FileNotFoundError as e:
        raise NotFound(f"File does not exist: {path}") from e
    except IsADirectoryError as e:
        raise InvalidArgument(f"File cannot be a directory: {path}") from e
    except OSError as e:
        raise IOFailure(f"Could not open {path}: {e}") from e


def _check_handle(handle: Any) -> TextIO:
    if getattr(handle, "closed", False):
        raise InvalidArgument("Handle is already closed")

    name = getattr(handle, "name", None)
    if isinstance(name, str) and os.path.isdir(name):
        raise InvalidArgument(f"Handle cannot refer to a directory: {name}")
    return handle


class CsvWriter:
    """
    Write delimited lines to a file.

    Lines are formatted as ``c1 + delimiter + ... + cN + line_terminator``
    with no quoting. Use as a context manager so the handle is always closed:

        with CsvWriter("out.csv", columns=3) as w:
            w.line_terminator = "\\n"
            w.write("a", "b", "c")
    """

    def __init__(
        self,
        target: Target,
        columns: int = DEFAULT_COLUMNS,
        append: bool = False,
        *,
        encoding: str = DEFAULT_ENCODING,
        line_format: Optional[LineFormat] = None,
    ) -> None:
        if target is None:
            raise InvalidArgument("Target cannot be None")

        if isinstance(target, (str, os.PathLike)):
            self._stream = _open_path(target, append, encoding)
            self.name = os.fspath(target)
        elif hasattr(target, "write"):
            self._stream = _check_handle(target)
            self.name = getattr(target, "name", repr(target))
        else:
            raise InvalidArgument(f"Unsupported target type: {type(target).__name__}")

        self.line_format = line_format if line_format is not None else LineFormat()
        self.line_format.set_columns(columns)
        self._closed = False
        self.rows_written = 0

        logger.info("Opened %s for %s", self.name, "append" if append else "write")

    @classmethod
    def from_settings(
        cls,
        target: Target,
        settings: LineFormatSettings,
        append: bool = False,
    ) -> "CsvWriter":
        writer = cls(target, settings.columns, append, encoding=settings.encoding)
        writer.delimiter = settings.delimiter
        writer.line_terminator = settings.line_terminator
        return writer

    # --- configuration, forwarded to the line format ---

    @property
    def columns(self) -> int:
        return self.line_format.columns

    @columns.setter
    def columns(self, n: int) -> None:
        self.line_format.set_columns(n)

    def set_columns(self, n: int) -> None:
        self.line_format.set_columns(n)

    @property
    def delimiter(self) -> str:
        return self.line_format.delimiter

    @delimiter.setter
    def delimiter(self, s: Optional[str]) -> None:
        self.line_format.set_delimiter(s)

    def set_delimiter(self, s: Optional[str]) -> None:
        self.line_format.set_delimiter(s)

    @property
    def line_terminator(self) -> str:
        return self.line_format.line_terminator

    @line_terminator.setter
    def line_terminator(self, s: Optional[str]) -> None:
        self.line_format.set_line_terminator(s)

    def set_line_terminator(self, s: Optional[str]) -> None:
        self.line_format.set_line_terminator(s)

    # --- writing ---

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise WriterClosed(f"Writer for {self.name} is closed")

    def write(self, *columns: Any) -> None:
        self.write_row(columns)

    def write_row(self, row: Optional[Sequence[Any]]) -> None:
        """
        Write one row.

        Raises InvalidArgument when the row is None, a bare string, or its
        length differs from the configured column count; nothing is written
        in that case.
        """
        self._ensure_open()
        if row is None:
            raise InvalidArgument("Row cannot be None")
        if isinstance(row, (str, bytes)):
            raise InvalidArgument("Row must be a sequence of columns, not a single string")

        expected = self.line_format.columns
        if len(row) != expected:
            raise InvalidArgument(
                f"Number of columns provided ({len(row)}) does not match the amount needed ({expected})"
            )

        line = self.line_format.template.format(*row)
        try:
            self._stream.write(line)
        except (OSError, ValueError) as e:
            # ValueError: the handle was closed from outside
            raise IOFailure(f"Could not write to {self.name}: {e}") from e
        self.rows_written += 1

    def write_rows(self, rows: Iterable[Sequence[Any]]) -> int:
        count = 0
        for row in rows:
            self.write_row(row)
            count += 1
        return count

    def flush(self) -> None:
        self._ensure_open()
        try:
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise IOFailure(f"Could not flush {self.name}: {e}") from e

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._stream.close()
        except (OSError, ValueError) as e:
            raise IOFailure(f"Could not close {self.name}: {e}") from e
        logger.info("Closed %s after %d rows", self.name, self.rows_written)

    def __enter__(self) -> "CsvWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
