"""
Format template for a single delimited line.

A LineFormat holds three settings:
- columns: how many placeholders the template has (at least one)
- delimiter: the string placed between adjacent placeholders
- line_terminator: "\\n", "\\r\\n", "\\r" or "" (no terminator)

The template is rebuilt lazily: setters only mark it dirty, and the next read
rebuilds it. Invalid values are ignored and the previous value is kept, so a
long-running write loop never fails because of a bad computed setting.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .rules import (
    DEFAULT_COLUMNS,
    DEFAULT_DELIMITER,
    PERMITTED_LINE_TERMINATORS,
    PLACEHOLDER,
    PLATFORM_LINE_TERMINATOR,
)

logger = logging.getLogger(__name__)


def _escape_braces(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


class LineFormat:
    def __init__(
        self,
        columns: int = DEFAULT_COLUMNS,
        delimiter: str = DEFAULT_DELIMITER,
        line_terminator: Optional[str] = None,
        *,
        default_line_terminator: str = PLATFORM_LINE_TERMINATOR,
    ) -> None:
        self._columns = DEFAULT_COLUMNS
        self._delimiter = DEFAULT_DELIMITER
        self._line_terminator = default_line_terminator
        self._template: Optional[str] = None
        self._dirty = True

        self.set_columns(columns)
        self.set_delimiter(delimiter)
        self.set_line_terminator(line_terminator)

    # --- columns ---

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, n: int) -> None:
        self.set_columns(n)

    def set_columns(self, n: Any) -> None:
        """Accept any integer >= 1; anything else keeps the current count."""
        if isinstance(n, bool) or not isinstance(n, int):
            logger.debug("Ignoring non-integer column count %r", n)
            return
        if n == self._columns:
            return
        if n < 1:
            logger.debug("Ignoring column count %d, keeping %d", n, self._columns)
            return
        self._columns = n
        self._dirty = True

    # --- delimiter ---

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @delimiter.setter
    def delimiter(self, s: Optional[str]) -> None:
        self.set_delimiter(s)

    def set_delimiter(self, s: Optional[str]) -> None:
        if not isinstance(s, str) or s == "":
            logger.debug("Ignoring empty delimiter %r", s)
            return
        if s == self._delimiter:
            return
        self._delimiter = s
        self._dirty = True

    # --- line terminator ---

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @line_terminator.setter
    def line_terminator(self, s: Optional[str]) -> None:
        self.set_line_terminator(s)

    def set_line_terminator(self, s: Optional[str]) -> None:
        if s is None or s == self._line_terminator:
            return
        if s not in PERMITTED_LINE_TERMINATORS:
            # Rejected values leave the cached template untouched.
            logger.debug("Ignoring unsupported line terminator %r", s)
            return
        self._line_terminator = s
        self._dirty = True

    # --- template ---

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def template(self) -> str:
        """
        Return the str.format template for one line.

        The template holds `columns` "{}" placeholders joined by the delimiter
        (braces in the delimiter are doubled) and ends with the terminator.
        It is only rebuilt when a setter accepted a change since the last read.
        """
        if self._dirty or self._template is None:
            separator = _escape_braces(self._delimiter)
            self._template = separator.join([PLACEHOLDER] * self._columns) + self._line_terminator
            self._dirty = False
            logger.debug("Rebuilt line template for %d columns: %r", self._columns, self._template)
        return self._template

    def get_template(self) -> str:
        return self.template

    def __str__(self) -> str:
        return self.template

    def __repr__(self) -> str:
        return (
            f"LineFormat(columns={self._columns!r}, delimiter={self._delimiter!r}, "
            f"line_terminator={self._line_terminator!r})"
        )
