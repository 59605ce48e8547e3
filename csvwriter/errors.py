"""
Errors raised by the writer.

Each class also derives from the builtin it refines so callers can catch
either ``InvalidArgument`` or plain ``ValueError``.
"""


class CsvWriterError(Exception):
    """Base class for every error raised by csvwriter."""


class InvalidArgument(CsvWriterError, ValueError):
    """Bad target, bad handle, bad encoding, missing row or a column-count mismatch."""


class NotFound(CsvWriterError, FileNotFoundError):
    """The target file does not exist."""


class IOFailure(CsvWriterError, OSError):
    """Any other I/O error while opening, writing, flushing or closing."""


class WriterClosed(IOFailure):
    """The writer was already closed."""
