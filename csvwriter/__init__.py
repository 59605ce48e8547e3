from .errors import CsvWriterError, InvalidArgument, IOFailure, NotFound, WriterClosed
from .line_format import LineFormat
from .writer import CsvWriter

__all__ = [
    "CsvWriter",
    "CsvWriterError",
    "IOFailure",
    "InvalidArgument",
    "LineFormat",
    "NotFound",
    "WriterClosed",
]
