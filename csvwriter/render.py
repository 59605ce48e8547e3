"""
In-memory rendering of rows to delimited text.

Runs a CsvWriter over a StringIO so the service produces exactly the bytes a
file write would.
"""

from __future__ import annotations

import base64
import hashlib
import io
import logging
from typing import Any, Dict, Iterable, Optional, Sequence

from .models import LineFormatSettings
from .writer import CsvWriter

logger = logging.getLogger(__name__)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def render_rows(
    rows: Iterable[Sequence[Any]],
    settings: Optional[LineFormatSettings] = None,
) -> Dict[str, Any]:
    """
    Render rows with the given settings.

    Returns a dict matching the API's response envelope. InvalidArgument from
    the writer (e.g. a column-count mismatch) propagates to the caller.
    """
    settings = settings or LineFormatSettings()
    buf = io.StringIO(newline="")

    with CsvWriter.from_settings(buf, settings) as writer:
        count = writer.write_rows(rows)
        # StringIO discards its contents on close
        text = buf.getvalue()
        summary = {
            "rows": count,
            "columns": writer.columns,
            "delimiter": writer.delimiter,
            "line_terminator": writer.line_terminator,
        }

    data = text.encode(settings.encoding)
    logger.debug("Rendered %d rows (%d bytes)", count, len(data))

    return {
        "rendered": {
            "sha256": _sha256_hex(data),
            "encoding": settings.encoding,
            "content_b64": base64.b64encode(data).decode("ascii"),
        },
        "summary": summary,
    }
