from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from .rules import DEFAULT_COLUMNS, DEFAULT_DELIMITER, DEFAULT_ENCODING


class LineFormatSettings(BaseModel):
    # Applied through the LineFormat setters, so out-of-range values are ignored
    # rather than rejected.
    columns: int = DEFAULT_COLUMNS
    delimiter: str = DEFAULT_DELIMITER
    line_terminator: Optional[str] = Field(default=None, examples=["\n", "\r\n"])
    encoding: str = DEFAULT_ENCODING


class RenderRequest(BaseModel):
    settings: LineFormatSettings = Field(default_factory=LineFormatSettings)
    rows: List[List[str]] = Field(default_factory=list)


class RenderedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default=DEFAULT_ENCODING)
    content_b64: str


class RenderSummary(BaseModel):
    rows: int = 0
    columns: int = DEFAULT_COLUMNS
    delimiter: str = DEFAULT_DELIMITER
    line_terminator: str


class RenderResponse(BaseModel):
    rendered: RenderedCsv
    summary: RenderSummary


class HealthResponse(BaseModel):
    ok: bool = True
