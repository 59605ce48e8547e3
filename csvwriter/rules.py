"""
Line formatting rules.

This file exists to make the accepted configuration explicit and enforceable.
"""

import os

DEFAULT_DELIMITER = ","
DEFAULT_COLUMNS = 1
DEFAULT_ENCODING = "utf-8"

# Only these terminators are accepted; "" means no terminator at all.
PERMITTED_LINE_TERMINATORS = ("\n", "\r\n", "\r", "")

# Resolved once on import and injected into LineFormat as its default.
PLATFORM_LINE_TERMINATOR = os.linesep

PLACEHOLDER = "{}"
