# semlog/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_CONTEXT: Final[str] = "INVALID_CONTEXT"

# engine
NO_OPEN_OPERATIONS: Final[str] = "NO_OPEN_OPERATIONS"
INVALID_OPERATION_ORDER: Final[str] = "INVALID_OPERATION_ORDER"
UNCLOSED_LOGIC: Final[str] = "UNCLOSED_LOGIC"
NO_LOG_SESSION: Final[str] = "NO_LOG_SESSION"

# visualizer
FILE_NOT_FOUND: Final[str] = "FILE_NOT_FOUND"
MALFORMED_DOCUMENT: Final[str] = "MALFORMED_DOCUMENT"
INVALID_OPTION: Final[str] = "INVALID_OPTION"


# ---- semantic groups (internal helpers) ----

# Broken open/close discipline in the caller. These are programming errors:
# never retried, never swallowed by library code.
LOGIC_CODES: Final[set[str]] = {
    INVALID_CONTEXT,
    NO_OPEN_OPERATIONS,
    INVALID_OPERATION_ORDER,
    UNCLOSED_LOGIC,
    NO_LOG_SESSION,
}

# Failures of the tree tool; they end the CLI with exit code 1.
VISUALIZER_CODES: Final[set[str]] = {
    FILE_NOT_FOUND,
    MALFORMED_DOCUMENT,
    INVALID_OPTION,
}
