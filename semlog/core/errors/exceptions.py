# semlog/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


UNCLOSED_OPERATIONS_DOC = "https://github.com/koriym/semantic-logger/blob/main/docs/unclosed-operations.md"


@dataclass(eq=False)
class SemlogError(Exception):
    """
    Base exception for semlog.

    Every subclass carries a stable ``error_code`` plus the structured fields
    needed for triage in ``details``, so callers branch on the code instead of
    parsing the message.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "SEMLOG_ERROR"   # LOGIC_ERROR / VISUALIZER_ERROR
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_logic_error(self) -> bool:
        return self.error_code in codes.LOGIC_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# -------- engine errors --------

class InvalidContextError(SemlogError):
    """A context payload without a usable type tag."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=codes.INVALID_CONTEXT,
            error_type="LOGIC_ERROR",
            details=details or {},
        )


class NoOpenOperationsError(SemlogError):
    """event() or close() was called while no operation is open."""

    def __init__(self, action: str = "close"):
        self.action = action
        super().__init__(
            message=f"Cannot {action}: no open operations",
            error_code=codes.NO_OPEN_OPERATIONS,
            error_type="LOGIC_ERROR",
            details={"action": action},
        )


class InvalidOperationOrderError(SemlogError):
    """close() targeted an id that is not the innermost open operation."""

    def __init__(self, provided_id: str, expected_id: str):
        self.provided_id = provided_id
        self.expected_id = expected_id
        super().__init__(
            message=(
                f"Cannot close operation '{provided_id}': "
                f"expected '{expected_id}' (LIFO order required)"
            ),
            error_code=codes.INVALID_OPERATION_ORDER,
            error_type="LOGIC_ERROR",
            details={"provided_id": provided_id, "expected_id": expected_id},
        )


class UnclosedLogicError(SemlogError):
    """
    flush() was called with operations still open.

    Do not catch this to peek at a partial log: fix the open/close pairing.
    """

    def __init__(self, stack_depth: int, top_type: str, top_schema_url: str):
        self.stack_depth = stack_depth
        self.top_type = top_type
        self.top_schema_url = top_schema_url
        super().__init__(
            message=(
                f"Unclosed operations detected. {stack_depth} operations remain open. "
                f"Last operation: {top_type}. See: {UNCLOSED_OPERATIONS_DOC}"
            ),
            error_code=codes.UNCLOSED_LOGIC,
            error_type="LOGIC_ERROR",
            details={
                "stack_depth": stack_depth,
                "top_type": top_type,
                "top_schema_url": top_schema_url,
            },
        )


class NoLogSessionError(SemlogError):
    """flush() was called before anything was opened."""

    def __init__(self, reason: str = "no open entry"):
        super().__init__(
            message=f"Cannot create log session: {reason}",
            error_code=codes.NO_LOG_SESSION,
            error_type="LOGIC_ERROR",
            details={"reason": reason},
        )


# -------- visualizer errors --------

class LogFileNotFoundError(SemlogError):

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            message=f"Log file not found: {path}",
            error_code=codes.FILE_NOT_FOUND,
            error_type="VISUALIZER_ERROR",
            details={"path": path},
        )


class MalformedDocumentError(SemlogError):
    """The log document could not be parsed or does not form a consistent tree."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            message=message,
            error_code=codes.MALFORMED_DOCUMENT,
            error_type="VISUALIZER_ERROR",
            details=details or {},
            cause=cause,
        )


class InvalidOptionError(SemlogError):

    def __init__(self, message: str, *, option: Optional[str] = None):
        self.option = option
        super().__init__(
            message=message,
            error_code=codes.INVALID_OPTION,
            error_type="VISUALIZER_ERROR",
            details={"option": option} if option else {},
        )
