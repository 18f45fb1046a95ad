"""Error codes raised by the wheel engine and the option list store."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Stable identifiers the UI can switch on."""

    EMPTY_OPTION = "EmptyOption"
    TOO_LONG = "TooLong"
    DUPLICATE_OPTION = "DuplicateOption"
    LIST_FULL = "ListFull"
    BELOW_MINIMUM = "BelowMinimum"
    INSUFFICIENT_OPTIONS = "InsufficientOptions"
    INVALID_STATE = "InvalidState"


class WheelError(Exception):
    """Base class for every rejected engine or store operation.

    The message is meant to be shown inline next to the control that
    triggered it; ``code`` identifies the failure programmatically.
    """

    code: ErrorCode = ErrorCode.INVALID_STATE

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code

    @property
    def message(self) -> str:
        return str(self)


class EmptyOptionError(WheelError):
    code = ErrorCode.EMPTY_OPTION


class TooLongError(WheelError):
    code = ErrorCode.TOO_LONG


class DuplicateOptionError(WheelError):
    code = ErrorCode.DUPLICATE_OPTION


class ListFullError(WheelError):
    code = ErrorCode.LIST_FULL


class BelowMinimumError(WheelError):
    code = ErrorCode.BELOW_MINIMUM


class InsufficientOptionsError(WheelError):
    code = ErrorCode.INSUFFICIENT_OPTIONS


class InvalidStateError(WheelError):
    code = ErrorCode.INVALID_STATE


__all__ = [
    "ErrorCode",
    "WheelError",
    "EmptyOptionError",
    "TooLongError",
    "DuplicateOptionError",
    "ListFullError",
    "BelowMinimumError",
    "InsufficientOptionsError",
    "InvalidStateError",
]
