from __future__ import annotations

from enum import Enum


class SizeErrorCode(str, Enum):
    OVERFLOW = "overflow"
    INVALID_SCALAR = "invalid_scalar"
    NON_FINITE = "non_finite"
    PARSE = "parse"


class SizeError(Exception):
    code: SizeErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SizeOverflowError(SizeError, OverflowError):
    code = SizeErrorCode.OVERFLOW


class InvalidScalarError(SizeError, ZeroDivisionError):
    code = SizeErrorCode.INVALID_SCALAR


class NonFiniteSizeError(SizeError, ValueError):
    code = SizeErrorCode.NON_FINITE


class ParseSizeError(SizeError, ValueError):
    code = SizeErrorCode.PARSE

    def __init__(self, text: str, reason: str = "not a size") -> None:
        super().__init__(f"Cannot parse {text!r} as a size: {reason}")
        self.text = text
        self.reason = reason
