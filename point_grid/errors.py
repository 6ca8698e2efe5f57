from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    IO_ERROR = 'IO_ERROR'
    PARSE_ERROR = 'PARSE_ERROR'
    EMPTY_INPUT = 'EMPTY_INPUT'
    INVALID_ARGUMENT = 'INVALID_ARGUMENT'


class PointGridError(Exception):
    code: ErrorCode


class ParseError(PointGridError, ValueError):
    code = ErrorCode.PARSE_ERROR

    def __init__(self, message: str, *, line_no: Optional[int] = None, line: Optional[str] = None):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class EmptyInputError(PointGridError, ValueError):
    code = ErrorCode.EMPTY_INPUT


class InvalidArgumentError(PointGridError, ValueError):
    code = ErrorCode.INVALID_ARGUMENT


def error_code_for(exc: BaseException) -> ErrorCode:
    if isinstance(exc, PointGridError):
        return exc.code
    if isinstance(exc, OSError):
        return ErrorCode.IO_ERROR
    raise TypeError(f"Not a point grid failure: {type(exc).__name__}")
