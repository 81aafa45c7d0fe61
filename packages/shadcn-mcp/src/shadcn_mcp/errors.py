"""Errors surfaced to tool callers."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"


class ToolError(Exception):
    """Base error for failures reported back to the caller of a tool."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class NotFoundError(ToolError):
    code = ErrorCode.NOT_FOUND


class InvalidParamsError(ToolError):
    code = ErrorCode.INVALID_PARAMS


class InternalError(ToolError):
    code = ErrorCode.INTERNAL_ERROR
