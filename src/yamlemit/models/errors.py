"""Structured error models for emitter state and profile loading."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ErrorCode(StrEnum):
    UNMATCHED_GROUP_TAG = "unmatched_group_tag"
    EMITTER_ERROR = "emitter_error"


class ErrorMsg:
    """Human-readable messages for sticky emitter errors."""

    UNMATCHED_GROUP_TAG = "unmatched group tag"


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int


class EmitterError(BaseModel):
    """A sticky structural failure recorded on an emitter state."""

    code: ErrorCode
    message: str
