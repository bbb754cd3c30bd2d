"""Pydantic models and enums shared by the emitter state."""

from yamlemit.models.errors import EmitterError, ErrorCode, ErrorMsg, SourceSpan
from yamlemit.models.manip import (
    CATEGORY_DOMAINS,
    EmitterManip,
    FlowType,
    FmtScope,
    GroupType,
    SettingCategory,
    categories_of,
)
from yamlemit.models.profile import DOUBLE_DIGITS, FLOAT_DIGITS, FormatProfile

__all__ = [
    "CATEGORY_DOMAINS",
    "DOUBLE_DIGITS",
    "EmitterError",
    "EmitterManip",
    "ErrorCode",
    "ErrorMsg",
    "FLOAT_DIGITS",
    "FlowType",
    "FmtScope",
    "FormatProfile",
    "GroupType",
    "SettingCategory",
    "SourceSpan",
    "categories_of",
]
