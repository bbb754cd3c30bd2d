"""Format profile: a partial set of option values applied to an emitter state."""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from yamlemit.models.manip import EmitterManip, SettingCategory, in_domain

# Decimal digits representable without loss by each floating-point width.
FLOAT_DIGITS: int = int(np.finfo(np.float32).precision)
DOUBLE_DIGITS: int = int(np.finfo(np.float64).precision)

MANIP_FIELDS: tuple[str, ...] = tuple(category.value for category in SettingCategory)
NUMERIC_FIELDS: tuple[str, ...] = (
    "indent",
    "pre_comment_indent",
    "post_comment_indent",
    "float_precision",
    "double_precision",
)


def check_manip_field(value: EmitterManip | None, info: ValidationInfo) -> EmitterManip | None:
    """Reject a token that does not belong to the field's category."""
    if value is None:
        return value
    category = SettingCategory(info.field_name)
    if not in_domain(category, value):
        raise ValueError(f"'{value}' is not a valid {category.value} value")
    return value


class FormatProfile(BaseModel):
    """Option values keyed by option name. Unset fields leave the state untouched."""

    model_config = ConfigDict(extra="forbid")

    charset: EmitterManip | None = None
    string_format: EmitterManip | None = None
    bool_format: EmitterManip | None = None
    bool_case_format: EmitterManip | None = None
    bool_length_format: EmitterManip | None = None
    int_format: EmitterManip | None = None
    seq_format: EmitterManip | None = None
    map_format: EmitterManip | None = None
    map_key_format: EmitterManip | None = None
    indent: int | None = Field(default=None, ge=1)
    pre_comment_indent: int | None = Field(default=None, ge=1)
    post_comment_indent: int | None = Field(default=None, ge=1)
    float_precision: int | None = Field(default=None, ge=0, le=FLOAT_DIGITS)
    double_precision: int | None = Field(default=None, ge=0, le=DOUBLE_DIGITS)

    @field_validator(*MANIP_FIELDS)
    @classmethod
    def check_manip(
        cls, value: EmitterManip | None, info: ValidationInfo
    ) -> EmitterManip | None:
        return check_manip_field(value, info)

    def overrides(self) -> dict[str, EmitterManip | int]:
        """Return only the fields this profile actually sets."""
        return self.model_dump(exclude_none=True)
