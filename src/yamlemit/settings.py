"""Session defaults loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from yamlemit.models.manip import EmitterManip
from yamlemit.models.profile import (
    DOUBLE_DIGITS,
    FLOAT_DIGITS,
    MANIP_FIELDS,
    FormatProfile,
    check_manip_field,
)


class EmitterSettings(BaseSettings):
    """Defaults every new emitter state starts from.

    Values are read from ``YAMLEMIT_*`` environment variables and from a
    ``.env`` file in the working directory, e.g. ``YAMLEMIT_INDENT=4`` or
    ``YAMLEMIT_SEQ_FORMAT=flow``.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAMLEMIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    charset: EmitterManip = EmitterManip.EMIT_NON_ASCII
    string_format: EmitterManip = EmitterManip.AUTO
    bool_format: EmitterManip = EmitterManip.TRUE_FALSE_BOOL
    bool_case_format: EmitterManip = EmitterManip.LOWER_CASE
    bool_length_format: EmitterManip = EmitterManip.LONG_BOOL
    int_format: EmitterManip = EmitterManip.DEC
    seq_format: EmitterManip = EmitterManip.BLOCK
    map_format: EmitterManip = EmitterManip.BLOCK
    map_key_format: EmitterManip = EmitterManip.AUTO

    indent: int = Field(default=2, ge=1)
    pre_comment_indent: int = Field(default=2, ge=1)
    post_comment_indent: int = Field(default=1, ge=1)
    float_precision: int = Field(default=6, ge=0, le=FLOAT_DIGITS)
    double_precision: int = Field(default=15, ge=0, le=DOUBLE_DIGITS)

    @field_validator(*MANIP_FIELDS)
    @classmethod
    def check_manip(cls, value: EmitterManip, info: ValidationInfo) -> EmitterManip:
        return check_manip_field(value, info)

    def as_profile(self) -> FormatProfile:
        """Return the formatting defaults as a full profile."""
        return FormatProfile.model_validate(self.model_dump(exclude={"log_level"}))


def configure_logging(settings: EmitterSettings | None = None) -> None:
    """Configure root logging for applications embedding the emitter."""
    settings = settings or EmitterSettings()
    logging.basicConfig(level=settings.log_level.upper())
