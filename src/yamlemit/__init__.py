"""yamlemit — scoped formatting state for a structured-text emitter."""

from yamlemit.models import (
    EmitterError,
    EmitterManip,
    FlowType,
    FmtScope,
    FormatProfile,
    GroupType,
    SettingCategory,
)
from yamlemit.parser import ProfileError, ProfileLoader
from yamlemit.settings import EmitterSettings, configure_logging
from yamlemit.state import EmitterState

__version__ = "0.1.0"

__all__ = [
    "EmitterError",
    "EmitterManip",
    "EmitterSettings",
    "EmitterState",
    "FlowType",
    "FmtScope",
    "FormatProfile",
    "GroupType",
    "ProfileError",
    "ProfileLoader",
    "SettingCategory",
    "configure_logging",
]
