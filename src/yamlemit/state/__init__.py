"""Scoped formatting state for the emitter."""

from yamlemit.state.emitter_state import EmitterState
from yamlemit.state.group import Group, GroupStack
from yamlemit.state.setting import ModifiedSettingsLog, ScopedOption, SettingChange

__all__ = [
    "EmitterState",
    "Group",
    "GroupStack",
    "ModifiedSettingsLog",
    "ScopedOption",
    "SettingChange",
]
