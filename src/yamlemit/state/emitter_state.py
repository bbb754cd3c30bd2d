"""Formatting state queried and mutated by the renderer while emitting a document."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from yamlemit.models.errors import EmitterError, ErrorCode, ErrorMsg
from yamlemit.models.manip import (
    CATEGORY_DOMAINS,
    EmitterManip,
    FlowType,
    FmtScope,
    GroupType,
    SettingCategory,
    coerce_group_type,
    coerce_manip,
)
from yamlemit.models.profile import (
    DOUBLE_DIGITS,
    FLOAT_DIGITS,
    MANIP_FIELDS,
    NUMERIC_FIELDS,
    FormatProfile,
)
from yamlemit.settings import EmitterSettings
from yamlemit.state.group import Group, GroupStack
from yamlemit.state.setting import ModifiedSettingsLog, ScopedOption

logger = logging.getLogger("yamlemit.state")

_LAYOUT_CATEGORIES = {
    GroupType.SEQ: SettingCategory.SEQ_FORMAT,
    GroupType.MAP: SettingCategory.MAP_FORMAT,
}


class EmitterState:
    """Scoped formatting options plus the stack of open groups.

    Setters return ``False`` for values outside the option's domain and leave
    the state untouched.  Structural misuse (unbalanced ``begin_group`` /
    ``end_group``) never raises; it marks the state as failed, and
    :meth:`is_ok` stays ``False`` for the rest of the session.
    """

    def __init__(self, settings: EmitterSettings | None = None) -> None:
        defaults = settings if settings is not None else EmitterSettings.model_construct()
        self._options: dict[str, ScopedOption[Any]] = {
            name: ScopedOption(name, getattr(defaults, name))
            for name in (*MANIP_FIELDS, *NUMERIC_FIELDS)
        }
        self._modified = ModifiedSettingsLog()
        self._groups = GroupStack()
        self._cur_indent = 0
        self._has_anchor = False
        self._has_tag = False
        self._error: EmitterError | None = None

    @classmethod
    def from_env(cls) -> EmitterState:
        """Create a state whose defaults come from ``YAMLEMIT_*`` settings."""
        return cls(EmitterSettings())

    # -- errors --------------------------------------------------------------

    def is_ok(self) -> bool:
        return self._error is None

    def error_message(self) -> str | None:
        return self._error.message if self._error else None

    @property
    def last_error(self) -> EmitterError | None:
        return self._error

    def set_error(self, message: str, code: ErrorCode = ErrorCode.EMITTER_ERROR) -> None:
        """Mark the session as failed. The first error is kept."""
        if self._error is not None:
            logger.debug("Ignoring further emitter error: %s", message)
            return
        self._error = EmitterError(code=code, message=message)
        logger.warning("Emitter state failed: %s", message)

    # -- per-node flags ------------------------------------------------------

    @property
    def has_anchor(self) -> bool:
        return self._has_anchor

    @property
    def has_tag(self) -> bool:
        return self._has_tag

    def set_anchor(self) -> None:
        self._has_anchor = True

    def set_tag(self) -> None:
        self._has_tag = True

    # -- structure -----------------------------------------------------------

    def begin_node(self) -> None:
        top = self._groups.top
        if top is not None:
            top.child_count += 1
        self._has_anchor = False
        self._has_tag = False

    def begin_scalar(self) -> None:
        self.begin_node()

    def begin_group(self, kind: GroupType) -> None:
        group_type = coerce_group_type(kind)
        if group_type is None or group_type == GroupType.NONE:
            self.set_error(f"cannot open a group of type '{kind}'")
            return
        kind = group_type
        self.begin_node()

        parent = self._groups.top
        width = self.indent
        base = parent.indent if parent is not None else 0
        self._cur_indent = base + width

        group = Group(
            kind=kind,
            flow=self.get_flow_type(kind),
            indent=self._cur_indent,
            indent_width=width,
            log_mark=self._modified.mark(),
        )
        self._groups.push(group)
        logger.debug(
            "Opened %s group (depth=%d, flow=%s, indent=%d)",
            kind, len(self._groups), group.flow, group.indent,
        )

    def end_group(self, kind: GroupType) -> bool:
        """Close the innermost group, which must be of *kind*."""
        if not self._groups:
            self.set_error(ErrorMsg.UNMATCHED_GROUP_TAG, ErrorCode.UNMATCHED_GROUP_TAG)
            return False

        finished = self._groups.pop()
        if finished.kind != kind:
            self.set_error(ErrorMsg.UNMATCHED_GROUP_TAG, ErrorCode.UNMATCHED_GROUP_TAG)
            return False

        assert self._cur_indent >= finished.indent_width, "group indent underflow"
        self._cur_indent -= finished.indent_width

        restored = self._modified.restore(finished.log_mark)
        logger.debug(
            "Closed %s group (depth=%d, restored=%s)", kind, len(self._groups), restored
        )
        return True

    def clear_modified_settings(self) -> list[str]:
        """Undo the local overrides of the innermost scope right away.

        Top-level local overrides are never undone by a group closing; the
        renderer must call this after each top-level value.
        """
        return self._modified.restore(self._scope_mark())

    # -- queries -------------------------------------------------------------

    def current_group_kind(self) -> GroupType:
        top = self._groups.top
        return top.kind if top is not None else GroupType.NONE

    def current_group_layout(self) -> FlowType:
        top = self._groups.top
        if top is None:
            return FlowType.NONE
        return FlowType.FLOW if top.is_flow else FlowType.BLOCK

    def current_indent(self) -> int:
        top = self._groups.top
        return top.indent if top is not None else 0

    def current_child_count(self) -> int:
        top = self._groups.top
        return top.child_count if top is not None else 0

    @property
    def depth(self) -> int:
        return len(self._groups)

    def get_flow_type(self, kind: GroupType) -> FlowType:
        """Layout a group of *kind* opened now would get."""
        if self.current_group_layout() == FlowType.FLOW:
            return FlowType.FLOW
        value = self._options[_LAYOUT_CATEGORIES[GroupType(kind)].value].value
        return FlowType(value.value)

    def current_format(self) -> FormatProfile:
        """Snapshot of every effective option value."""
        return FormatProfile.model_validate(
            {name: option.value for name, option in self._options.items()}
        )

    # -- option accessors ----------------------------------------------------

    @property
    def charset(self) -> EmitterManip:
        return self._options["charset"].value

    @property
    def string_format(self) -> EmitterManip:
        return self._options["string_format"].value

    @property
    def bool_format(self) -> EmitterManip:
        return self._options["bool_format"].value

    @property
    def bool_length_format(self) -> EmitterManip:
        return self._options["bool_length_format"].value

    @property
    def bool_case_format(self) -> EmitterManip:
        return self._options["bool_case_format"].value

    @property
    def int_format(self) -> EmitterManip:
        return self._options["int_format"].value

    @property
    def seq_format(self) -> EmitterManip:
        return self._options["seq_format"].value

    @property
    def map_format(self) -> EmitterManip:
        return self._options["map_format"].value

    @property
    def map_key_format(self) -> EmitterManip:
        return self._options["map_key_format"].value

    @property
    def indent(self) -> int:
        return self._options["indent"].value

    @property
    def pre_comment_indent(self) -> int:
        return self._options["pre_comment_indent"].value

    @property
    def post_comment_indent(self) -> int:
        return self._options["post_comment_indent"].value

    @property
    def float_precision(self) -> int:
        return self._options["float_precision"].value

    @property
    def double_precision(self) -> int:
        return self._options["double_precision"].value

    # -- setters -------------------------------------------------------------

    def set_output_charset(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.CHARSET, value, scope)

    def set_string_format(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.STRING_FORMAT, value, scope)

    def set_bool_format(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.BOOL_FORMAT, value, scope)

    def set_bool_length_format(
        self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL
    ) -> bool:
        return self._set_manip(SettingCategory.BOOL_LENGTH_FORMAT, value, scope)

    def set_bool_case_format(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.BOOL_CASE_FORMAT, value, scope)

    def set_int_format(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.INT_FORMAT, value, scope)

    def set_map_key_format(self, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_manip(SettingCategory.MAP_KEY_FORMAT, value, scope)

    def set_flow_type(
        self, kind: GroupType, value: EmitterManip, scope: FmtScope = FmtScope.LOCAL
    ) -> bool:
        category = _LAYOUT_CATEGORIES.get(kind)
        if category is None:
            return False
        if not self._set_manip(category, value, scope):
            return False
        if scope == FmtScope.LOCAL:
            self._restyle_fresh_group(GroupType(kind), FlowType(coerce_manip(value).value))
        return True

    def set_indent(self, value: int, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_number("indent", value, 1, None, scope)

    def set_pre_comment_indent(self, value: int, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_number("pre_comment_indent", value, 1, None, scope)

    def set_post_comment_indent(self, value: int, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_number("post_comment_indent", value, 1, None, scope)

    def set_float_precision(self, value: int, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_number("float_precision", value, 0, FLOAT_DIGITS, scope)

    def set_double_precision(self, value: int, scope: FmtScope = FmtScope.LOCAL) -> bool:
        return self._set_number("double_precision", value, 0, DOUBLE_DIGITS, scope)

    def set_local_value(self, value: EmitterManip) -> list[SettingCategory]:
        """Apply one manipulator locally to every category that accepts it.

        Returns the categories that took the value; an empty list means the
        token matched none of them.
        """
        return [
            category
            for category in SettingCategory
            if self._apply_category(category, value, FmtScope.LOCAL)
        ]

    def apply_profile(
        self, profile: FormatProfile, scope: FmtScope = FmtScope.GLOBAL
    ) -> list[str]:
        """Apply every option *profile* sets; return the names that were rejected."""
        setters = self._setters()
        return [
            name
            for name, value in profile.overrides().items()
            if not setters[name](value, scope)
        ]

    # -- internals -----------------------------------------------------------

    def _apply_category(
        self, category: SettingCategory, value: EmitterManip, scope: FmtScope
    ) -> bool:
        match category:
            case SettingCategory.CHARSET:
                return self.set_output_charset(value, scope)
            case SettingCategory.STRING_FORMAT:
                return self.set_string_format(value, scope)
            case SettingCategory.BOOL_FORMAT:
                return self.set_bool_format(value, scope)
            case SettingCategory.BOOL_CASE_FORMAT:
                return self.set_bool_case_format(value, scope)
            case SettingCategory.BOOL_LENGTH_FORMAT:
                return self.set_bool_length_format(value, scope)
            case SettingCategory.INT_FORMAT:
                return self.set_int_format(value, scope)
            case SettingCategory.SEQ_FORMAT:
                return self.set_flow_type(GroupType.SEQ, value, scope)
            case SettingCategory.MAP_FORMAT:
                return self.set_flow_type(GroupType.MAP, value, scope)
            case SettingCategory.MAP_KEY_FORMAT:
                return self.set_map_key_format(value, scope)

    def _setters(self) -> dict[str, Callable[[Any, FmtScope], bool]]:
        return {
            "charset": self.set_output_charset,
            "string_format": self.set_string_format,
            "bool_format": self.set_bool_format,
            "bool_case_format": self.set_bool_case_format,
            "bool_length_format": self.set_bool_length_format,
            "int_format": self.set_int_format,
            "seq_format": partial(self.set_flow_type, GroupType.SEQ),
            "map_format": partial(self.set_flow_type, GroupType.MAP),
            "map_key_format": self.set_map_key_format,
            "indent": self.set_indent,
            "pre_comment_indent": self.set_pre_comment_indent,
            "post_comment_indent": self.set_post_comment_indent,
            "float_precision": self.set_float_precision,
            "double_precision": self.set_double_precision,
        }

    def _set_manip(self, category: SettingCategory, value: object, scope: FmtScope) -> bool:
        manip = coerce_manip(value)
        if manip is None or manip not in CATEGORY_DOMAINS[category]:
            logger.debug("Rejected %r for %s", value, category.value)
            return False
        self._set(self._options[category.value], manip, scope)
        return True

    def _set_number(
        self, name: str, value: object, low: int, high: int | None, scope: FmtScope
    ) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value < low or (high is not None and value > high):
            logger.debug("Rejected %r for %s", value, name)
            return False
        self._set(self._options[name], value, scope)
        return True

    def _set(self, option: ScopedOption[Any], value: Any, scope: FmtScope) -> None:
        if scope == FmtScope.GLOBAL:
            option.set_global(value)
        else:
            self._modified.record(option, self._scope_mark())
            option.set_local(value)

    def _scope_mark(self) -> int:
        top = self._groups.top
        return top.log_mark if top is not None else 0

    def _restyle_fresh_group(self, kind: GroupType, flow: FlowType) -> None:
        # A local layout right after begin_group styles that group too,
        # unless an enclosing flow group already forces flow.
        top = self._groups.top
        if top is None or top.kind != kind or top.child_count > 0:
            return
        parent = self._groups.parent
        if parent is not None and parent.is_flow:
            return
        top.flow = flow
