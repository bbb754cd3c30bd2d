"""Manipulator vocabulary: tokens, categories, group kinds and scopes."""

from __future__ import annotations

from enum import StrEnum


class EmitterManip(StrEnum):
    # charset
    EMIT_NON_ASCII = "emit_non_ascii"
    ESCAPE_NON_ASCII = "escape_non_ascii"

    # string / map key
    AUTO = "auto"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    LITERAL = "literal"
    LONG_KEY = "long_key"

    # bool spelling
    TRUE_FALSE_BOOL = "true_false_bool"
    YES_NO_BOOL = "yes_no_bool"
    ON_OFF_BOOL = "on_off_bool"

    # bool length
    LONG_BOOL = "long_bool"
    SHORT_BOOL = "short_bool"

    # bool case
    UPPER_CASE = "upper_case"
    LOWER_CASE = "lower_case"
    CAMEL_CASE = "camel_case"

    # int base
    DEC = "dec"
    HEX = "hex"
    OCT = "oct"

    # layout
    BLOCK = "block"
    FLOW = "flow"


class GroupType(StrEnum):
    NONE = "none"
    SEQ = "seq"
    MAP = "map"


class FlowType(StrEnum):
    NONE = "none"
    BLOCK = "block"
    FLOW = "flow"


class FmtScope(StrEnum):
    LOCAL = "local"
    GLOBAL = "global"


class SettingCategory(StrEnum):
    """Closed set of manipulator categories a token can be dispatched to."""

    CHARSET = "charset"
    STRING_FORMAT = "string_format"
    BOOL_FORMAT = "bool_format"
    BOOL_CASE_FORMAT = "bool_case_format"
    BOOL_LENGTH_FORMAT = "bool_length_format"
    INT_FORMAT = "int_format"
    SEQ_FORMAT = "seq_format"
    MAP_FORMAT = "map_format"
    MAP_KEY_FORMAT = "map_key_format"


_LAYOUTS = frozenset({EmitterManip.BLOCK, EmitterManip.FLOW})

CATEGORY_DOMAINS: dict[SettingCategory, frozenset[EmitterManip]] = {
    SettingCategory.CHARSET: frozenset(
        {EmitterManip.EMIT_NON_ASCII, EmitterManip.ESCAPE_NON_ASCII}
    ),
    SettingCategory.STRING_FORMAT: frozenset(
        {
            EmitterManip.AUTO,
            EmitterManip.SINGLE_QUOTED,
            EmitterManip.DOUBLE_QUOTED,
            EmitterManip.LITERAL,
        }
    ),
    SettingCategory.BOOL_FORMAT: frozenset(
        {EmitterManip.TRUE_FALSE_BOOL, EmitterManip.YES_NO_BOOL, EmitterManip.ON_OFF_BOOL}
    ),
    SettingCategory.BOOL_CASE_FORMAT: frozenset(
        {EmitterManip.UPPER_CASE, EmitterManip.LOWER_CASE, EmitterManip.CAMEL_CASE}
    ),
    SettingCategory.BOOL_LENGTH_FORMAT: frozenset(
        {EmitterManip.LONG_BOOL, EmitterManip.SHORT_BOOL}
    ),
    SettingCategory.INT_FORMAT: frozenset({EmitterManip.DEC, EmitterManip.HEX, EmitterManip.OCT}),
    SettingCategory.SEQ_FORMAT: _LAYOUTS,
    SettingCategory.MAP_FORMAT: _LAYOUTS,
    SettingCategory.MAP_KEY_FORMAT: frozenset({EmitterManip.AUTO, EmitterManip.LONG_KEY}),
}


def coerce_manip(value: object) -> EmitterManip | None:
    """Return the manipulator token for *value*, or None if it is not one."""
    if isinstance(value, EmitterManip):
        return value
    if isinstance(value, str):
        try:
            return EmitterManip(value)
        except ValueError:
            return None
    return None


def categories_of(value: object) -> list[SettingCategory]:
    """List every category whose domain contains *value* (declaration order)."""
    manip = coerce_manip(value)
    if manip is None:
        return []
    return [cat for cat, domain in CATEGORY_DOMAINS.items() if manip in domain]


def in_domain(category: SettingCategory, value: object) -> bool:
    manip = coerce_manip(value)
    return manip is not None and manip in CATEGORY_DOMAINS[category]


def coerce_group_type(value: object) -> GroupType | None:
    """Return the group type for *value*, or None if it is not one."""
    if isinstance(value, GroupType):
        return value
    if isinstance(value, str):
        try:
            return GroupType(value)
        except ValueError:
            return None
    return None
