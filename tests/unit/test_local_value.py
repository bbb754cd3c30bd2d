"""Tests for dispatching a single manipulator token to every category."""

from __future__ import annotations

import pytest

from yamlemit.models.manip import (
    CATEGORY_DOMAINS,
    EmitterManip,
    FlowType,
    GroupType,
    SettingCategory,
    categories_of,
)
from yamlemit.state.emitter_state import EmitterState


class TestCategories:
    def test_every_token_has_a_category(self) -> None:
        for manip in EmitterManip:
            assert categories_of(manip), manip

    def test_auto_is_shared(self) -> None:
        assert categories_of(EmitterManip.AUTO) == [
            SettingCategory.STRING_FORMAT,
            SettingCategory.MAP_KEY_FORMAT,
        ]

    def test_layout_tokens_cover_both_kinds(self) -> None:
        assert categories_of("flow") == [SettingCategory.SEQ_FORMAT, SettingCategory.MAP_FORMAT]

    def test_unknown_token(self) -> None:
        assert categories_of("sparkly") == []
        assert categories_of(None) == []

    def test_domains_cover_all_categories(self) -> None:
        assert set(CATEGORY_DOMAINS) == set(SettingCategory)


class TestSetLocalValue:
    @pytest.mark.parametrize(
        ("value", "attr"),
        [
            (EmitterManip.ESCAPE_NON_ASCII, "charset"),
            (EmitterManip.LITERAL, "string_format"),
            (EmitterManip.ON_OFF_BOOL, "bool_format"),
            (EmitterManip.UPPER_CASE, "bool_case_format"),
            (EmitterManip.SHORT_BOOL, "bool_length_format"),
            (EmitterManip.HEX, "int_format"),
            (EmitterManip.LONG_KEY, "map_key_format"),
        ],
    )
    def test_token_reaches_its_category(
        self, state: EmitterState, value: EmitterManip, attr: str
    ) -> None:
        applied = state.set_local_value(value)
        assert len(applied) == 1
        assert getattr(state, attr) == value

    def test_layout_token_sets_both_kinds(self, state: EmitterState) -> None:
        applied = state.set_local_value(EmitterManip.FLOW)
        assert applied == [SettingCategory.SEQ_FORMAT, SettingCategory.MAP_FORMAT]
        assert state.seq_format == EmitterManip.FLOW
        assert state.map_format == EmitterManip.FLOW

    def test_unknown_token_changes_nothing(self, state: EmitterState) -> None:
        before = state.current_format()
        assert state.set_local_value("sparkly") == []  # type: ignore[arg-type]
        assert state.current_format() == before
        assert state.is_ok()

    def test_applied_locally(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_local_value(EmitterManip.FLOW)
        assert state.current_group_layout() == FlowType.FLOW
        state.set_local_value(EmitterManip.DOUBLE_QUOTED)
        state.end_group(GroupType.MAP)
        assert state.seq_format == EmitterManip.BLOCK
        assert state.map_format == EmitterManip.BLOCK
        assert state.string_format == EmitterManip.AUTO
