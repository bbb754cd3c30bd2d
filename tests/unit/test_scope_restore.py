"""Tests for global/local scoping and restore on group close."""

from __future__ import annotations

import pytest

from yamlemit.models.manip import EmitterManip, FlowType, FmtScope, GroupType
from yamlemit.state.emitter_state import EmitterState


class TestGlobalScope:
    @pytest.mark.parametrize(
        ("setter", "value", "attr"),
        [
            ("set_string_format", EmitterManip.DOUBLE_QUOTED, "string_format"),
            ("set_int_format", EmitterManip.HEX, "int_format"),
            ("set_bool_case_format", EmitterManip.UPPER_CASE, "bool_case_format"),
        ],
    )
    def test_global_persists_across_groups(
        self, state: EmitterState, setter: str, value: EmitterManip, attr: str
    ) -> None:
        getattr(state, setter)(value, FmtScope.GLOBAL)
        for kind in (GroupType.SEQ, GroupType.MAP):
            state.begin_group(kind)
            assert getattr(state, attr) == value
            state.end_group(kind)
        assert getattr(state, attr) == value

    def test_global_inside_group_survives_close(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_indent(4, FmtScope.GLOBAL)
        state.end_group(GroupType.MAP)
        assert state.indent == 4


class TestLocalScope:
    def test_local_reverts_on_close(self, state: EmitterState) -> None:
        state.begin_group(GroupType.SEQ)
        state.set_string_format(EmitterManip.SINGLE_QUOTED, FmtScope.LOCAL)
        assert state.string_format == EmitterManip.SINGLE_QUOTED
        state.end_group(GroupType.SEQ)
        assert state.string_format == EmitterManip.AUTO

    def test_local_visible_in_descendants(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_int_format(EmitterManip.OCT, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        assert state.int_format == EmitterManip.OCT
        state.end_group(GroupType.SEQ)
        assert state.int_format == EmitterManip.OCT
        state.end_group(GroupType.MAP)
        assert state.int_format == EmitterManip.DEC

    def test_repeated_local_keeps_first_undo_record(self, state: EmitterState) -> None:
        state.set_int_format(EmitterManip.HEX, FmtScope.GLOBAL)
        state.begin_group(GroupType.SEQ)
        state.set_int_format(EmitterManip.OCT, FmtScope.LOCAL)
        state.set_int_format(EmitterManip.DEC, FmtScope.LOCAL)
        state.set_int_format(EmitterManip.OCT, FmtScope.LOCAL)
        state.end_group(GroupType.SEQ)
        assert state.int_format == EmitterManip.HEX

    def test_nested_locals_unwind_level_by_level(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_indent(3, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        state.set_indent(5, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        state.set_indent(7, FmtScope.LOCAL)

        state.end_group(GroupType.SEQ)
        assert state.indent == 5
        state.end_group(GroupType.SEQ)
        assert state.indent == 3
        state.end_group(GroupType.MAP)
        assert state.indent == 2

    def test_sibling_groups_do_not_leak(self, state: EmitterState) -> None:
        state.begin_group(GroupType.SEQ)
        state.begin_group(GroupType.MAP)
        state.set_map_key_format(EmitterManip.LONG_KEY, FmtScope.LOCAL)
        state.end_group(GroupType.MAP)
        state.begin_group(GroupType.MAP)
        assert state.map_key_format == EmitterManip.AUTO
        state.end_group(GroupType.MAP)
        state.end_group(GroupType.SEQ)

    def test_local_indent_widens_nested_groups_only(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_indent(4, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        assert state.current_indent() == 6
        state.end_group(GroupType.SEQ)
        state.end_group(GroupType.MAP)
        state.begin_group(GroupType.SEQ)
        assert state.current_indent() == 2


class TestGlobalInsideLocal:
    def test_global_resurfaces_after_local_closes(self, state: EmitterState) -> None:
        state.begin_group(GroupType.MAP)
        state.set_string_format(EmitterManip.SINGLE_QUOTED, FmtScope.LOCAL)
        state.set_string_format(EmitterManip.DOUBLE_QUOTED, FmtScope.GLOBAL)
        state.set_string_format(EmitterManip.LITERAL, FmtScope.LOCAL)
        assert state.string_format == EmitterManip.LITERAL
        state.end_group(GroupType.MAP)
        assert state.string_format == EmitterManip.DOUBLE_QUOTED

    def test_global_in_child_overrides_parent_local_on_close(
        self, state: EmitterState
    ) -> None:
        state.begin_group(GroupType.MAP)
        state.set_bool_format(EmitterManip.YES_NO_BOOL, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        state.set_bool_format(EmitterManip.ON_OFF_BOOL, FmtScope.GLOBAL)
        state.end_group(GroupType.SEQ)
        assert state.bool_format == EmitterManip.ON_OFF_BOOL
        state.end_group(GroupType.MAP)
        assert state.bool_format == EmitterManip.ON_OFF_BOOL

    def test_global_before_local_in_same_group(self, state: EmitterState) -> None:
        state.begin_group(GroupType.SEQ)
        state.set_double_precision(10, FmtScope.GLOBAL)
        state.set_double_precision(3, FmtScope.LOCAL)
        state.end_group(GroupType.SEQ)
        assert state.double_precision == 10

    def test_unrelated_global_does_not_disturb_local_restore(
        self, state: EmitterState
    ) -> None:
        state.begin_group(GroupType.SEQ)
        state.set_int_format(EmitterManip.HEX, FmtScope.LOCAL)
        state.set_string_format(EmitterManip.LITERAL, FmtScope.GLOBAL)
        state.end_group(GroupType.SEQ)
        assert state.int_format == EmitterManip.DEC
        assert state.string_format == EmitterManip.LITERAL


class TestLocalLayout:
    def test_worked_example(self, state: EmitterState) -> None:
        state.set_indent(2, FmtScope.GLOBAL)
        state.begin_group(GroupType.MAP)
        assert state.current_indent() == 2
        assert state.current_group_layout() == FlowType.BLOCK

        state.set_flow_type(GroupType.MAP, EmitterManip.FLOW, FmtScope.LOCAL)
        assert state.current_group_layout() == FlowType.FLOW

        state.begin_group(GroupType.SEQ)
        assert state.current_group_layout() == FlowType.FLOW
        assert state.current_indent() == 4
        state.end_group(GroupType.SEQ)
        state.end_group(GroupType.MAP)

        assert state.current_group_kind() == GroupType.NONE
        assert state.map_format == EmitterManip.BLOCK
        state.begin_group(GroupType.MAP)
        assert state.current_group_layout() == FlowType.BLOCK
        assert state.is_ok()

    def test_local_layout_after_first_child_does_not_restyle(
        self, state: EmitterState
    ) -> None:
        state.begin_group(GroupType.SEQ)
        state.begin_scalar()
        state.set_flow_type(GroupType.SEQ, EmitterManip.FLOW, FmtScope.LOCAL)
        assert state.current_group_layout() == FlowType.BLOCK
        state.begin_group(GroupType.SEQ)
        assert state.current_group_layout() == FlowType.FLOW

    def test_local_block_cannot_escape_flow_parent(self, state: EmitterState) -> None:
        state.set_flow_type(GroupType.SEQ, EmitterManip.FLOW, FmtScope.GLOBAL)
        state.begin_group(GroupType.SEQ)
        state.begin_group(GroupType.SEQ)
        state.set_flow_type(GroupType.SEQ, EmitterManip.BLOCK, FmtScope.LOCAL)
        assert state.current_group_layout() == FlowType.FLOW

    def test_other_kind_does_not_restyle(self, state: EmitterState) -> None:
        state.begin_group(GroupType.SEQ)
        state.set_flow_type(GroupType.MAP, EmitterManip.FLOW, FmtScope.LOCAL)
        assert state.current_group_layout() == FlowType.BLOCK
        state.end_group(GroupType.SEQ)
        assert state.map_format == EmitterManip.BLOCK


class TestTopLevelLocal:
    def test_top_level_local_applies_to_next_group(self, state: EmitterState) -> None:
        state.set_flow_type(GroupType.SEQ, EmitterManip.FLOW, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        assert state.current_group_layout() == FlowType.FLOW
        state.end_group(GroupType.SEQ)
        assert state.seq_format == EmitterManip.FLOW
        state.clear_modified_settings()
        assert state.seq_format == EmitterManip.BLOCK

    def test_clear_modified_settings_reverts_top_level_local(
        self, state: EmitterState
    ) -> None:
        state.set_string_format(EmitterManip.DOUBLE_QUOTED, FmtScope.LOCAL)
        assert state.clear_modified_settings() == ["string_format"]
        assert state.string_format == EmitterManip.AUTO
        assert state.clear_modified_settings() == []

    def test_clear_modified_settings_scoped_to_innermost_group(
        self, state: EmitterState
    ) -> None:
        state.begin_group(GroupType.MAP)
        state.set_int_format(EmitterManip.HEX, FmtScope.LOCAL)
        state.begin_group(GroupType.SEQ)
        state.set_string_format(EmitterManip.LITERAL, FmtScope.LOCAL)
        state.clear_modified_settings()
        assert state.string_format == EmitterManip.AUTO
        assert state.int_format == EmitterManip.HEX
