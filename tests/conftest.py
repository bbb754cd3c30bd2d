"""Shared test fixtures for yamlemit."""

from __future__ import annotations

import pytest

from yamlemit.parser.loader import ProfileLoader
from yamlemit.state.emitter_state import EmitterState


@pytest.fixture
def state() -> EmitterState:
    """A fresh emitter state with the built-in defaults."""
    return EmitterState()


@pytest.fixture
def loader() -> ProfileLoader:
    return ProfileLoader()


SAMPLE_PROFILE_YAML = """\
# compact JSON-ish output
string_format: double_quoted
seq_format: flow
map_format: flow
indent: 4
double_precision: 10
"""
