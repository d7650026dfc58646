"""Test setup for componentmd."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from componentmd.component_blocks import normalize_component_blocks  # noqa: E402
from componentmd.state import ParseState  # noqa: E402


@pytest.fixture
def parse_state() -> ParseState:
    """Parse state with an empty registry and no fragment re-parsing."""
    return ParseState(
        registry=normalize_component_blocks(None),
        fence_prefix="component:",
        parse_fragment=lambda fragment: [],
    )
