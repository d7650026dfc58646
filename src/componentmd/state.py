"""Per-call state threaded through tree reconstruction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from componentmd.component_blocks import ComponentRegistry
    from componentmd.schemas import Node


class KeyGenerator:
    """Hands out ``n_0``, ``n_1``, ... for a single parse call."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def __call__(self) -> str:
        key = f"n_{self._next}"
        self._next += 1
        return key

    @property
    def issued(self) -> int:
        """Number of keys handed out so far."""
        return self._next


@dataclass
class ParseState:
    """State shared by the top-level parse and every fragment re-parse it triggers.

    Attributes:
        registry: Normalized component blocks.
        fence_prefix: Info-string prefix marking fence components.
        parse_fragment: Tokenizes and reconstructs a markdown fragment using this
            same state, so keys never repeat within one tree.
        next_key: Key generator for this call.
    """

    registry: ComponentRegistry
    fence_prefix: str
    parse_fragment: Callable[[str], list[Node]]
    next_key: KeyGenerator = field(default_factory=KeyGenerator)
