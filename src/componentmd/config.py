"""Local configuration for componentmd."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from componentmd.component_blocks import ComponentBlocks
    from componentmd.tokenizer import PluginDescriptor


DEFAULT_FENCE_PREFIX = "component:"
DEFAULT_MARKDOWN_IT_PRESET = "default"
DEFAULT_MARKDOWN_IT_OPTIONS: dict[str, Any] = {
    "html": False,
    "linkify": True,
    "typographer": True,
}

COMPONENTMD_FENCE_PREFIX = os.getenv("COMPONENTMD_FENCE_PREFIX", DEFAULT_FENCE_PREFIX)
COMPONENTMD_MARKDOWN_IT_PRESET = os.getenv(
    "COMPONENTMD_MARKDOWN_IT_PRESET", DEFAULT_MARKDOWN_IT_PRESET
)


@dataclass
class ParseOptions:
    """Options for building a parser.

    Attributes:
        markdown_it: Pre-built tokenizer. When set, default construction is skipped
            and ``markdown_it_options`` is ignored.
        markdown_it_options: Passed through to ``MarkdownIt`` on top of
            ``DEFAULT_MARKDOWN_IT_OPTIONS``.
        markdown_it_plugins: Plugins applied in order, each either a bare callable
            or a ``(plugin, *params)`` tuple.
        component_blocks: Component name to ``True`` or a block config.
        fence_component_prefix: Info-string prefix marking a fence component.
    """

    markdown_it: MarkdownIt | None = None
    markdown_it_options: dict[str, Any] = field(default_factory=dict)
    markdown_it_plugins: list[PluginDescriptor] = field(default_factory=list)
    component_blocks: ComponentBlocks | None = None
    fence_component_prefix: str = COMPONENTMD_FENCE_PREFIX
