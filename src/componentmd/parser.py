"""Parse markdown into a component-aware node tree."""

from __future__ import annotations

import dataclasses
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from componentmd.blocks import build_block_nodes
from componentmd.component_blocks import ComponentRegistry, normalize_component_blocks
from componentmd.config import ParseOptions
from componentmd.schemas import Node, Root
from componentmd.state import ParseState
from componentmd.tokenizer import create_markdown_it, normalize_plugins


class MarkdownParser:
    """Reusable parser holding a normalized registry and a configured tokenizer.

    Holds no per-call state, so one instance can parse many documents in
    sequence. Concurrent use is only as safe as the underlying tokenizer.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        opts = options or ParseOptions()
        self.registry: ComponentRegistry = normalize_component_blocks(opts.component_blocks)
        self.fence_prefix = opts.fence_component_prefix
        self.md: MarkdownIt = create_markdown_it(
            self.registry,
            markdown_it=opts.markdown_it,
            options=opts.markdown_it_options,
            plugins=normalize_plugins(opts.markdown_it_plugins),
        )

    def __call__(self, markdown: str) -> Root:
        return self.parse(markdown)

    def tokenize(self, markdown: str) -> list[Token]:
        """Return the raw token stream for ``markdown``."""
        return self.md.parse(markdown, {})

    def parse(self, markdown: str) -> Root:
        """Parse ``markdown`` into a Root. Never raises on malformed input."""
        state = ParseState(
            registry=self.registry,
            fence_prefix=self.fence_prefix,
            parse_fragment=lambda fragment: self._build(fragment, state),
        )
        return Root(children=self._build(markdown, state))

    def _build(self, markdown: str, state: ParseState) -> list[Node]:
        return build_block_nodes(self.tokenize(markdown), state)


def create_parser(options: ParseOptions | None = None, **overrides: Any) -> MarkdownParser:
    """Create a reusable parser.

    Keyword overrides are applied on top of ``options`` using the ParseOptions
    field names, e.g. ``create_parser(component_blocks={"Alert": True})``.
    """
    opts = options or ParseOptions()
    if overrides:
        opts = dataclasses.replace(opts, **overrides)
    return MarkdownParser(opts)


def parse_markdown(markdown: str, options: ParseOptions | None = None, **overrides: Any) -> Root:
    """Parse ``markdown`` with a one-off parser."""
    return create_parser(options, **overrides).parse(markdown)
