"""Classify non-nesting block tokens into zero or more nodes."""

from __future__ import annotations

from markdown_it.token import Token

from componentmd.component_blocks import ComponentBlock
from componentmd.component_spec import parse_fence_component_spec
from componentmd.inline import build_inline_nodes
from componentmd.props import PropsContext, default_parse_props
from componentmd.schemas import (
    CodeNode,
    ComponentNode,
    ElementNode,
    HtmlNode,
    Node,
    TextNode,
)
from componentmd.state import ParseState
from componentmd.tokens import attrs_to_record


def build_leaf_nodes(token: Token, state: ParseState) -> list[Node]:
    """Map a leaf token (``nesting == 0``) to nodes."""
    token_type = token.type

    if token_type == "inline":
        return build_inline_nodes(token.children or [], state)

    if token_type == "fence":
        component = build_fence_component(token, state)
        if component is not None:
            return [component]
        words = token.info.split()
        return [
            CodeNode(
                key=state.next_key(),
                inline=False,
                text=token.content,
                lang=words[0] if words else None,
                info=token.info,
                attrs=attrs_to_record(token.attrs),
            )
        ]

    if token_type == "code_block":
        return [
            CodeNode(
                key=state.next_key(),
                inline=False,
                text=token.content,
                attrs=attrs_to_record(token.attrs),
            )
        ]

    if token_type == "html_block":
        return [HtmlNode(key=state.next_key(), value=token.content, block=True)]

    if token_type == "hr":
        return [
            ElementNode(
                key=state.next_key(),
                name="hr",
                attrs=attrs_to_record(token.attrs),
                children=[],
                block=True,
            )
        ]

    if token.content:
        return [TextNode(key=state.next_key(), value=token.content)]

    return []


def build_fence_component(token: Token, state: ParseState) -> ComponentNode | None:
    """Build a fence component, or None if the fence is ordinary code.

    Unregistered names are still components, handled with the defaults. A
    registered name with fence syntax disabled stays a code block.
    """
    spec = parse_fence_component_spec(token.info, state.fence_prefix)
    if spec is None:
        return None

    config: ComponentBlock | None = state.registry.get(spec.name)
    if config is not None and not config.fence:
        return None

    parse_props = config.parse_props if config is not None else default_parse_props
    props = parse_props(spec.props_raw, PropsContext(name=spec.name, syntax="fence"))

    children: list[Node] = []
    if config is not None and config.parse_fence_body_as_markdown:
        children = state.parse_fragment(token.content)

    return ComponentNode(
        key=state.next_key(),
        name=spec.name,
        syntax="fence",
        props=props,
        children=children,
        source=token.content,
    )
