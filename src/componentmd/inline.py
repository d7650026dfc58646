"""Rebuild inline nodes from the children of an ``inline`` token."""

from __future__ import annotations

from collections.abc import Sequence

from markdown_it.token import Token

from componentmd.schemas import (
    BreakNode,
    CodeNode,
    ElementNode,
    HtmlNode,
    Node,
    TextNode,
)
from componentmd.state import ParseState
from componentmd.tokens import (
    attrs_to_record,
    close_type_for,
    find_close_index,
    is_open_token,
    node_name,
)


def build_inline_nodes(
    tokens: Sequence[Token],
    state: ParseState,
    start: int = 0,
    end: int | None = None,
) -> list[Node]:
    """Reconstruct inline nodes for ``tokens[start:end]``."""
    stop = len(tokens) if end is None else end
    nodes: list[Node] = []

    index = start
    while index < stop:
        token = tokens[index]
        token_type = token.type

        if token_type == "text":
            nodes.append(TextNode(key=state.next_key(), value=token.content))
        elif token_type in ("softbreak", "hardbreak"):
            nodes.append(BreakNode(key=state.next_key(), hard=token_type == "hardbreak"))
        elif token_type == "html_inline":
            nodes.append(HtmlNode(key=state.next_key(), value=token.content, block=False))
        elif token_type == "code_inline":
            nodes.append(
                CodeNode(
                    key=state.next_key(),
                    inline=True,
                    text=token.content,
                    attrs=attrs_to_record(token.attrs),
                )
            )
        elif token_type == "image":
            nodes.append(_image_node(token, state))
        elif is_open_token(token):
            close_index = find_close_index(
                tokens, index, stop, token_type, close_type_for(token_type)
            )
            if close_index is not None:
                children = build_inline_nodes(tokens, state, index + 1, close_index)
                nodes.append(
                    ElementNode(
                        key=state.next_key(),
                        name=node_name(token),
                        attrs=attrs_to_record(token.attrs),
                        children=children,
                        block=False,
                    )
                )
                index = close_index + 1
                continue
            if token.content:
                nodes.append(TextNode(key=state.next_key(), value=token.content))
        elif token.content:
            nodes.append(TextNode(key=state.next_key(), value=token.content))

        index += 1

    return nodes


def _image_node(token: Token, state: ParseState) -> ElementNode:
    attrs = attrs_to_record(token.attrs)
    if not attrs.get("alt") and token.content:
        attrs["alt"] = token.content
    return ElementNode(
        key=state.next_key(),
        name=token.tag or "img",
        attrs=attrs,
        children=[],
        block=False,
    )
