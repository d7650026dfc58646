"""Rebuild the block-level tree from a flat markdown-it token stream."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from markdown_it.token import Token

from componentmd.component_spec import extract_container_props_raw
from componentmd.leaf import build_leaf_nodes
from componentmd.props import PropsContext
from componentmd.schemas import ComponentNode, ElementNode, Node
from componentmd.state import ParseState
from componentmd.tokens import (
    attrs_to_record,
    close_type_for,
    container_name,
    find_close_index,
    is_open_token,
    node_name,
)

logger = logging.getLogger(__name__)


def build_block_nodes(
    tokens: Sequence[Token],
    state: ParseState,
    start: int = 0,
    end: int | None = None,
) -> list[Node]:
    """Reconstruct block nodes for ``tokens[start:end]``.

    The scan is iterative; recursion happens once per nesting level when an
    open token's interior range is rebuilt.
    """
    stop = len(tokens) if end is None else end
    nodes: list[Node] = []

    index = start
    while index < stop:
        token = tokens[index]

        if token.hidden and token.nesting != 0:
            index += 1
            continue

        if is_open_token(token):
            component, next_index = _build_container_component(tokens, index, stop, state)
            if component is not None:
                nodes.append(component)
                index = next_index
                continue

            close_index = find_close_index(
                tokens, index, stop, token.type, close_type_for(token.type)
            )
            if close_index is None:
                logger.debug("Skipping unmatched %s at token %d", token.type, index)
                index += 1
                continue

            children = build_block_nodes(tokens, state, index + 1, close_index)
            if token.hidden:
                nodes.extend(children)
            else:
                nodes.append(
                    ElementNode(
                        key=state.next_key(),
                        name=node_name(token),
                        attrs=attrs_to_record(token.attrs),
                        children=children,
                        block=token.block,
                    )
                )
            index = close_index + 1
            continue

        if token.nesting == 0:
            nodes.extend(build_leaf_nodes(token, state))

        index += 1

    return nodes


def _build_container_component(
    tokens: Sequence[Token],
    index: int,
    stop: int,
    state: ParseState,
) -> tuple[ComponentNode | None, int]:
    token = tokens[index]
    name = container_name(token.type)
    if name is None:
        return None, index

    config = state.registry.get(name)
    if config is None or not config.container:
        return None, index

    close_index = find_close_index(tokens, index, stop, token.type, f"container_{name}_close")
    if close_index is None:
        return None, index

    props_raw = extract_container_props_raw(name, token.info)
    props = config.parse_props(props_raw, PropsContext(name=name, syntax="container"))
    component = ComponentNode(
        key=state.next_key(),
        name=name,
        syntax="container",
        props=props,
        children=build_block_nodes(tokens, state, index + 1, close_index),
    )
    return component, close_index + 1
