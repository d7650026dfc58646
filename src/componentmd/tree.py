"""Traversal helpers for parsed trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

from pydantic import BaseModel

from componentmd.schemas import ComponentNode, Node, Root, TextNode

TreeLike = Union[Root, Node, Iterable[Node]]


def iter_nodes(tree: TreeLike) -> Iterator[Node]:
    """Yield nodes depth-first in document order. The root itself is not yielded."""
    if isinstance(tree, Root):
        stack = list(reversed(tree.children))
    elif isinstance(tree, BaseModel):
        stack = [tree]
    else:
        stack = list(reversed(list(tree)))

    while stack:
        node = stack.pop()
        yield node
        children = getattr(node, "children", None)
        if children:
            stack.extend(reversed(children))


def text_content(tree: TreeLike) -> str:
    """Concatenate the values of all text nodes under ``tree``."""
    return "".join(node.value for node in iter_nodes(tree) if isinstance(node, TextNode))


def find_components(tree: TreeLike, name: str | None = None) -> list[ComponentNode]:
    """Collect component nodes, optionally restricted to one name."""
    return [
        node
        for node in iter_nodes(tree)
        if isinstance(node, ComponentNode) and (name is None or node.name == name)
    ]
