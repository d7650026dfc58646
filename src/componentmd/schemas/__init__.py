"""Shared schemas for componentmd."""

from componentmd.schemas.nodes import (
    BreakNode,
    CodeNode,
    ComponentNode,
    ElementNode,
    HtmlNode,
    Node,
    Props,
    Root,
    Syntax,
    TextNode,
)

__all__ = [
    "BreakNode",
    "CodeNode",
    "ComponentNode",
    "ElementNode",
    "HtmlNode",
    "Node",
    "Props",
    "Root",
    "Syntax",
    "TextNode",
]
