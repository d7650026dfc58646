"""Tree node models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

Syntax = Literal["container", "fence"]
Props = dict[str, Any]


class _Node(BaseModel):
    """Common base for every emitted node."""

    model_config = ConfigDict(frozen=True)

    key: str


class TextNode(_Node):
    """Literal text."""

    kind: Literal["text"] = "text"
    value: str


class BreakNode(_Node):
    """Soft or hard line break."""

    kind: Literal["break"] = "break"
    hard: bool = False


class HtmlNode(_Node):
    """Raw markup, either a block or an inline span."""

    kind: Literal["html"] = "html"
    value: str
    block: bool = False


class ElementNode(_Node):
    """Generic tag-shaped node (headings, paragraphs, emphasis, links, lists, images)."""

    kind: Literal["element"] = "element"
    name: str
    attrs: dict[str, str] = Field(default_factory=dict)
    children: list[Node] = Field(default_factory=list)
    block: bool = False


class CodeNode(_Node):
    """Inline code span or fenced/indented code block."""

    kind: Literal["code"] = "code"
    inline: bool
    text: str
    lang: str | None = None
    info: str | None = None
    attrs: dict[str, str] = Field(default_factory=dict)


class ComponentNode(_Node):
    """Named, prop-carrying block addressed to an externally registered component.

    ``source`` holds the raw fence body for fence syntax; container syntax never
    sets it.
    """

    kind: Literal["component"] = "component"
    name: str
    syntax: Syntax
    props: Props = Field(default_factory=dict)
    children: list[Node] = Field(default_factory=list)
    source: str | None = None


Node = Annotated[
    Union[TextNode, BreakNode, HtmlNode, ElementNode, CodeNode, ComponentNode],
    Field(discriminator="kind"),
]


class Root(BaseModel):
    """Root of one parsed document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["root"] = "root"
    children: list[Node] = Field(default_factory=list)


ElementNode.model_rebuild()
ComponentNode.model_rebuild()
Root.model_rebuild()
