"""Tests for tree traversal helpers."""

from __future__ import annotations

from componentmd import create_parser, find_components, iter_nodes, text_content
from componentmd.schemas import ElementNode, TextNode


class TestTreeHelpers:
    """Tests for iter_nodes, text_content and find_components."""

    def test_iter_nodes_is_preorder(self) -> None:
        root = create_parser()("# A\n\nb *c*")

        kinds = [(n.kind, getattr(n, "name", getattr(n, "value", None))) for n in iter_nodes(root)]

        assert kinds == [
            ("element", "h1"),
            ("text", "A"),
            ("element", "p"),
            ("text", "b "),
            ("element", "em"),
            ("text", "c"),
        ]

    def test_iter_nodes_accepts_single_node_and_lists(self) -> None:
        root = create_parser()("# A\n\nb")
        heading = root.children[0]

        assert [n.key for n in iter_nodes(heading)] == [heading.key, heading.children[0].key]
        assert len(list(iter_nodes(root.children))) == len(list(iter_nodes(root)))

    def test_text_content(self) -> None:
        node = ElementNode(
            key="n_0",
            name="p",
            children=[TextNode(key="n_1", value="a"), TextNode(key="n_2", value="b")],
        )

        assert text_content(node) == "ab"

    def test_find_components(self) -> None:
        parser = create_parser(component_blocks={"Alert": True})
        root = parser(
            "::: Alert\n```component:Chart\n```\n:::\n\n```component:Chart a=1\n```"
        )

        assert [c.name for c in find_components(root)] == ["Alert", "Chart", "Chart"]
        assert [c.props for c in find_components(root, "Chart")] == [{}, {"a": 1}]
