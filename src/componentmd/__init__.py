"""componentmd: parse markdown into a component-aware node tree."""

from componentmd.component_blocks import (
    ComponentBlock,
    ComponentBlockConfig,
    infer_component_blocks_from_map,
    normalize_component_blocks,
)
from componentmd.config import ParseOptions
from componentmd.exceptions import ComponentmdError, ConfigurationError, PluginError
from componentmd.parser import MarkdownParser, create_parser, parse_markdown
from componentmd.props import PropsContext, coerce_scalar, default_parse_props
from componentmd.schemas import (
    BreakNode,
    CodeNode,
    ComponentNode,
    ElementNode,
    HtmlNode,
    Node,
    Root,
    TextNode,
)
from componentmd.tokenizer import TokenizerPlugin
from componentmd.tree import find_components, iter_nodes, text_content

__all__ = [
    "BreakNode",
    "CodeNode",
    "ComponentBlock",
    "ComponentBlockConfig",
    "ComponentNode",
    "ComponentmdError",
    "ConfigurationError",
    "ElementNode",
    "HtmlNode",
    "MarkdownParser",
    "Node",
    "ParseOptions",
    "PluginError",
    "PropsContext",
    "Root",
    "TextNode",
    "TokenizerPlugin",
    "coerce_scalar",
    "create_parser",
    "default_parse_props",
    "find_components",
    "infer_component_blocks_from_map",
    "iter_nodes",
    "normalize_component_blocks",
    "parse_markdown",
    "text_content",
]
