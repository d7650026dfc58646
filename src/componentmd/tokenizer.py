"""Build and configure the markdown-it tokenizer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from markdown_it import MarkdownIt
from mdit_py_plugins.container import container_plugin

from componentmd.component_blocks import ComponentRegistry
from componentmd.config import COMPONENTMD_MARKDOWN_IT_PRESET, DEFAULT_MARKDOWN_IT_OPTIONS
from componentmd.exceptions import PluginError

logger = logging.getLogger(__name__)

PluginCallable = Callable[..., Any]
PluginDescriptor = Union[PluginCallable, tuple[Any, ...], list[Any]]


@dataclass(frozen=True)
class TokenizerPlugin:
    """A markdown-it plugin and the positional params passed after ``md``."""

    plugin: PluginCallable
    params: tuple[Any, ...] = ()

    def apply(self, md: MarkdownIt) -> None:
        md.use(self.plugin, *self.params)


def normalize_plugin(descriptor: PluginDescriptor) -> TokenizerPlugin:
    """Turn ``plugin`` or ``(plugin, *params)`` into a TokenizerPlugin.

    Raises:
        PluginError: If the descriptor is empty or its plugin is not callable.
    """
    if isinstance(descriptor, TokenizerPlugin):
        return descriptor
    if isinstance(descriptor, (tuple, list)):
        if not descriptor:
            raise PluginError("Plugin descriptor tuple must not be empty")
        plugin, *params = descriptor
        if not callable(plugin):
            raise PluginError(f"Plugin {plugin!r} is not callable")
        return TokenizerPlugin(plugin=plugin, params=tuple(params))
    if callable(descriptor):
        return TokenizerPlugin(plugin=descriptor)
    raise PluginError(f"Unsupported plugin descriptor: {descriptor!r}")


def normalize_plugins(descriptors: Iterable[PluginDescriptor] | None) -> tuple[TokenizerPlugin, ...]:
    return tuple(normalize_plugin(descriptor) for descriptor in descriptors or ())


def create_markdown_it(
    registry: ComponentRegistry,
    *,
    markdown_it: MarkdownIt | None = None,
    options: Mapping[str, Any] | None = None,
    plugins: Iterable[TokenizerPlugin] = (),
) -> MarkdownIt:
    """Create (or take) a tokenizer and register containers and plugins on it.

    Args:
        registry: Normalized component blocks; one container rule is registered
            for every entry with container syntax enabled.
        markdown_it: Pre-built instance to configure instead of creating one.
        options: Overrides merged over ``DEFAULT_MARKDOWN_IT_OPTIONS``.
        plugins: Normalized plugins, applied in order after the containers.

    Returns:
        The configured MarkdownIt instance.
    """
    if markdown_it is None:
        md = MarkdownIt(
            COMPONENTMD_MARKDOWN_IT_PRESET,
            {**DEFAULT_MARKDOWN_IT_OPTIONS, **(options or {})},
        )
    else:
        md = markdown_it

    for name, block in registry.items():
        if not block.container:
            continue
        md.use(container_plugin, name)

    for plugin in plugins:
        logger.debug("Applying markdown-it plugin %r", plugin.plugin)
        plugin.apply(md)

    return md
