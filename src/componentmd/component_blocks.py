"""Normalize component block configuration into an immutable registry."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Union

from componentmd.exceptions import ConfigurationError
from componentmd.props import PropsParser, default_parse_props


@dataclass(frozen=True)
class ComponentBlockConfig:
    """User-facing component block settings; unset fields take the defaults."""

    container: bool | None = None
    fence: bool | None = None
    parse_fence_body_as_markdown: bool | None = None
    parse_props: PropsParser | None = None


@dataclass(frozen=True)
class ComponentBlock:
    """Fully defaulted component block settings.

    Attributes:
        container: Recognize ``::: Name`` container blocks.
        fence: Recognize ```` ```component:Name ```` fences.
        parse_fence_body_as_markdown: Re-parse the fence body as markdown children.
        parse_props: Converts the raw props string into a value map.
    """

    container: bool = True
    fence: bool = True
    parse_fence_body_as_markdown: bool = False
    parse_props: PropsParser = default_parse_props


ComponentBlocks = Mapping[str, Union[bool, ComponentBlockConfig, Mapping[str, Any]]]
ComponentRegistry = Mapping[str, ComponentBlock]

_CONFIG_FIELDS = frozenset(f.name for f in fields(ComponentBlockConfig))


def normalize_component_blocks(
    component_blocks: ComponentBlocks | None,
) -> ComponentRegistry:
    """Build the registry consulted during reconstruction.

    Entries set to ``False`` (or any falsy value) are dropped, ``True`` enables
    every default, and a config record or plain mapping overrides individual
    fields.

    Raises:
        ConfigurationError: If an entry is neither a bool nor a block config, or a
            mapping carries unknown keys.
    """
    normalized: dict[str, ComponentBlock] = {}
    for name, entry in (component_blocks or {}).items():
        if not entry:
            continue
        if entry is True:
            normalized[name] = ComponentBlock()
            continue
        config = _coerce_config(name, entry)
        normalized[name] = ComponentBlock(
            container=_pick(config.container, True),
            fence=_pick(config.fence, True),
            parse_fence_body_as_markdown=_pick(config.parse_fence_body_as_markdown, False),
            parse_props=config.parse_props or default_parse_props,
        )
    return MappingProxyType(normalized)


def infer_component_blocks_from_map(
    components: Mapping[str, Any],
) -> dict[str, ComponentBlockConfig]:
    """Treat every name starting with an uppercase letter as a component block."""
    return {
        name: ComponentBlockConfig(
            container=True, fence=True, parse_fence_body_as_markdown=False
        )
        for name in components
        if _is_component_name(name)
    }


def _coerce_config(name: str, entry: Any) -> ComponentBlockConfig:
    if isinstance(entry, ComponentBlockConfig):
        return entry
    if isinstance(entry, Mapping):
        unknown = set(entry) - _CONFIG_FIELDS
        if unknown:
            raise ConfigurationError(
                f"Unknown settings for component block {name!r}: {sorted(unknown)}"
            )
        return ComponentBlockConfig(**entry)
    raise ConfigurationError(
        f"Component block {name!r} must be True or a block config, got {type(entry).__name__}"
    )


def _pick(value: bool | None, default: bool) -> bool:
    return default if value is None else bool(value)


def _is_component_name(name: str) -> bool:
    return bool(name) and "A" <= name[0] <= "Z"
