"""Helpers for working with markdown-it token streams."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from markdown_it.token import Token

_CONTAINER_PREFIX = "container_"
_OPEN_SUFFIX = "_open"
_CLOSE_SUFFIX = "_close"


def is_open_token(token: Token) -> bool:
    return token.nesting == 1 and token.type.endswith(_OPEN_SUFFIX)


def close_type_for(open_type: str) -> str:
    """Map ``strong_open`` to ``strong_close``; other types map to themselves."""
    if not open_type.endswith(_OPEN_SUFFIX):
        return open_type
    return open_type[: -len(_OPEN_SUFFIX)] + _CLOSE_SUFFIX


def container_name(token_type: str) -> str | None:
    """Return ``Alert`` for ``container_Alert_open``, else None."""
    if not (token_type.startswith(_CONTAINER_PREFIX) and token_type.endswith(_OPEN_SUFFIX)):
        return None
    name = token_type[len(_CONTAINER_PREFIX) : -len(_OPEN_SUFFIX)]
    return name or None


def find_close_index(
    tokens: Sequence[Token],
    start: int,
    end: int,
    open_type: str,
    close_type: str,
) -> int | None:
    """Find the close token balancing the open token at ``start``.

    Only ``open_type`` and ``close_type`` move the depth counter; other token
    types in between are ignored.

    Args:
        tokens: Token stream.
        start: Index of the open token.
        end: Exclusive upper bound of the search.
        open_type: Type of the open token.
        close_type: Type of the matching close token.

    Returns:
        Index of the matching close token, or None if the range ends first.
    """
    depth = 0
    for index in range(start, end):
        token_type = tokens[index].type
        if token_type == open_type:
            depth += 1
        elif token_type == close_type:
            depth -= 1
            if depth == 0:
                return index
    return None


def node_name(token: Token) -> str:
    """Tag name for an element, falling back to the token type without suffix."""
    if token.tag:
        return token.tag
    token_type = token.type
    if token_type.endswith(_OPEN_SUFFIX):
        return token_type[: -len(_OPEN_SUFFIX)]
    if token_type.endswith(_CLOSE_SUFFIX):
        return token_type[: -len(_CLOSE_SUFFIX)]
    return token_type


def attrs_to_record(attrs: Mapping[str, Any] | None) -> dict[str, str]:
    """Copy token attributes, stringifying values such as ordered list ``start``."""
    if not attrs:
        return {}
    return {str(name): str(value) for name, value in attrs.items()}
