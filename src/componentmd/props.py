"""Parse raw component property strings into structured value maps.

The default parser tries three shapes in order:

1. A JSON object, when the string is wrapped in ``{`` and ``}``.
2. ``key=value`` pairs where values are double-quoted, single-quoted or bare.
3. A single scalar, returned as ``{"value": ...}``.

Values in the last two shapes are coerced: ``true``/``false``/``null``
become booleans/``None`` and plain decimal numbers become ``int`` or ``float``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, NamedTuple

from componentmd.schemas import Props, Syntax

logger = logging.getLogger(__name__)

_KEY_VALUE_RE = re.compile(
    r"""([A-Za-z_][A-Za-z0-9_-]*)=(?:"([^"]*)"|'([^']*)'|(\S+))"""
)
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


class PropsContext(NamedTuple):
    """Which component and syntax a props string belongs to."""

    name: str
    syntax: Syntax


PropsParser = Callable[[str, PropsContext], Props]


def default_parse_props(raw: str, context: PropsContext | None = None) -> Props:
    """Parse a raw props string using the JSON / key=value / scalar heuristic."""
    source = raw.strip()
    if not source:
        return {}

    json_props = _parse_json_props(source)
    if json_props is not None:
        return json_props

    kv_props = _parse_key_value_props(source)
    if kv_props:
        return kv_props

    return {"value": coerce_scalar(source)}


def coerce_scalar(value: str) -> Any:
    """Coerce a bare string to bool, None or a number when it looks like one."""
    trimmed = value.strip()
    if trimmed == "true":
        return True
    if trimmed == "false":
        return False
    if trimmed == "null":
        return None
    if _NUMBER_RE.fullmatch(trimmed):
        return float(trimmed) if "." in trimmed else int(trimmed)
    return trimmed


def _parse_json_props(source: str) -> Props | None:
    if not (source.startswith("{") and source.endswith("}")):
        return None
    try:
        parsed = json.loads(source, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.debug("Props %r are not valid JSON, trying key=value: %s", source, exc)
        return None
    if isinstance(parsed, dict):
        return parsed
    return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_key_value_props(source: str) -> Props:
    props: Props = {}
    for match in _KEY_VALUE_RE.finditer(source):
        key, dq_value, sq_value, bare_value = match.groups()
        if dq_value is not None:
            value = dq_value
        elif sq_value is not None:
            value = sq_value
        else:
            value = bare_value or ""
        props[key] = coerce_scalar(value)
    return props
