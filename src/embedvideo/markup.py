from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from .model import EmbedOptions

# Same unreserved set as encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

IFRAME_FLAGS = 'frameborder="0" webkitallowfullscreen mozallowfullscreen allowfullscreen'


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_component(value: Any) -> str:
    return quote(_stringify(value), safe=_URI_COMPONENT_SAFE)


def serialize_query(query: Mapping[str, Any]) -> str:
    return "&".join(f"{encode_component(k)}={encode_component(v)}" for k, v in query.items())


def serialize_attributes(attr: Mapping[str, Any]) -> str:
    return " ".join(f'{k}="{html.escape(_stringify(v), quote=True)}"' for k, v in attr.items())


def query_suffix(options: EmbedOptions, *, separator: str = "?") -> str:
    if options.query is None:
        return ""
    return separator + serialize_query(options.query)


def attribute_suffix(options: EmbedOptions) -> str:
    if options.attr is None:
        return ""
    return " " + serialize_attributes(options.attr)


def render_iframe(src: str, options: EmbedOptions, *, query_separator: str = "?") -> str:
    return (
        f'<iframe src="{src}{query_suffix(options, separator=query_separator)}"'
        f"{attribute_suffix(options)} {IFRAME_FLAGS}></iframe>"
    )
