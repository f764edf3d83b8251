from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..markup import render_iframe
from ..model import EmbedOptions, LoomOption, Provider
from ..urls import ParsedURL

logger = logging.getLogger(__name__)

PROVIDER = Provider.LOOM
EMBED_BASE = "https://www.loom.com/embed/"

_KNOWN_QUERY_KEYS = {o.value for o in LoomOption}


def matches(url: ParsedURL) -> bool:
    return "loom.com" in url.hostname


def extract_id(url: ParsedURL) -> str | None:
    return url.segment(2)


def render(
    video_id: str | None,
    options: EmbedOptions | Mapping[str, Any] | None = None,
    source_url: str | None = None,
) -> str:
    _ = source_url
    opts = EmbedOptions.coerce(options)
    unknown = sorted(set(opts.query or {}) - _KNOWN_QUERY_KEYS)
    if unknown:
        logger.debug("Passing unrecognized Loom player options: %s", ", ".join(unknown))
    return render_iframe(f"{EMBED_BASE}{video_id or ''}", opts)
