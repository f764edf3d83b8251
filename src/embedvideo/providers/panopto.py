from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import UsageError
from ..markup import render_iframe
from ..model import EmbedOptions, PanoptoOption, Provider
from ..urls import ParsedURL, parse_url

logger = logging.getLogger(__name__)

PROVIDER = Provider.PANOPTO
EMBED_PATH = "/Panopto/Pages/Embed.aspx?tid="

_KNOWN_QUERY_KEYS = {o.value for o in PanoptoOption}
_QUERY_DEFAULTS = {PanoptoOption.OFFERVIEWER.value: True}


def matches(url: ParsedURL) -> bool:
    return url.hostname.endswith("panopto.com")


def extract_id(url: ParsedURL) -> str | None:
    return url.query.get("tid")


def render(
    video_id: str | None,
    options: EmbedOptions | Mapping[str, Any] | None = None,
    source_url: str | None = None,
) -> str:
    """Render a Panopto viewer iframe.

    Panopto is hosted per customer, so the player host is taken from
    ``source_url``. ``offerviewer=true`` is always sent unless the caller
    sets ``offerviewer`` explicitly.
    """
    parsed = parse_url(source_url) if source_url else None
    if parsed is None or not parsed.hostname:
        raise UsageError("Panopto embeds need the source URL to find the host.", stage="Embed")
    opts = EmbedOptions.coerce(options)
    unknown = sorted(set(opts.query or {}) - _KNOWN_QUERY_KEYS)
    if unknown:
        logger.debug("Passing unrecognized Panopto player options: %s", ", ".join(unknown))
    opts = opts.with_query_defaults(_QUERY_DEFAULTS)
    src = f"https://{parsed.hostname}{EMBED_PATH}{video_id or ''}"
    # The base already carries ?tid=, so extra pairs continue with "&".
    return render_iframe(src, opts, query_separator="&")
