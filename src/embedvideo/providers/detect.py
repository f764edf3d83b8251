from __future__ import annotations

import logging

from ..model import ResolvedVideo
from ..registry import PROVIDERS
from ..urls import parse_url

logger = logging.getLogger(__name__)


def detect(url: str) -> ResolvedVideo | None:
    """Return the provider and native id for ``url``, or ``None``.

    Providers are tried in a fixed order and the first whose host rules
    match wins, even when the id it extracts is empty.
    """
    parsed = parse_url(url)
    if parsed is None:
        logger.debug("Could not parse %r", url)
        return None
    for entry in PROVIDERS:
        if not entry.matches(parsed):
            continue
        video_id = entry.extract_id(parsed)
        logger.debug("Detected %s id=%r in %s", entry.provider.value, video_id, parsed.href)
        return ResolvedVideo(id=video_id, provider=entry.provider, url=parsed.href)
    return None
