from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

from .model import EmbedOptions, ResolvedVideo
from .providers.detect import detect
from .registry import get_entry
from .remote import Callback, completed
from .shared import split_image_args

logger = logging.getLogger(__name__)


def info(url: str) -> ResolvedVideo | None:
    """Identify the provider behind ``url`` and its native video id."""
    return detect(url)


# Older releases called this videoSource.
video_source = info


def embed(url: str, options: EmbedOptions | Mapping[str, Any] | None = None) -> str | None:
    """Render the player iframe for ``url``, or ``None`` when no provider matches."""
    res = info(url)
    if res is None:
        return None
    return get_entry(res.provider).render(res.id, options, url)


def image(url: str, options: Any = None, callback: Callback | None = None) -> Future:
    """Look up the thumbnail for ``url``.

    Returns a future resolving to a :class:`~embedvideo.model.Thumbnail`, or
    to ``None`` when the URL is not recognised or its provider has no
    thumbnails. ``callback(error, thumbnail)`` is invoked on completion if
    given. Vimeo and Dailymotion require it and raise
    :class:`~embedvideo.errors.UsageError` without it.
    """
    opts, callback = split_image_args(options, callback)
    res = info(url)
    if res is None:
        logger.debug("No provider for %s", url)
        return completed(None, callback)
    entry = get_entry(res.provider)
    if entry.thumbnail is None:
        logger.debug("%s has no thumbnail lookup", res.provider.value)
        return completed(None, callback)
    return entry.thumbnail(res.id, opts, callback)
