from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

from ..markup import render_iframe
from ..model import EmbedOptions, Provider, Thumbnail, YouTubeImage
from ..remote import Callback, completed
from ..shared import split_image_args
from ..urls import ParsedURL

PROVIDER = Provider.YOUTUBE
EMBED_BASE = "//www.youtube-nocookie.com/embed/"
THUMBNAIL_BASE = "//img.youtube.com/vi/"


def matches(url: ParsedURL) -> bool:
    return "youtube.com" in url.hostname or url.hostname == "youtu.be"


def extract_id(url: ParsedURL) -> str | None:
    if "youtube.com" in url.hostname:
        return url.query.get("v")
    return url.segment(1)


def render(
    video_id: str | None,
    options: EmbedOptions | Mapping[str, Any] | None = None,
    source_url: str | None = None,
) -> str:
    _ = source_url
    return render_iframe(f"{EMBED_BASE}{video_id or ''}", EmbedOptions.coerce(options))


def thumbnail_src(video_id: str | None, size: Any = None) -> str:
    image = YouTubeImage.parse(size)
    return f"{THUMBNAIL_BASE}{video_id or ''}/{image.value}.jpg"


def image(video_id: str | None, options: Any = None, callback: Callback | None = None) -> Future:
    opts, callback = split_image_args(options, callback)
    thumb = Thumbnail(src=thumbnail_src(video_id, opts.get("image")))
    return completed(thumb, callback)
