from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

from ..errors import UpstreamError, UsageError
from ..markup import render_iframe
from ..model import DailymotionImage, EmbedOptions, Provider, Thumbnail
from ..remote import Callback, fetch_json, submit
from ..shared import split_image_args
from ..urls import ParsedURL

PROVIDER = Provider.DAILYMOTION
EMBED_BASE = "//www.dailymotion.com/embed/video/"
API_URL = "https://api.dailymotion.com/video/{id}"


def matches(url: ParsedURL) -> bool:
    return "dailymotion.com" in url.hostname or url.hostname == "dai.ly"


def extract_id(url: ParsedURL) -> str | None:
    if "dailymotion.com" in url.hostname:
        # /video/x2jvvep_some-title -> x2jvvep
        slug = url.segment(2)
        return slug.split("_")[0] if slug is not None else None
    return url.segment(1)


def render(
    video_id: str | None,
    options: EmbedOptions | Mapping[str, Any] | None = None,
    source_url: str | None = None,
) -> str:
    _ = source_url
    return render_iframe(f"{EMBED_BASE}{video_id or ''}", EmbedOptions.coerce(options))


def fetch_thumbnail(
    video_id: str, size: DailymotionImage, *, timeout: float | None = None
) -> Thumbnail:
    body = fetch_json(
        API_URL.format(id=video_id),
        provider=PROVIDER,
        params={"fields": size.value},
        timeout=timeout,
    )
    value = body.get(size.value) if isinstance(body, dict) else None
    if not value:
        raise UpstreamError(f"no image found for dailymotion.com/{video_id}", provider=PROVIDER)
    return Thumbnail(src=str(value))


def image(video_id: str | None, options: Any = None, callback: Callback | None = None) -> Future:
    opts, callback = split_image_args(options, callback)
    if callback is None:
        raise UsageError("Dailymotion thumbnails need a callback.", stage="Thumbnail")
    size = DailymotionImage.parse(opts.get("image"))
    timeout = opts.get("timeout")
    return submit(lambda: fetch_thumbnail(video_id or "", size, timeout=timeout), callback)
