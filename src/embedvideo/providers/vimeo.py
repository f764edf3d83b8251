from __future__ import annotations

import re
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any

from ..errors import UpstreamError, UsageError
from ..markup import render_iframe
from ..model import EmbedOptions, Provider, Thumbnail, VimeoImage
from ..remote import Callback, fetch_json, submit
from ..shared import split_image_args
from ..urls import ParsedURL

PROVIDER = Provider.VIMEO
EMBED_BASE = "//player.vimeo.com/video/"
API_URL = "https://vimeo.com/api/v2/video/{id}.json"

_PATH_RE = re.compile(r"^(?:/video|/channels/[\w-]+|/groups/[\w-]+/videos)?/(\d+)")


def matches(url: ParsedURL) -> bool:
    return url.hostname == "vimeo.com" and _PATH_RE.match(url.path) is not None


def extract_id(url: ParsedURL) -> str | None:
    match = _PATH_RE.match(url.path)
    return match.group(1) if match else None


def render(
    video_id: str | None,
    options: EmbedOptions | Mapping[str, Any] | None = None,
    source_url: str | None = None,
) -> str:
    _ = source_url
    return render_iframe(f"{EMBED_BASE}{video_id or ''}", EmbedOptions.coerce(options))


def fetch_thumbnail(video_id: str, size: VimeoImage, *, timeout: float | None = None) -> Thumbnail:
    body = fetch_json(API_URL.format(id=video_id), provider=PROVIDER, timeout=timeout)
    entry = body[0] if isinstance(body, list) and body else None
    value = entry.get(size.value) if isinstance(entry, dict) else None
    if not value:
        raise UpstreamError(f"no image found for vimeo.com/{video_id}", provider=PROVIDER)
    # The v2 API reports "https://..." and only the part after the scheme is kept.
    parts = str(value).split(":")
    return Thumbnail(src=parts[1] if len(parts) > 1 else "")


def image(video_id: str | None, options: Any = None, callback: Callback | None = None) -> Future:
    opts, callback = split_image_args(options, callback)
    if callback is None:
        raise UsageError("Vimeo thumbnails need a callback.", stage="Thumbnail")
    size = VimeoImage.parse(opts.get("image"))
    timeout = opts.get("timeout")
    return submit(lambda: fetch_thumbnail(video_id or "", size, timeout=timeout), callback)
