from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, TypeVar


class Provider(str, Enum):
    # Declaration order is detection priority.
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    DAILYMOTION = "dailymotion"
    LOOM = "loom"
    PANOPTO = "panopto"


_S = TypeVar("_S", bound="_ImageSize")


class _ImageSize(str, Enum):
    @classmethod
    def default(cls: type[_S]) -> _S:
        """Size used when none, or an unknown one, is requested. Each subclass names its own."""
        raise NotImplementedError(f"{cls.__name__} does not define a default size")

    @classmethod
    def parse(cls: type[_S], value: Any) -> _S:
        """Map a user supplied size name to a member, falling back to the default.

        Only exact size names match.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.default()


class YouTubeImage(_ImageSize):
    DEFAULT = "default"
    MQDEFAULT = "mqdefault"
    HQDEFAULT = "hqdefault"
    SDDEFAULT = "sddefault"
    MAXRESDEFAULT = "maxresdefault"

    @classmethod
    def default(cls) -> "YouTubeImage":
        return cls.DEFAULT


class VimeoImage(_ImageSize):
    SMALL = "thumbnail_small"
    MEDIUM = "thumbnail_medium"
    LARGE = "thumbnail_large"

    @classmethod
    def default(cls) -> "VimeoImage":
        return cls.LARGE


class DailymotionImage(_ImageSize):
    SIZE_60 = "thumbnail_60_url"
    SIZE_120 = "thumbnail_120_url"
    SIZE_180 = "thumbnail_180_url"
    SIZE_240 = "thumbnail_240_url"
    SIZE_360 = "thumbnail_360_url"
    SIZE_480 = "thumbnail_480_url"
    SIZE_720 = "thumbnail_720_url"
    SIZE_1080 = "thumbnail_1080_url"

    @classmethod
    def default(cls) -> "DailymotionImage":
        return cls.SIZE_480


class LoomOption(str, Enum):
    HIDE_OWNER = "hide_owner"
    HIDE_SHARE = "hide_share"
    HIDE_TITLE = "hide_title"
    HIDE_EMBED_TOP_BAR = "hideEmbedTopBar"


class PanoptoOption(str, Enum):
    AUTOPLAY = "autoplay"
    OFFERVIEWER = "offerviewer"
    SHOWTITLE = "showtitle"
    SHOWBRAND = "showbrand"
    CAPTIONS = "captions"
    INTERACTIVITY = "interactivity"


@dataclass(frozen=True)
class ResolvedVideo:
    id: str | None
    provider: Provider
    url: str

    def to_json(self) -> dict[str, Any]:
        return {"id": self.id, "provider": self.provider.value, "url": self.url}


@dataclass(frozen=True)
class EmbedOptions:
    query: Mapping[str, Any] | None = None
    attr: Mapping[str, Any] | None = None

    @classmethod
    def coerce(cls, value: "EmbedOptions | Mapping[str, Any] | None") -> "EmbedOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(query=value.get("query"), attr=value.get("attr"))
        raise TypeError(f"Unsupported embed options: {type(value).__name__}")

    def with_query_defaults(self, defaults: Mapping[str, Any]) -> "EmbedOptions":
        query: dict[str, Any] = dict(defaults)
        query.update(self.query or {})
        return EmbedOptions(query=query, attr=self.attr)


@dataclass(frozen=True)
class Thumbnail:
    src: str

    @property
    def html(self) -> str:
        return f'<img src="{self.src}"/>'

    def to_json(self) -> dict[str, str]:
        return {"src": self.src, "html": self.html}


JsonDict = dict[str, Any]
LogLevel = Literal["quiet", "normal", "verbose", "debug"]
