from embedvideo.model import (
    DailymotionImage,
    EmbedOptions,
    Provider,
    ResolvedVideo,
    Thumbnail,
    VimeoImage,
    YouTubeImage,
)


def test_resolved_video_to_json_uses_enum_values() -> None:
    res = ResolvedVideo(id="x1", provider=Provider.DAILYMOTION, url="https://dai.ly/x1")
    assert res.to_json()["provider"] == "dailymotion"


def test_thumbnail_html() -> None:
    thumb = Thumbnail(src="//i.vimeocdn.com/video/1_640.jpg")
    assert thumb.html == '<img src="//i.vimeocdn.com/video/1_640.jpg"/>'
    assert thumb.to_json() == {"src": thumb.src, "html": thumb.html}


def test_image_size_parse_defaults() -> None:
    assert YouTubeImage.parse(None) == YouTubeImage.DEFAULT
    assert YouTubeImage.parse("maxresdefault") == YouTubeImage.MAXRESDEFAULT
    assert VimeoImage.parse("huge") == VimeoImage.LARGE
    assert VimeoImage.parse("thumbnail_small") == VimeoImage.SMALL
    assert DailymotionImage.parse(123) == DailymotionImage.SIZE_480
    assert DailymotionImage.parse("thumbnail_1080_url") == DailymotionImage.SIZE_1080


def test_embed_options_coerce() -> None:
    assert EmbedOptions.coerce(None) == EmbedOptions()
    opts = EmbedOptions.coerce({"query": {"a": "1"}})
    assert opts.query == {"a": "1"}
    assert opts.attr is None
    merged = opts.with_query_defaults({"offerviewer": True, "a": "0"})
    assert merged.query == {"offerviewer": True, "a": "1"}


def test_image_size_parse_requires_exact_names() -> None:
    assert YouTubeImage.parse(" hqdefault ") == YouTubeImage.DEFAULT
    assert VimeoImage.parse("THUMBNAIL_SMALL") == VimeoImage.LARGE
    assert YouTubeImage.parse(YouTubeImage.SDDEFAULT) is YouTubeImage.SDDEFAULT
