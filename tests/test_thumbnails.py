from typing import Any

import pytest
import requests

import embedvideo
from embedvideo.errors import TransportError, UpstreamError, UsageError
from embedvideo.model import Thumbnail
from embedvideo.providers import dailymotion, vimeo, youtube


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class Recorder:
    def __init__(self, response: Any = None) -> None:
        self.response = response
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


class Outcome:
    def __init__(self) -> None:
        self.calls: list[tuple[Exception | None, Any]] = []

    def __call__(self, error: Exception | None, result: Any) -> None:
        self.calls.append((error, result))


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch) -> Recorder:
    recorder = Recorder()
    monkeypatch.setattr("embedvideo.remote.requests.get", recorder)
    return recorder


def test_youtube_thumbnail_is_immediate() -> None:
    future = youtube.image("abc123")
    assert future.done()
    thumb = future.result()
    assert thumb.src == "//img.youtube.com/vi/abc123/default.jpg"
    assert thumb.html == '<img src="//img.youtube.com/vi/abc123/default.jpg"/>'


@pytest.mark.parametrize(
    ("requested", "expected"),
    [
        # "default" was once rejected as invalid and replaced by "default";
        # either way the URL must name default.jpg.
        ("default", "default"),
        ("mqdefault", "mqdefault"),
        ("maxresdefault", "maxresdefault"),
        ("huge", "default"),
        (None, "default"),
    ],
)
def test_youtube_image_sizes(requested: str | None, expected: str) -> None:
    thumb = youtube.image("abc", {"image": requested}).result()
    assert thumb.src == f"//img.youtube.com/vi/abc/{expected}.jpg"


def test_youtube_callback_form() -> None:
    done = Outcome()
    thumb = youtube.image("abc", done).result(timeout=5)
    assert done.calls == [(None, thumb)]


@pytest.mark.parametrize("module", [vimeo, dailymotion])
def test_remote_providers_require_callback(module, fake_get: Recorder) -> None:
    with pytest.raises(UsageError):
        module.image("123")
    with pytest.raises(UsageError):
        embedvideo.image(f"https://{'vimeo.com/123' if module is vimeo else 'dai.ly/x1'}")
    assert fake_get.calls == []


def test_vimeo_thumbnail(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(
        200, [{"thumbnail_medium": "https://i.vimeocdn.com/video/452001751_200x150.jpg"}]
    )
    done = Outcome()
    future = embedvideo.image("https://vimeo.com/76979871", {"image": "thumbnail_medium"}, done)
    thumb = future.result(timeout=5)
    assert thumb == Thumbnail(src="//i.vimeocdn.com/video/452001751_200x150.jpg")
    assert done.calls == [(None, thumb)]
    url, kwargs = fake_get.calls[0]
    assert url == "https://vimeo.com/api/v2/video/76979871.json"
    assert kwargs["timeout"] == 15.0


def test_vimeo_defaults_to_large(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(200, [{"thumbnail_large": "https://i.vimeocdn.com/l.jpg"}])
    thumb = vimeo.image("1", {"image": "bogus"}, Outcome()).result(timeout=5)
    assert thumb.src == "//i.vimeocdn.com/l.jpg"


def test_vimeo_non_200_goes_to_callback(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(404, None)
    done = Outcome()
    future = vimeo.image("1", done)
    with pytest.raises(UpstreamError, match="unexpected response from vimeo"):
        future.result(timeout=5)
    error, result = done.calls[0]
    assert isinstance(error, UpstreamError)
    assert error.status == 404
    assert result is None


def test_vimeo_missing_field(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(200, [{}])
    done = Outcome()
    with pytest.raises(UpstreamError, match="no image found for vimeo.com/1"):
        vimeo.image("1", done).result(timeout=5)
    assert isinstance(done.calls[0][0], UpstreamError)


def test_vimeo_bad_json(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(200, ValueError("not json"))
    with pytest.raises(UpstreamError, match="no image found"):
        vimeo.image("1", Outcome()).result(timeout=5)


def test_transport_failure_goes_to_callback(fake_get: Recorder) -> None:
    fake_get.response = requests.ConnectionError("boom")
    done = Outcome()
    future = dailymotion.image("x1", done)
    with pytest.raises(TransportError):
        future.result(timeout=5)
    assert isinstance(done.calls[0][0], TransportError)


def test_dailymotion_thumbnail(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(200, {"thumbnail_720_url": "https://s1.dmcdn.net/x1/720.jpg"})
    done = Outcome()
    future = embedvideo.image(
        "https://www.dailymotion.com/video/x1_title", {"image": "thumbnail_720_url", "timeout": 3}, done
    )
    thumb = future.result(timeout=5)
    assert thumb.src == "https://s1.dmcdn.net/x1/720.jpg"
    assert thumb.html == '<img src="https://s1.dmcdn.net/x1/720.jpg"/>'
    url, kwargs = fake_get.calls[0]
    assert url == "https://api.dailymotion.com/video/x1"
    assert kwargs["params"] == {"fields": "thumbnail_720_url"}
    assert kwargs["timeout"] == 3


def test_dailymotion_missing_field(fake_get: Recorder) -> None:
    fake_get.response = FakeResponse(200, {"id": "x1"})
    with pytest.raises(UpstreamError, match="no image found for dailymotion.com/x1"):
        dailymotion.image("x1", Outcome()).result(timeout=5)


def test_unsupported_url_completes_without_result(fake_get: Recorder) -> None:
    done = Outcome()
    future = embedvideo.image("https://example.com/video/1", done)
    assert future.result(timeout=5) is None
    assert done.calls == [(None, None)]
    assert fake_get.calls == []


def test_unsupported_url_without_callback() -> None:
    assert embedvideo.image("https://example.com/video/1").result() is None


def test_loom_has_no_thumbnail(fake_get: Recorder) -> None:
    done = Outcome()
    future = embedvideo.image("https://www.loom.com/share/abc", {}, done)
    assert future.result(timeout=5) is None
    assert done.calls == [(None, None)]
