from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from types import ModuleType

from .model import Provider
from .providers import dailymotion, loom, panopto, vimeo, youtube
from .urls import ParsedURL

Renderer = Callable[..., str]
ThumbnailResolver = Callable[..., Future]


@dataclass(frozen=True)
class ProviderEntry:
    provider: Provider
    matches: Callable[[ParsedURL], bool]
    extract_id: Callable[[ParsedURL], str | None]
    render: Renderer
    thumbnail: ThumbnailResolver | None = None

    @property
    def supports_thumbnail(self) -> bool:
        return self.thumbnail is not None


def _entry(module: ModuleType, *, thumbnail: bool) -> ProviderEntry:
    return ProviderEntry(
        provider=module.PROVIDER,
        matches=module.matches,
        extract_id=module.extract_id,
        render=module.render,
        thumbnail=module.image if thumbnail else None,
    )


# Detection order; must follow Provider declaration order.
PROVIDERS: tuple[ProviderEntry, ...] = (
    _entry(youtube, thumbnail=True),
    _entry(vimeo, thumbnail=True),
    _entry(dailymotion, thumbnail=True),
    _entry(loom, thumbnail=False),
    _entry(panopto, thumbnail=False),
)

_BY_PROVIDER: dict[Provider, ProviderEntry] = {e.provider: e for e in PROVIDERS}

if set(_BY_PROVIDER) != set(Provider):
    missing = ", ".join(p.value for p in Provider if p not in _BY_PROVIDER)
    raise RuntimeError(f"Providers without a renderer: {missing}")


def get_entry(provider: Provider | str) -> ProviderEntry:
    return _BY_PROVIDER[Provider(provider)]


def list_providers() -> list[Provider]:
    return [e.provider for e in PROVIDERS]
