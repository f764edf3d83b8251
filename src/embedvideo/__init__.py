from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("embedvideo")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .api import embed, image, info, video_source  # noqa: E402
from .model import EmbedOptions, Provider, ResolvedVideo, Thumbnail  # noqa: E402

__all__ = [
    "__version__",
    "EmbedOptions",
    "Provider",
    "ResolvedVideo",
    "Thumbnail",
    "embed",
    "image",
    "info",
    "video_source",
]
