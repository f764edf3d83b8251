from __future__ import annotations

from .model import Provider


class EmbedVideoError(Exception):
    stage: str | None = None

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.stage = stage


class UsageError(EmbedVideoError):
    pass


class UpstreamError(EmbedVideoError):
    def __init__(
        self,
        message: str,
        *,
        stage: str | None = "Thumbnail",
        provider: Provider | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message, stage=stage)
        self.provider = provider
        self.status = status


class TransportError(UpstreamError):
    pass
