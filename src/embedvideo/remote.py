from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

import requests

from . import __version__
from .errors import TransportError, UpstreamError
from .model import Provider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15.0

T = TypeVar("T")
Callback = Callable[[Exception | None, Any], None]

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="embedvideo")


def fetch_json(
    url: str,
    *,
    provider: Provider,
    params: dict[str, str] | None = None,
    timeout: float | None = None,
) -> Any:
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = requests.get(
            url,
            params=params,
            timeout=timeout or DEFAULT_TIMEOUT,
            headers={"User-Agent": f"embedvideo/{__version__}"},
        )
    except requests.RequestException as e:
        raise TransportError(
            f"request to {provider.value} failed: {e}", provider=provider
        ) from e
    if resp.status_code != 200:
        raise UpstreamError(
            f"unexpected response from {provider.value}",
            provider=provider,
            status=resp.status_code,
        )
    try:
        return resp.json()
    except ValueError:
        return None


def submit(func: Callable[[], T], callback: Callback | None = None) -> Future:
    """Run ``func`` on the worker pool, reporting its outcome to ``callback``.

    The callback receives ``(error, result)``; errors raised by ``func`` are
    captured on the future and never escape to the caller.
    """

    def _run() -> T:
        try:
            result = func()
        except Exception as e:  # noqa: BLE001
            if callback is not None:
                callback(e, None)
            raise
        if callback is not None:
            callback(None, result)
        return result

    return _executor.submit(_run)


def completed(result: T, callback: Callback | None = None) -> Future:
    """Return ``result`` through the same future contract as a remote lookup."""
    if callback is not None:
        return submit(lambda: result, callback)
    future: Future = Future()
    future.set_result(result)
    return future
