from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from .remote import Callback


def split_image_args(
    options: Mapping[str, Any] | Callable | None,
    callback: Callback | None,
) -> tuple[dict[str, Any], Callback | None]:
    # image(id, callback) is accepted in place of image(id, options, callback).
    if callable(options):
        return {}, options  # type: ignore[return-value]
    return dict(options or {}), callback


def open_with_default_app(path: Path, *, reveal_parent: bool = False) -> None:
    target = path
    if reveal_parent:
        target = path if path.is_dir() else path.parent

    if sys.platform.startswith("win"):
        os.startfile(str(target))
    elif sys.platform == "darwin":
        subprocess.run(["open", str(target)], check=False)
    else:
        subprocess.run(["xdg-open", str(target)], check=False)
