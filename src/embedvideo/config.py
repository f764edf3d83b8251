from __future__ import annotations

from pathlib import Path

from .model import DailymotionImage, VimeoImage, YouTubeImage
from .remote import DEFAULT_TIMEOUT
from .shared import open_with_default_app

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}
_BOOL_KEYS = {
    "verbose",
    "debug",
    "quiet",
    "no_color",
}
_FLOAT_KEYS = {"timeout"}
_IMAGE_KEYS = {
    "youtube_image": YouTubeImage,
    "vimeo_image": VimeoImage,
    "dailymotion_image": DailymotionImage,
}


def _default_config_text() -> str:
    return (
        "# embedvideo config\n"
        "# key=value\n"
        "#\n"
        f"timeout={DEFAULT_TIMEOUT:g}\n"
        f"youtube_image={YouTubeImage.default().value}\n"
        f"vimeo_image={VimeoImage.default().value}\n"
        f"dailymotion_image={DailymotionImage.default().value}\n"
        "verbose=false\n"
        "debug=false\n"
        "quiet=false\n"
        "no_color=false\n"
    )


def get_config_path() -> Path:
    return Path.home() / ".embedvideo" / "config.ini"


def ensure_config_file(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(_default_config_text(), encoding="utf-8")


def _normalize_key(key: str) -> str:
    return key.strip().lower().replace("-", "_")


def load_config(path: Path | None = None) -> dict[str, str]:
    path = path or get_config_path()
    if not path.exists():
        return {}
    config: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or line.startswith(";"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = _normalize_key(key)
        value = value.strip()
        if key:
            config[key] = value
    return config


def set_config_value(path: Path, key: str, value: str) -> None:
    key = _normalize_key(key)
    ensure_config_file(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    updated = False
    out: list[str] = []
    for line in lines:
        raw = line.strip()
        if not raw or raw.startswith("#") or raw.startswith(";") or "=" not in raw:
            out.append(line)
            continue
        k, _ = raw.split("=", 1)
        if _normalize_key(k) == key:
            out.append(f"{key}={value}")
            updated = True
        else:
            out.append(line)
    if not updated:
        out.append(f"{key}={value}")
    path.write_text("\n".join(out) + "\n", encoding="utf-8")


def update_config(path: Path) -> tuple[int, int]:
    ensure_config_file(path)
    existing = load_config(path)
    defaults = _default_config_values()

    removed = [key for key in existing if key not in defaults]
    merged = defaults.copy()
    for key, value in existing.items():
        if key in defaults:
            merged[key] = value

    lines: list[str] = []
    for line in _default_config_text().splitlines():
        raw = line.strip()
        if not raw or raw.startswith("#") or raw.startswith(";") or "=" not in raw:
            lines.append(line)
            continue
        key, _ = raw.split("=", 1)
        normalized = _normalize_key(key)
        lines.append(f"{normalized}={merged.get(normalized, '')}")

    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    added = [key for key in defaults if key not in existing]
    return len(added), len(removed)


def coerce_value(key: str, value: str):
    key = _normalize_key(key)
    v = value.strip()
    if v.lower() in {"", "none", "null"}:
        return None
    if key in _BOOL_KEYS:
        low = v.lower()
        if low in _BOOL_TRUE:
            return True
        if low in _BOOL_FALSE:
            return False
        raise ValueError(f"Invalid boolean for {key}: {value}")
    if key in _FLOAT_KEYS:
        try:
            seconds = float(v)
        except ValueError as e:
            raise ValueError(f"Invalid number for {key}: {value}") from e
        if seconds <= 0:
            raise ValueError(f"{key} must be positive: {value}")
        return seconds
    if key in _IMAGE_KEYS:
        enum = _IMAGE_KEYS[key]
        try:
            return enum(v)
        except ValueError as e:
            choices = ", ".join(m.value for m in enum)
            raise ValueError(f"Invalid {key}: {value}. Use one of: {choices}.") from e
    return v


def _default_config_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for line in _default_config_text().splitlines():
        raw = line.strip()
        if not raw or raw.startswith("#") or raw.startswith(";") or "=" not in raw:
            continue
        key, value = raw.split("=", 1)
        values[_normalize_key(key)] = value.strip()
    return values


def open_config(path: Path) -> None:
    ensure_config_file(path)
    open_with_default_app(path, reveal_parent=False)
