from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import parse_qs, urlparse, urlunparse


@dataclass(frozen=True)
class ParsedURL:
    href: str
    hostname: str
    path: str
    query: dict[str, str] = field(default_factory=dict)

    def segment(self, index: int) -> str | None:
        # Indexes follow path.split("/"), so index 1 is the first segment.
        parts = self.path.split("/")
        if index < len(parts):
            return parts[index]
        return None


def parse_url(url: str) -> ParsedURL | None:
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname or ""
    except ValueError:
        return None
    query = {k: v[0] for k, v in parse_qs(parsed.query, keep_blank_values=True).items()}
    path = parsed.path or ("/" if parsed.netloc else "")
    href = urlunparse(
        (
            parsed.scheme.lower(),
            parsed.netloc.lower(),
            path,
            parsed.params,
            parsed.query,
            parsed.fragment,
        )
    )
    return ParsedURL(href=href, hostname=hostname, path=path, query=query)


def expand_url_args(args: list[str]) -> list[str]:
    urls: list[str] = []
    for arg in args:
        path = Path(arg)
        if path.exists() and path.is_file():
            urls.extend(_read_urls_file(path))
        else:
            urls.append(arg)
    return urls


def _read_urls_file(path: Path) -> list[str]:
    urls: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        urls.append(line)
    return urls
