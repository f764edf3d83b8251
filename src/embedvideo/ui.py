from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.spinner import Spinner
from rich.text import Text

from .model import LogLevel


@dataclass
class Ui:
    console: Console
    level: LogLevel
    err_console: Console | None = None

    def stage(self, label: str, detail: str | None = None) -> None:
        if self.level == "quiet":
            return
        style = {"Detected": "bold cyan"}.get(label, "bold")
        if detail:
            self.console.print(f"[{style}]{label}[/] [dim]{escape(detail)}[/dim]")
        else:
            self.console.print(f"[{style}]{label}[/]")

    def info(self, message: str) -> None:
        if self.level == "quiet":
            return
        self.console.print(message)

    def field(self, label: str, value: str) -> None:
        self.console.print(f"[bold]{label}:[/bold] {escape(value)}")

    def output(self, text: str) -> None:
        # Results go out untouched by markup so they can be piped.
        self.console.print(text, markup=False, highlight=False, emoji=False)

    def verbose(self, message: str) -> None:
        if self.level not in ("verbose", "debug"):
            return
        self.console.print(f"[dim]{escape(message)}[/dim]")

    def error(self, message: str) -> None:
        console = self.err_console or self.console
        console.print(f"[red]Error:[/red] {escape(message)}")

    @contextmanager
    def spinner(self, label: str) -> Iterator[None]:
        if self.level == "quiet":
            yield
            return
        spinner = Spinner("dots", text=Text(label))
        with self.console.status(spinner):
            yield

    def attach_logging(self) -> None:
        if self.level != "debug":
            return
        log = logging.getLogger("embedvideo")
        log.setLevel(logging.DEBUG)
        if not any(isinstance(h, RichHandler) for h in log.handlers):
            log.addHandler(RichHandler(console=self.err_console or self.console, show_path=False))
