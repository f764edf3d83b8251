from __future__ import annotations

import json
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Annotated, Any

import click
import typer
from rich.console import Console
from rich.markup import escape

from . import api
from .config import (
    coerce_value,
    get_config_path,
    load_config,
    open_config,
    set_config_value,
    update_config,
)
from .errors import EmbedVideoError, UpstreamError
from .model import DailymotionImage, EmbedOptions, LogLevel, Provider, VimeoImage, YouTubeImage
from .urls import expand_url_args

app = typer.Typer(
    add_completion=False,
    help="embedvideo: turn video page URLs into embeds and thumbnails.",
    no_args_is_help=True,
)

_IMAGE_CONFIG_KEYS = {
    Provider.YOUTUBE: "youtube_image",
    Provider.VIMEO: "vimeo_image",
    Provider.DAILYMOTION: "dailymotion_image",
}


def _make_ui(*, level: LogLevel, no_color: bool):
    from .ui import Ui

    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, no_color=no_color, highlight=False, soft_wrap=True)
    ui = Ui(console=console, level=level, err_console=err_console)
    ui.attach_logging()
    return ui


@app.callback()
def _global_options(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Show detection details.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show library logs + stack traces.")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", help="Only print results and errors.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output.")] = False,
) -> None:
    _ = (verbose, debug, quiet, no_color)
    config_path = get_config_path()
    ctx.obj = ctx.obj or {}
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = load_config(config_path)


def _is_commandline(ctx: typer.Context | None, name: str) -> bool:
    if ctx is None:
        return False
    try:
        src = ctx.get_parameter_source(name)
    except Exception:  # noqa: BLE001
        return False
    return src == click.core.ParameterSource.COMMANDLINE


def _get_config(ctx: typer.Context) -> tuple[dict[str, str], Path | None]:
    root = ctx
    while root.parent is not None:
        root = root.parent
    obj = root.obj or {}
    return obj.get("config", {}), obj.get("config_path")


def _resolve_option(ctx: typer.Context, name: str, current):
    if _is_commandline(ctx, name):
        return current
    parent = ctx.parent
    if parent is not None and _is_commandline(parent, name) and name in parent.params:
        return parent.params[name]
    config, config_path = _get_config(ctx)
    if config and name in config:
        try:
            value = coerce_value(name, config[name])
        except ValueError as e:
            hint = f" (config: {config_path})" if config_path else ""
            raise typer.BadParameter(
                f"{e}{hint}",
                param_hint=f"--{name.replace('_', '-')}",
            ) from e
        if value is not None:
            return value
    return current


def _ui_from_context(ctx: typer.Context):
    verbose = _resolve_option(ctx, "verbose", False)
    debug = _resolve_option(ctx, "debug", False)
    quiet = _resolve_option(ctx, "quiet", False)
    no_color = _resolve_option(ctx, "no_color", False)
    return _make_ui(
        level=_level_from_flags(quiet=quiet, verbose=verbose, debug=debug),
        no_color=no_color,
    )


def _parse_pairs(values: list[str] | None, *, param_hint: str) -> dict[str, str] | None:
    if not values:
        return None
    pairs: dict[str, str] = {}
    for raw in values:
        if "=" not in raw:
            raise typer.BadParameter(f"Use key=value, got {raw!r}.", param_hint=param_hint)
        key, value = raw.split("=", 1)
        if not key.strip():
            raise typer.BadParameter("Key cannot be empty.", param_hint=param_hint)
        pairs[key.strip()] = value
    return pairs


@app.command()
def config(
    setting: Annotated[
        str | None,
        typer.Argument(help="Open config, or set a value with key=value."),
    ] = None,
    update: Annotated[
        bool,
        typer.Option("--update", help="Add missing keys and drop unknown ones."),
    ] = False,
) -> None:
    path = get_config_path()
    if update:
        added, removed = update_config(path)
        typer.echo(f"Updated {path}: added={added} removed={removed}")
        return
    if setting is None:
        open_config(path)
        return
    if "=" not in setting:
        raise typer.BadParameter("Use key=value.", param_hint="SETTING")
    key, value = setting.split("=", 1)
    if not key.strip():
        raise typer.BadParameter("Key cannot be empty.", param_hint="SETTING")
    try:
        coerce_value(key, value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="SETTING") from e
    set_config_value(path, key, value.strip())
    typer.echo(f"Updated {path}: {key.strip().lower().replace('-', '_')}={value.strip()}")


@app.command()
def info(
    ctx: typer.Context,
    urls: Annotated[list[str], typer.Argument(help="URL(s) or a urls.txt file.")],
    json_out: Annotated[bool, typer.Option("--json", help="Print JSON for scripting.")] = False,
) -> None:
    ui = _ui_from_context(ctx)
    results: list[dict[str, Any]] = []
    unmatched = 0
    expanded = expand_url_args(list(urls))
    for idx, url in enumerate(expanded, start=1):
        if len(expanded) > 1 and not json_out:
            ui.info(f"[dim]{idx}/{len(expanded)}[/dim] {escape(url)}")
        res = api.info(url)
        if res is None:
            unmatched += 1
            ui.error(f"Detected: no supported provider ({url})")
            continue
        if json_out:
            results.append(res.to_json())
            continue
        ui.stage("Detected", url)
        ui.field("Provider", res.provider.value)
        ui.field("ID", res.id or "")
        ui.verbose(f"Normalized URL: {res.url}")

    if json_out and results:
        payload = results if len(results) > 1 else results[0]
        ui.output(json.dumps(payload, indent=2, ensure_ascii=False))
    if unmatched:
        raise typer.Exit(2)


@app.command()
def embed(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="Video page URL.")],
    query: Annotated[
        list[str] | None,
        typer.Option("--query", "-q", help="Player query parameter as key=value (repeatable)."),
    ] = None,
    attr: Annotated[
        list[str] | None,
        typer.Option("--attr", "-a", help="Extra iframe attribute as key=value (repeatable)."),
    ] = None,
) -> None:
    ui = _ui_from_context(ctx)
    options = EmbedOptions(
        query=_parse_pairs(query, param_hint="--query"),
        attr=_parse_pairs(attr, param_hint="--attr"),
    )
    res = api.info(url)
    if res is None:
        ui.error(f"Detected: no supported provider ({url})")
        raise typer.Exit(2)
    ui.verbose(f"{res.provider.value} id={res.id or ''}")
    try:
        html = api.embed(url, options)
    except EmbedVideoError as e:
        ui.error(f"{e.stage + ': ' if e.stage else ''}{e}")
        raise typer.Exit(2) from e
    ui.output(html or "")


@app.command()
def image(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="Video page URL.")],
    size: Annotated[
        str | None,
        typer.Option("--size", help="Provider thumbnail size (e.g. hqdefault, thumbnail_large)."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Seconds to wait for the provider API."),
    ] = None,
    json_out: Annotated[bool, typer.Option("--json", help="Print JSON for scripting.")] = False,
) -> None:
    ui = _ui_from_context(ctx)
    timeout = _resolve_option(ctx, "timeout", timeout)
    res = api.info(url)
    if res is None:
        ui.error(f"Detected: no supported provider ({url})")
        raise typer.Exit(2)

    if size is None:
        key = _IMAGE_CONFIG_KEYS.get(res.provider)
        if key is not None:
            configured = _resolve_option(ctx, key, None)
            size = configured.value if configured is not None else None
    elif not _is_known_size(size):
        ui.verbose(f"Unknown size {size!r}; the provider default will be used.")

    options: dict[str, Any] = {"image": size, "timeout": timeout}
    # Remote lookups insist on a completion callback; the future carries the result.
    future = api.image(url, options, lambda _err, _thumb: None)
    try:
        with ui.spinner(f"Looking up {res.provider.value} thumbnail"):
            # Leave headroom over the request timeout for the worker to report back.
            thumb = future.result(timeout=(timeout or 15.0) + 5.0)
    except FutureTimeoutError as e:
        ui.error(f"Thumbnail: timed out waiting for {res.provider.value}")
        raise typer.Exit(1) from e
    except UpstreamError as e:
        ui.error(f"{e.stage + ': ' if e.stage else ''}{e}")
        raise typer.Exit(1) from e

    if thumb is None:
        ui.error(f"Thumbnail: {res.provider.value} does not provide thumbnails")
        raise typer.Exit(2)
    if json_out:
        ui.output(json.dumps(thumb.to_json(), indent=2, ensure_ascii=False))
        return
    ui.verbose(f"src={thumb.src}")
    ui.output(thumb.html)


def _is_known_size(value: str) -> bool:
    enums = (YouTubeImage, VimeoImage, DailymotionImage)
    return any(value in {m.value for m in enum} for enum in enums)


def _level_from_flags(*, quiet: bool, verbose: bool, debug: bool) -> LogLevel:
    if quiet:
        return "quiet"
    if debug:
        return "debug"
    if verbose:
        return "verbose"
    return "normal"
