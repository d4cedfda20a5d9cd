"""CLI entry point (Typer).

Two commands map one-to-one onto build -> dispatch -> render:

    mini-http get <url>
    mini-http post <url> [key=value ...]
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.highlighter import get_highlighter
from adapters.http_client import HttpxTransport, build_async_client
from cli.logging_setup import configure_logging
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import MiniHttpError
from core.domain.models import RequestDescriptor, ResponseDescriptor
from core.services.dispatcher import dispatch
from core.services.renderer import render
from core.services.request_builder import build_get, build_post

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Minimal HTTP client: send GET/POST requests and pretty-print the response.",
)

_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Force syntax highlighting on/off (default: only when stdout is a terminal).",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    settings = AppSettings()
    if color is not None:
        settings = settings.model_copy(update={"color": color})
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


async def _execute(descriptor: RequestDescriptor, settings: AppSettings) -> ResponseDescriptor:
    async with build_async_client(settings) as client:
        return await dispatch(descriptor, HttpxTransport(client))


def _run(settings: AppSettings, build: Callable[[], RequestDescriptor]) -> None:
    try:
        descriptor = build()
        response = asyncio.run(_execute(descriptor, settings))
        output = render(response, get_highlighter(settings))
    except MiniHttpError as exc:
        _err_console.print(
            f"[bold red]error:[/bold red] {escape(f'{type(exc).__name__}: {exc}')}",
            soft_wrap=True,
        )
        raise typer.Exit(code=1) from exc
    typer.echo(output, nl=False)


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute URL (scheme and host required)."),
) -> None:
    """Send a GET request and print the response."""

    _run(ctx.obj, lambda: build_get(url))


@app.command()
def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute URL (scheme and host required)."),
    body: Optional[List[str]] = typer.Argument(
        None,
        metavar="[KEY=VALUE]...",
        help="Body fields, sent as a JSON object in the given order.",
    ),
) -> None:
    """Send a POST request with a JSON body built from key=value pairs."""

    _run(ctx.obj, lambda: build_post(url, body or []))


def run() -> None:
    app()
