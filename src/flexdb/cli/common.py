"""Shared helpers for CLI commands."""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, NoReturn, TypeVar

import click
import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..client import FlexDB, FlexDBError, FlexDBSettings, describe_error

console = Console()

T = TypeVar("T")


def fail(e: BaseException) -> NoReturn:
    """Print an error and abort with status 1."""
    console.print(f"[red]Error:[/red] {escape(describe_error(e))}")
    raise click.Abort()


def load_settings() -> FlexDBSettings:
    """Load FLEXDB_* settings, aborting on invalid values."""
    try:
        return FlexDBSettings()
    except ValidationError as e:
        fail(e)


def make_client(settings: FlexDBSettings | None = None) -> FlexDB:
    """Create a client from environment-backed settings."""
    settings = settings or load_settings()
    return FlexDB(config=settings.to_config())


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine, turning remote and local failures into an abort."""
    try:
        return asyncio.run(coro)
    except (httpx.HTTPError, FlexDBError, ValidationError) as e:
        fail(e)


def print_json(result: Any) -> None:
    console.print_json(json.dumps(result))


def not_found(message: str) -> NoReturn:
    """Report a missing resource and exit with status 1."""
    console.print(f"[yellow]{message}[/yellow]")
    click.get_current_context().exit(1)


def parse_document(ctx, param, value: str) -> dict[str, Any]:
    """Click callback parsing a JSON object argument."""
    try:
        document = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}")
    if not isinstance(document, dict):
        raise click.BadParameter("Document must be a JSON object")
    return document
