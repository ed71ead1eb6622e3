"""Store management commands."""

import click
from rich.panel import Panel

from ..client import Store
from .common import console, make_client, not_found, print_json, run


def show_store(store: Store, as_json: bool) -> None:
    if as_json:
        print_json(store.data)
        return

    extra = "".join(
        f"\n[bold]{key.capitalize()}:[/bold] {value}"
        for key, value in store.data.items()
        if key not in ("id", "name")
    )
    console.print(Panel(
        f"[bold]ID:[/bold] {store.id}\n"
        f"[bold]Name:[/bold] {store.name or '-'}"
        f"{extra}",
        title=f"[cyan]{store.name or store.id}[/cyan]",
    ))


@click.group()
def store():
    """Manage stores."""
    pass


@store.command("create")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def create_store(name: str, as_json: bool):
    """Create a store."""
    async def _create():
        async with make_client() as db:
            return await db.create_store(name)

    result = run(_create())
    if result is None:
        not_found("Store endpoint not found.")
    if not as_json:
        console.print(f"[green]Created store:[/green] {name}")
    show_store(result, as_json)


@store.command("get")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def get_store(name: str, as_json: bool):
    """Get store details."""
    async def _get():
        async with make_client() as db:
            return await db.get_store(name)

    result = run(_get())
    if result is None:
        not_found(f"Store not found: {name}")
    show_store(result, as_json)


@store.command("ensure")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def ensure_store(name: str, as_json: bool):
    """Get a store, creating it if it does not exist."""
    async def _ensure():
        async with make_client() as db:
            return await db.ensure_store_exists(name)

    result = run(_ensure())
    if result is None:
        not_found("Store endpoint not found.")
    show_store(result, as_json)


@store.command("delete")
@click.argument("name")
@click.confirmation_option(prompt="Are you sure you want to delete this store?")
def delete_store(name: str):
    """Delete a store and everything in it."""
    async def _delete():
        async with make_client() as db:
            found = await db.get_store(name)
            if found is None:
                return False
            await found.delete()
            return True

    if not run(_delete()):
        not_found(f"Store not found: {name}")
    console.print(f"[green]Deleted store:[/green] {name}")
