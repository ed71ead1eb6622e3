"""Document and collection commands.

Every command here is store-scoped: it needs a store id, taken from
--store-id or FLEXDB_STORE_ID.
"""

import json
from typing import Any

import click
from rich.panel import Panel
from rich.table import Table

from ..client import Collection, FlexDB, FlexDBError, Store
from .common import console, load_settings, make_client, not_found, parse_document, print_json, run

store_id_option = click.option(
    "--store-id",
    "-s",
    help="Store id (defaults to FLEXDB_STORE_ID)",
)


def open_collection(db: FlexDB, store_id: str | None, name: str) -> Collection:
    """Build a collection handle for a store known only by id."""
    store_id = store_id or load_settings().store_id
    if not store_id:
        raise FlexDBError("No store id given. Use --store-id or set FLEXDB_STORE_ID.")
    return Store(db, {"id": store_id}).collection(name)


def document_table(documents: list[dict[str, Any]], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", max_width=36)
    table.add_column("Fields")

    for d in documents:
        fields = {k: v for k, v in d.items() if k != "id"}
        table.add_row(str(d.get("id", ""))[:36], json.dumps(fields)[:80])

    return table


@click.group()
def doc():
    """Manage documents."""
    pass


@doc.command("create")
@click.argument("collection")
@click.argument("document", callback=parse_document)
@store_id_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def create_document(collection: str, document: dict, store_id: str | None, as_json: bool):
    """Create a document from a JSON object."""
    async def _create():
        async with make_client() as db:
            return await open_collection(db, store_id, collection).create(document)

    result = run(_create())

    if as_json:
        print_json(result)
        return
    console.print(f"[green]Created document:[/green] {(result or {}).get('id', '?')}")


@doc.command("get")
@click.argument("collection")
@click.argument("doc_id")
@store_id_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def get_document(collection: str, doc_id: str, store_id: str | None, as_json: bool):
    """Get a document by id."""
    async def _get():
        async with make_client() as db:
            return await open_collection(db, store_id, collection).get(doc_id)

    result = run(_get())
    if result is None:
        not_found(f"Document not found: {doc_id}")

    if as_json:
        print_json(result)
        return

    console.print(Panel(
        json.dumps(result, indent=2),
        title=f"[cyan]{collection}/{doc_id}[/cyan]",
    ))


@doc.command("list")
@click.argument("collection")
@store_id_option
@click.option("--page", "-p", type=int, help="Page number (enables pagination)")
@click.option("--limit", "-l", type=int, help="Documents per page (enables pagination)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_documents(
    collection: str,
    store_id: str | None,
    page: int | None,
    limit: int | None,
    as_json: bool,
):
    """List documents in a collection."""
    paginate = page is not None or limit is not None

    async def _list():
        async with make_client() as db:
            handle = open_collection(db, store_id, collection)
            if paginate:
                return await handle.get_many(page=page or 1, limit=limit or 20)
            return await handle.get_all()

    result = run(_list())

    if as_json:
        print_json(result)
        return

    if paginate:
        documents = (result or {}).get("documents", [])
    else:
        documents = result or []

    if not documents:
        console.print("[yellow]No documents found.[/yellow]")
        return

    console.print(document_table(documents, title=collection))

    if paginate:
        meta = (result or {}).get("metadata", {})
        console.print(
            f"[dim]Page {meta.get('page', '?')} "
            f"({len(documents)} of {meta.get('total', '?')} documents)[/dim]"
        )


@doc.command("update")
@click.argument("collection")
@click.argument("doc_id")
@click.argument("document", callback=parse_document)
@store_id_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def update_document(collection: str, doc_id: str, document: dict, store_id: str | None, as_json: bool):
    """Update a document with a JSON object."""
    async def _update():
        async with make_client() as db:
            return await open_collection(db, store_id, collection).update(doc_id, document)

    result = run(_update())
    if result is None:
        not_found(f"Document not found: {doc_id}")

    if as_json:
        print_json(result)
        return
    console.print(f"[green]Updated document:[/green] {doc_id}")


@doc.command("delete")
@click.argument("collection")
@click.argument("doc_id")
@store_id_option
def delete_document(collection: str, doc_id: str, store_id: str | None):
    """Delete a document by id."""
    async def _delete():
        async with make_client() as db:
            return await open_collection(db, store_id, collection).delete(doc_id)

    result = run(_delete())
    if result is None:
        not_found(f"Document not found: {doc_id}")
    console.print(f"[green]Deleted document:[/green] {doc_id}")


@doc.command("drop")
@click.argument("collection")
@store_id_option
@click.confirmation_option(prompt="Are you sure you want to delete this collection?")
def drop_collection(collection: str, store_id: str | None):
    """Delete a whole collection."""
    async def _drop():
        async with make_client() as db:
            return await open_collection(db, store_id, collection).delete_collection()

    result = run(_drop())
    if result is None:
        not_found(f"Collection not found: {collection}")
    console.print(f"[green]Deleted collection:[/green] {collection}")
