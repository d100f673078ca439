import logging
from pathlib import Path
from typing import Optional

import typer

from .commands import Command, Op, dispatch
from .config import load_settings
from .domain import format_item
from .errors import TodoError
from .progress import render_summary
from .store import TodoStore

log = logging.getLogger(__name__)

app = typer.Typer(
    help="Manage a list of to-do items stored in a JSON file.",
    no_args_is_help=True,
)


def open_store(db: Optional[Path]) -> TodoStore:
    """Return a store for ``db`` or, if unset, the configured database file."""
    path = db if db is not None else load_settings().db_file
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise typer.BadParameter(f"Cannot create directory for {path}: {e}")
    log.debug("using database %s", path)
    return TodoStore(path)


def run(ctx: typer.Context, command: Command) -> None:
    log.debug("running %s", command.op.name)
    try:
        outcome = dispatch(open_store(ctx.obj), command)
    except (TodoError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    for item in outcome.items:
        typer.echo(format_item(item))
    if command.op is Op.LIST:
        typer.echo(render_summary(outcome.items))
    if outcome.message:
        typer.echo(outcome.message)
    typer.echo("Ok")


@app.callback()
def main(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(None, "--db", help="Database file. Defaults to data/todo.json, tododb.yaml or $TODODB_FILE."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
):
    """A CLI tool to manage to-do items kept in a JSON array file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = db


@app.command("list")
def list_items(ctx: typer.Context):
    """List all the items in the database."""
    run(ctx, Command(Op.LIST))


@app.command()
def query(ctx: typer.Context, item_id: int = typer.Argument(..., metavar="ID")):
    """Show a single item."""
    run(ctx, Command(Op.QUERY, item_id=item_id))


@app.command()
def add(ctx: typer.Context, item: str = typer.Argument(..., metavar="JSON")):
    """Add an item, e.g. '{"id": 3, "title": "Learn Python", "done": false}'."""
    run(ctx, Command(Op.ADD, payload=item))


@app.command()
def update(ctx: typer.Context, item: str = typer.Argument(..., metavar="JSON")):
    """Replace the item with the same id."""
    run(ctx, Command(Op.UPDATE, payload=item))


@app.command()
def delete(ctx: typer.Context, item_id: int = typer.Argument(..., metavar="ID")):
    """Delete an item."""
    run(ctx, Command(Op.DELETE, item_id=item_id))


@app.command()
def status(
    ctx: typer.Context,
    item_id: int = typer.Argument(..., metavar="ID"),
    done: bool = typer.Option(True, "--done/--not-done", help="New value of the done flag."),
):
    """Mark an item as done or not done."""
    run(ctx, Command(Op.STATUS, item_id=item_id, done=done))


@app.command()
def restore(ctx: typer.Context):
    """Restore the database from its .bak backup file."""
    run(ctx, Command(Op.RESTORE))


if __name__ == "__main__":
    app()
