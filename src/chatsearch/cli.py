"""Typer CLI for chatsearch — serve, render and open commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from result import Err, Ok, Result

from chatsearch.config import Config
from chatsearch.models.search import RowInputs, SearchSnapshot, SearchStatus
from chatsearch.services.container import ServiceContainer
from chatsearch.services.protocols import RESULT_OPEN_EVENT

app = typer.Typer(
    name="chatsearch",
    help="Chat search result rows — render, open and preview search hits.",
    invoke_without_command=True,
)

ResultsPath = Annotated[
    Path,
    typer.Argument(help="Search snapshot JSON (status, contacts, results)"),
]


class EchoNavigator:
    """Navigator that prints the requested URL."""

    def navigate_to(self, url: str) -> None:
        typer.echo(f"navigate {url}")


def load_snapshot(path: Path) -> Result[SearchSnapshot, str]:
    """Read and validate a search snapshot file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(f"Cannot read {path}: {exc}")
    try:
        return Ok(SearchSnapshot.model_validate_json(raw))
    except ValidationError as exc:
        return Err(f"Invalid search snapshot {path}: {exc}")


def _snapshot_or_exit(path: Path) -> SearchSnapshot:
    loaded = load_snapshot(path)
    if isinstance(loaded, Err):
        typer.echo(loaded.err_value, err=True)
        raise typer.Exit(code=1)
    return loaded.ok_value


@app.callback(invoke_without_command=True)
def serve(
    ctx: typer.Context,
    results: Annotated[
        Path | None,
        typer.Option("--results", help="Search snapshot JSON to display"),
    ] = None,
    port: Annotated[int, typer.Option("--port", help="Port to serve on")] = 8765,
) -> None:
    """Start the search results preview page."""
    if ctx.invoked_subcommand is not None:
        return
    snapshot = _snapshot_or_exit(results) if results else SearchSnapshot()
    config = Config(port=port)
    from chatsearch.ui.app import run_app

    run_app(config, snapshot)


@app.command()
def render(
    results: ResultsPath,
    status: Annotated[
        SearchStatus | None,
        typer.Option("--status", help="Override the snapshot's search status"),
    ] = None,
    topic_max_length: Annotated[
        int, typer.Option("--topic-length", help="Maximum topic length")
    ] = 20,
) -> None:
    """Print the markup of every result row, one per line."""
    snapshot = _snapshot_or_exit(results)
    config = Config(topic_max_length=topic_max_length)
    container = ServiceContainer.create(config, EchoNavigator(), snapshot.contacts)
    for result in snapshot.results:
        markup = container.renderer.render(
            RowInputs(result=result, status=status or snapshot.status)
        )
        if markup:
            typer.echo(markup)


@app.command("open")
def open_result(
    results: ResultsPath,
    index: Annotated[int, typer.Argument(help="Zero-based position of the result")],
) -> None:
    """Activate a result row as if it was clicked."""
    snapshot = _snapshot_or_exit(results)
    if not 0 <= index < len(snapshot.results):
        typer.echo(f"No result at position {index}", err=True)
        raise typer.Exit(code=1)

    container = ServiceContainer.create(Config(), EchoNavigator(), snapshot.contacts)
    container.events.subscribe(RESULT_OPEN_EVENT, lambda: typer.echo(RESULT_OPEN_EVENT))
    view = container.renderer.view(
        RowInputs(result=snapshot.results[index], status=snapshot.status)
    )
    if view is None:
        typer.echo("Nothing to open", err=True)
        raise typer.Exit(code=1)

    opened = container.renderer.activate(view)
    if isinstance(opened, Err):
        typer.echo(opened.err_value, err=True)
        raise typer.Exit(code=1)
