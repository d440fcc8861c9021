"""Command line interface for DocSeek."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docseek.config import AppConfig
from docseek.errors import PersistenceFailure, SnapshotCorrupt
from docseek.index.indexer import Indexer
from docseek.index.model import Model
from docseek.index.search import SearchResult
from docseek.index.storage import JSONSnapshotStore
from docseek.text.stemming import StemmingAlgorithm

console = Console()
app = typer.Typer(help="DocSeek - local full-text search for text files")

QUIT_COMMANDS = {"quit", "exit", ":q"}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=1)


def _open_model(config: AppConfig) -> Model:
    store = JSONSnapshotStore(config.resolve_index_path(Path.cwd()))
    try:
        return Model.open(store, algorithm=config.algorithm)
    except SnapshotCorrupt as exc:
        raise _fail(str(exc)) from exc


def _print_results(results: List[SearchResult]) -> None:
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Document")
    for position, result in enumerate(results, start=1):
        table.add_row(str(position), f"{result.score:.2f}", escape(str(result.path)))
    console.print(table)


def _interactive_loop(model: Model, top_k: Optional[int]) -> None:
    console.print("Type a query and press enter, or 'quit' to leave.")
    while True:
        try:
            line = console.input("[bold cyan]search>[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        query = line.strip()
        if query.lower() in QUIT_COMMANDS:
            return
        if query:
            _print_results(model.query(query, top_k=top_k))


@app.command()
def add(
    inputs: List[Path] = typer.Argument(
        ..., help="Text files or directories to index.", exists=True, resolve_path=True
    ),
    index: Path = typer.Option(None, "--index", help="Index snapshot path"),
    algorithm: StemmingAlgorithm = typer.Option(
        AppConfig().algorithm, "--algorithm", help="Stemming algorithm"
    ),
    force: bool = typer.Option(False, "--force", help="Re-index unchanged files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Add text files to the index."""
    _setup_logging(verbose)
    config = AppConfig(index_path=index, algorithm=algorithm)

    model = _open_model(config)
    console.print(f"Indexing into [bold]{escape(str(model.store.path))}[/bold]...")
    indexer = Indexer(model, extensions=config.extensions)
    try:
        stats = indexer.index(inputs, force=force)
    except PersistenceFailure as exc:
        raise _fail(str(exc)) from exc

    if not stats.processed_files:
        console.print("[yellow]No documents found.[/yellow]")
        return

    console.print(
        f"Inserted: {stats.inserted}, updated: {stats.updated}, "
        f"skipped: {stats.skipped}, failed: {stats.failed}"
    )


@app.command()
def search(
    query: Optional[str] = typer.Argument(None, help="Query text"),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Keep prompting for queries until you quit"
    ),
    top_k: Optional[int] = typer.Option(None, "--top-k", min=1, help="Number of results to display"),
    index: Path = typer.Option(None, "--index", help="Index snapshot path"),
    algorithm: StemmingAlgorithm = typer.Option(
        AppConfig().algorithm, "--algorithm", help="Stemming algorithm"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the index."""
    _setup_logging(verbose)
    if not interactive and not query:
        raise typer.BadParameter("Provide a query or use --interactive")

    config = AppConfig(index_path=index, algorithm=algorithm)
    resolved = config.resolve_index_path(Path.cwd())
    if not resolved.exists():
        raise typer.BadParameter(f"Index not found: {resolved}")

    model = _open_model(config)
    if query:
        _print_results(model.query(query, top_k=top_k))
    if interactive:
        _interactive_loop(model, top_k)


@app.command()
def remove(
    inputs: List[Path] = typer.Argument(..., help="Indexed paths to drop.", resolve_path=True),
    index: Path = typer.Option(None, "--index", help="Index snapshot path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Remove documents from the index."""
    _setup_logging(verbose)
    model = _open_model(AppConfig(index_path=index))

    removed = 0
    try:
        for path in inputs:
            if model.remove(path):
                removed += 1
            else:
                console.print(f"[yellow]Not indexed: {escape(str(path))}[/yellow]")
    except PersistenceFailure as exc:
        raise _fail(str(exc)) from exc
    console.print(f"Removed {removed} documents.")


@app.command()
def prune(
    index: Path = typer.Option(None, "--index", help="Index snapshot path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Remove documents that no longer exist on disk."""
    _setup_logging(verbose)
    config = AppConfig(index_path=index)
    if not config.resolve_index_path(Path.cwd()).exists():
        console.print("[yellow]Index not found, nothing to prune.[/yellow]")
        return

    model = _open_model(config)
    try:
        removed = model.prune_missing()
    except PersistenceFailure as exc:
        raise _fail(str(exc)) from exc
    console.print(f"Removed {removed} orphaned documents.")


@app.command()
def stats(
    index: Path = typer.Option(None, "--index", help="Index snapshot path"),
) -> None:
    """Show the size of the index."""
    model = _open_model(AppConfig(index_path=index))
    console.print(
        f"Documents: {model.total_documents}, terms: {len(model.document_frequency)}"
    )
