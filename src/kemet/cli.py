"""Command line interface for kemet."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from kemet.config import DEFAULT_EXTENSIONS, ConfigError, SearchConfig
from kemet.report import OutputWriteError, print_lines, render_report, write_report
from kemet.search.engine import SearchEngine


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="kemet - recursive file content search")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def search(
    query: str = typer.Option(..., "--search", "-s", help="Text to search for"),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Directory to search (default: current directory)"
    ),
    extensions: Optional[str] = typer.Option(
        None,
        "--extensions",
        "-e",
        help=f"Comma-separated file extensions (default: {','.join(DEFAULT_EXTENSIONS)})",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write results to this file instead of the console"
    ),
    case_sensitive: bool = typer.Option(
        False, "--case-sensitive", "-c", help="Enable case-sensitive search"
    ),
    show_lines: bool = typer.Option(False, "--show-lines", "-l", help="Show matching line content"),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Number of files scanned in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search files under a directory for a literal piece of text."""
    _setup_logging(verbose)
    try:
        config = SearchConfig.from_inputs(
            query=query,
            root=path,
            extensions=extensions,
            case_sensitive=case_sensitive,
            show_lines=show_lines,
            output=output,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    summary = SearchEngine(config, jobs=jobs).run()

    try:
        write_report(config, summary, console)
    except OutputWriteError as exc:
        err_console.print(
            f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True
        )
        err_console.print("[yellow]Showing results on the console instead.[/yellow]")
        print_lines(console, render_report(config, summary))
        raise typer.Exit(code=1) from exc
