"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

import try_iterator as ti

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_raw_timings, compute_stats, summarize

app = typer.Typer(help="Benchmarks for try_iterator developments.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for b in BENCHMARKS:
        CONSOLE.print(f"{b.category}: {b.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median time by call."""
    selected = ti.Seq(b for b in BENCHMARKS if category is None or b.category == category)
    if selected.length() == 0:
        CONSOLE.print(f"No benchmarks registered for {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(
        selected.into(collect_raw_timings).into(compute_stats).into(summarize)
    )


if __name__ == "__main__":
    app()
