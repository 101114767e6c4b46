import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

import cytoolz as cz
import polars as pl
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

import try_iterator as ti

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / warmup_time / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: ti.Seq[Variant]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: Final[list[Benchmark]] = []


def bench[P](
    *, gen: Callable[[ti.Iter[int]], P] = lambda size: size.collect()
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    The data is built once per size, and the registered function is timed on it.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = ti.Seq(
            Variant.from_fn(partial(func, ti.Iter(range(size)).into(gen)), size)
            for size in SIZES
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: ti.Seq[Benchmark]) -> ti.Seq[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {benchmarks.length()} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return ti.Seq(
            cz.itertoolz.concat(
                f(v, b) for b in benchmarks for v in b.variants
            )
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> ti.Iter[Row]:
    def _update_progress(run_idx: int, fn: BenchFn) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(
            bench.category,
            bench.name,
            variant.size,
            run_idx,
            time_taken,
        )

    return ti.Iter(range(variant.n_runs)).map(
        lambda run_idx: _update_progress(run_idx, variant.fn)
    )


def compute_stats(rows: ti.Seq[Row]) -> pl.DataFrame:
    """Compute the median time of a call and the run count, by benchmark and size."""
    return (
        pl.LazyFrame(
            rows.inner(),
            schema=["category", "name", "size", "run_idx", "time"],
            orient="row",
        )
        .group_by("category", "name", "size")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
        .with_columns((pl.col("median") / CALLS_BY_RUN * 1e6).alias("median_us"))
        .sort("category", "name", "size")
        .collect()
    )


def summarize(stats: pl.DataFrame) -> Table:
    """Render the aggregated stats, one line per benchmark and size."""
    table = Table(title="try_iterator benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs/call)"):
        table.add_column(column, justify="right" if column != "name" else "left")
    for row in stats.iter_rows(named=True):
        table.add_row(
            row["category"],
            row["name"],
            str(row["size"]),
            str(row["runs"]),
            f"{row['median_us']:.2f}",
        )
    return table
