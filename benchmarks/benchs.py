"""Benchmarks for try_iterator package - benchs.py.

Every fallible query is compared to its non-fallible counterpart, and to the plain builtin loop,
on data where the predicate never decides early, so the whole input is visited.
"""

import try_iterator as ti

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _is_negative(x: int) -> ti.Result[bool, str]:
    return ti.Ok(x < 0)


def _is_positive(x: int) -> ti.Result[bool, str]:
    return ti.Ok(x >= 0)


# Benchmark classes
# ------------------------------------------------------------


class TryAll:
    """Benchmark try_all against all."""

    @bench()
    @staticmethod
    def try_all(data: ti.Seq[int]) -> object:
        """Benchmark the fallible query."""
        return data.try_all(_is_positive)

    @bench()
    @staticmethod
    def all(data: ti.Seq[int]) -> object:
        """Benchmark the non-fallible method."""
        return data.all(lambda x: x >= 0)

    @bench()
    @staticmethod
    def builtin(data: ti.Seq[int]) -> object:
        """Benchmark the builtin."""
        return all(x >= 0 for x in data)


class TryAny:
    """Benchmark try_any against any."""

    @bench()
    @staticmethod
    def try_any(data: ti.Seq[int]) -> object:
        """Benchmark the fallible query."""
        return data.try_any(_is_negative)

    @bench()
    @staticmethod
    def any(data: ti.Seq[int]) -> object:
        """Benchmark the non-fallible method."""
        return data.any(lambda x: x < 0)


class TryPosition:
    """Benchmark try_position, on a lazy and on an eager input."""

    @bench()
    @staticmethod
    def try_position(data: ti.Seq[int]) -> object:
        """Benchmark the fallible query on a `Seq`."""
        return data.try_position(_is_negative)

    @bench()
    @staticmethod
    def try_position_iter(data: ti.Seq[int]) -> object:
        """Benchmark the fallible query on a fresh `Iter`."""
        return data.iter().try_position(_is_negative)

    @bench()
    @staticmethod
    def position(data: ti.Seq[int]) -> object:
        """Benchmark the non-fallible method."""
        return data.position(lambda x: x < 0)


class TryRposition:
    """Benchmark try_rposition, and the cost of buffering a lazy input first."""

    @bench()
    @staticmethod
    def try_rposition(data: ti.Seq[int]) -> object:
        """Benchmark the fallible query."""
        return data.try_rposition(_is_negative)

    @bench()
    @staticmethod
    def try_rposition_collect(data: ti.Seq[int]) -> object:
        """Benchmark collecting an `Iter` before the query."""
        return data.iter().collect().try_rposition(_is_negative)

    @bench()
    @staticmethod
    def rposition(data: ti.Seq[int]) -> object:
        """Benchmark the non-fallible method."""
        return data.rposition(lambda x: x < 0)
