from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, Concatenate, overload

import cytoolz as cz

from .._results import Option
from ..traits import TryIterable

if TYPE_CHECKING:
    from ._eager import Seq


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class Iter[T](TryIterable[T], Iterator[T]):
    """A lazy, single-use wrapper around Python's `Iterator` Protocol, carrying the fallible queries.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    - To instantiate from an `Iterable`, simply pass it to the standard constructor.
    - To instantiate from unpacked values, use the `from_` static method.

    Keep in mind that `Iter` instances are single-use: every `try_*` method pulls elements from it up to the stop point,
    and once exhausted, it cannot be reused or reset.

    `Iter` can only be searched from the front, since a lazy (possibly infinite) iterator has no known tail.

    Call `.collect()` to materialize it into a `Seq` first if you need `try_rposition`.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> it = ti.Iter([1, 2, 3, 4, 5])
    >>> it.try_position(lambda x: ti.Ok(x == 2))
    Ok(Some(1))
    >>> # the elements after the stop point are still there
    >>> it.collect()
    Seq(3, 4, 5)

    ```
    """

    _inner: Iterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __next__(self) -> T:
        return next(self._inner)

    def __iter__(self) -> Iterator[T]:
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{self._inner.__class__.__name__}>)"

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        return Iter(factory(self._inner, *args, **kwargs))

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Note:
            Iterating over the `Iter` calls the actual `.__next__()` method, conform to the Python `Iterator` Protocol.

            `Iter.next()` is a convenience method that wraps the result in an `Option` to handle exhaustion gracefully.

            An iterator yielding `None` can't be told apart from an exhausted one with this method.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> it = ti.Iter([1, 2])
        >>> it.next()
        Some(1)
        >>> it.next().unwrap()
        2
        >>> it.next()
        NONE

        ```
        """
        return Option.from_(next(self._inner, None))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Any `try_*` query on it only returns if a definitive element or a failure exists.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def from_fn[S, V](
        state: S, generator: Callable[[S], Option[tuple[V, S]]]
    ) -> Iter[V]:
        """Create an `Iter` by repeatedly applying a **generator** function to an initial **state**.

        The **generator** must return `Some((value, new_state))` to emit a value, or `NONE` to stop.

        Args:
            state (S): Initial state for the generator.
            generator (Callable[[S], Option[tuple[V, S]]]): Function that generates the next value and state.

        Returns:
            Iter[V]: An iterator generating values produced by the generator function.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> def fib(state: tuple[int, int]) -> ti.Option[tuple[int, tuple[int, int]]]:
        ...     a, b = state
        ...     return ti.NONE if a > 100 else ti.Some((a, (b, a + b)))
        >>> ti.Iter.from_fn((0, 1), fib).try_position(lambda x: ti.Ok(x > 20))
        Ok(Some(8))

        ```
        """

        def _from_fn() -> Iterator[V]:
            current_state: S = state
            while True:
                result = generator(current_state)
                if result.is_none():
                    break
                value, current_state = result.unwrap()
                yield value

        return Iter(_from_fn())

    def collect(self) -> Seq[T]:
        """Materialize the remaining elements into a `Seq`.

        This is the explicit buffering step needed before any search from the right.

        Returns:
            Seq[T]: An immutable, double-ended collection of the elements.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter(x * 10 for x in range(4)).collect().try_rposition(lambda x: ti.Ok(x < 25))
        Ok(Some(2))

        ```
        """
        from ._eager import Seq

        return Seq(tuple(self._inner))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element of the iterator, lazily.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._lazy(partial(map, func))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which **func** returns `True`, lazily.

        Args:
            func (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Iter[T]: An iterator of the kept elements.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter(range(6)).filter(lambda x: x % 2 == 0).collect()
        Seq(0, 2, 4)

        ```
        """
        return self._lazy(partial(filter, func))

    def take(self, n: int) -> Iter[T]:
        """Creates an iterator that yields the first **n** elements, or fewer if the underlying iterator ends sooner.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator of the first **n** items.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter([1, 2, 3]).take(5).collect()
        Seq(1, 2, 3)

        ```
        """
        return self._lazy(partial(cz.itertoolz.take, n))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Iter[T]: An iterator of the items after the first **n**.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter((1, 2, 3)).skip(1).collect()
        Seq(2, 3)

        ```
        """
        return self._lazy(partial(cz.itertoolz.drop, n))

    def length(self) -> int:
        """Consume the iterator and return the count of elements.

        Returns:
            int: The count of elements.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter(range(5)).length()
        5

        ```
        """
        return self.into(cz.itertoolz.count)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the iterator by applying a function to each element.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter([1, 2, 3]).for_each(lambda x: print(x + 1))
        2
        3
        4

        ```
        """
        for v in self._inner:
            func(v, *args, **kwargs)
