"""Public mixins traits for the iterable wrappers, and custom user implementations.

Python doesn't allow adding methods to the builtin iterators, so the fallible operations are grafted as mixins instead.

- `Pipeable` depends only on `Self`, and can be added to any class.
- `TryIterable` requires `__iter__`, and provides the forward operations (`try_all`, `try_any`, `try_position`, `try_find`).
- `TryDoubleEnded` additionally requires `__reversed__` and `__len__`, and provides the backward search (`try_rposition`).

The capability to search from the right is thus carried by the type: a lazy `Iter` is only a `TryIterable`,
while a `Seq` is a `TryDoubleEnded`.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import more_itertools as mit

from . import _traversal
from ._results import Option

if TYPE_CHECKING:
    from ._results import Result

__all__ = ["Pipeable", "TryDoubleEnded", "TryIterable"]


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3]).into(sum)
        6

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3, 4]).inspect(print).last()
        Seq(1, 2, 3, 4)
        Some(4)

        ```
        """
        func(self, *args, **kwargs)
        return self


class TryIterable[T](Pipeable, Iterable[T]):
    """Mixin trait class declaring that `Self` is an `Iterable` supporting fallible queries.

    Subclasses only need to implement `__iter__`.

    Every method consumes `Self` from the front: on a one-shot `Iterator`, the elements after the stop point are left
    in it, but are never passed to the predicate.

    Example:
    ```python
    >>> from try_iterator import Ok, traits
    >>> class Countdown(traits.TryIterable[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.start = start
    ...
    ...     def __iter__(self):
    ...         return iter(range(self.start, 0, -1))
    >>>
    >>> Countdown(5).try_position(lambda x: Ok(x == 2))
    Ok(Some(3))

    ```
    """

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    def try_all[E](self, predicate: _traversal.Predicate[T, E]) -> Result[bool, E]:
        """Tests if every element matches a fallible **predicate**, stopping at the first error.

        See `try_iterator.try_all`.

        Args:
            predicate (Predicate[T, E]): Fallible test applied to each element.

        Returns:
            Result[bool, E]: `Ok(True)` if every element matched, `Ok(False)` at the first mismatch, or the first `Err`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3]).try_all(lambda x: ti.Ok(x < 3))
        Ok(False)
        >>> ti.Seq([1, 2, 3]).try_all(lambda x: ti.Ok(x > 0))
        Ok(True)

        ```
        """
        return self.into(_traversal.try_all, predicate)

    def try_any[E](self, predicate: _traversal.Predicate[T, E]) -> Result[bool, E]:
        """Tests if any element matches a fallible **predicate**, stopping at the first error.

        See `try_iterator.try_any`.

        Args:
            predicate (Predicate[T, E]): Fallible test applied to each element.

        Returns:
            Result[bool, E]: `Ok(True)` at the first match, `Ok(False)` if nothing matched, or the first `Err`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3]).try_any(lambda x: ti.Ok(x == 2))
        Ok(True)
        >>> ti.Seq([1, 2, 3]).try_any(lambda x: ti.Err("boom") if x == 2 else ti.Ok(False))
        Err('boom')

        ```
        """
        return self.into(_traversal.try_any, predicate)

    def try_position[E](
        self, predicate: _traversal.Predicate[T, E]
    ) -> Result[Option[int], E]:
        """Searches for an element, returning its index, stopping at the first error.

        See `try_iterator.try_position`.

        Args:
            predicate (Predicate[T, E]): Fallible test applied to each element.

        Returns:
            Result[Option[int], E]: `Ok(Some(index))` of the first match, `Ok(NONE)` if nothing matched, or the first `Err`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Iter.from_count(10, 10).try_position(lambda x: ti.Ok(x > 35))
        Ok(Some(3))

        ```
        """
        return self.into(_traversal.try_position, predicate)

    def try_find[E](self, predicate: _traversal.Predicate[T, E]) -> Result[Option[T], E]:
        """Returns the first element satisfying a fallible **predicate**, stopping at the first error.

        See `try_iterator.try_find`.

        Args:
            predicate (Predicate[T, E]): Fallible test applied to each element.

        Returns:
            Result[Option[T], E]: `Ok(Some(element))` for the first match, `Ok(NONE)` if nothing matched, or the first `Err`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq(["1", "2", "lol", "4"]).try_find(lambda s: ti.Ok(s.isdigit() and int(s) > 1))
        Ok(Some('2'))

        ```
        """
        return self.into(_traversal.try_find, predicate)

    def all(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Tests if every element matches a **predicate**.

        An empty iterable returns `True`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item. Defaults to checking truthiness.

        Returns:
            bool: `True` if all elements match the predicate, `False` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, True]).all()
        True
        >>> ti.Seq([2, 4, 5]).all(lambda x: x % 2 == 0)
        False

        ```
        """

        def _all(data: Iterable[T]) -> bool:
            return all(predicate(x) for x in data)

        return self.into(_all)

    def any(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Tests if any element matches a **predicate**.

        An empty iterable returns `False`.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item. Defaults to checking truthiness.

        Returns:
            bool: `True` if any element matches the predicate, `False` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([0, 1]).any()
        True
        >>> ti.Seq([]).any()
        False

        ```
        """

        def _any(data: Iterable[T]) -> bool:
            return any(predicate(x) for x in data)

        return self.into(_any)

    def position(self, predicate: Callable[[T], bool]) -> Option[int]:
        """Searches for an element matching **predicate**, returning its index.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Option[int]: `Some(index)` of the first match, `NONE` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3]).position(lambda x: x == 2)
        Some(1)
        >>> ti.Seq([1, 2, 3]).position(lambda x: x == 5)
        NONE

        ```
        """

        def _position(data: Iterable[T]) -> Option[int]:
            return Option.from_(mit.first(mit.locate(data, predicate), None))

        return self.into(_position)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Searches for an element satisfying **predicate**.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Option[T]: `Some(element)` for the first match, `NONE` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq(range(10)).find(lambda x: x > 5)
        Some(6)
        >>> ti.Seq(range(10)).find(lambda x: x > 9).unwrap_or("missing")
        'missing'

        ```
        """
        from ._results import NONE, Some

        def _find(data: Iterable[T]) -> Option[T]:
            for item in data:
                if predicate(item):
                    return Some(item)
            return NONE

        return self.into(_find)


class TryDoubleEnded[T](TryIterable[T]):
    """Mixin trait class declaring that `Self` can be traversed from both ends, with a known length.

    Subclasses need to implement `__iter__`, `__reversed__` and `__len__`, which makes them `Reversible` and `Sized`
    for `isinstance` checks.

    Provides the backward searches, whose returned indices are always counted from the front.
    """

    __slots__ = ()

    @abstractmethod
    def __reversed__(self) -> Iterator[T]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def try_rposition[E](
        self, predicate: _traversal.Predicate[T, E]
    ) -> Result[Option[int], E]:
        """Searches for an element from the right, returning its index, stopping at the first error.

        See `try_iterator.try_rposition`.

        Args:
            predicate (Predicate[T, E]): Fallible test applied to each element, from the last to the first.

        Returns:
            Result[Option[int], E]: `Ok(Some(index))` of the last match, `Ok(NONE)` if nothing matched, or the first `Err` met from the tail.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> visited = []
        >>> def is_thirty(x: int) -> ti.Result[bool, str]:
        ...     visited.append(x)
        ...     return ti.Ok(x == 30)
        >>> ti.Seq([10, 20, 30, 40]).try_rposition(is_thirty)
        Ok(Some(2))
        >>> visited
        [40, 30]

        ```
        """
        return self.into(_traversal.try_rposition, predicate)

    def rposition(self, predicate: Callable[[T], bool]) -> Option[int]:
        """Searches for an element matching **predicate** from the right, returning its index from the front.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Option[int]: `Some(index)` of the last match, `NONE` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2, 3, 2]).rposition(lambda x: x == 2)
        Some(3)

        ```
        """

        def _rposition(data: Iterable[T]) -> Option[int]:
            return Option.from_(mit.first(mit.rlocate(data, predicate), None))

        return self.into(_rposition)
