from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Self, overload

from .._core import get_config
from .._results import NONE, Option, Some
from ..traits import TryDoubleEnded
from ._lazy import Iter, convert_data


class Seq[T](TryDoubleEnded[T], Sequence[T]):
    """An immutable, in-memory collection of ordered elements, traversable from both ends.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable sequence.

    The underlying data structure is a `tuple`. If you already have one, it is stored as is.

    Since its length is known and it can be reversed without copying, `Seq` supports `try_rposition` on top of the
    forward queries of `Iter`.

    Args:
        data (Iterable[T]): The data to initialize the Seq with.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> data = ti.Seq([10, 20, 30, 40])
    >>> data.try_position(lambda x: ti.Ok(x == 30))
    Ok(Some(2))
    >>> data.try_rposition(lambda x: ti.Ok(x <= 20))
    Ok(Some(1))
    >>> # a Seq is not consumed by a query
    >>> data.length()
    4

    ```
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = data if isinstance(data, tuple) else tuple(data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...
    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        if isinstance(index, slice):
            return Seq(self._inner[index])
        return self._inner[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into a sequence, or a single value.
            *more_data (U): Unpacked items to include in the sequence, if **data** is not an Iterable.

        Returns:
            Seq[U]: A new Seq instance containing the provided data.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)

        ```
        """
        return Seq(convert_data(data, *more_data))

    def iter(self) -> Iter[T]:
        """Get a lazy `Iter` over the elements.

        Returns:
            Iter[T]: A new iterator, independent of any previous one.
        """
        return Iter(self._inner)

    def inner(self) -> tuple[T, ...]:
        """Get the underlying `tuple`."""
        return self._inner

    def length(self) -> int:
        """Return the number of elements.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([1, 2]).length()
        2

        ```
        """
        return len(self._inner)

    def first(self) -> Option[T]:
        """Return the first element.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if the `Seq` is empty.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([9, 8]).first()
        Some(9)
        >>> ti.Seq([]).first()
        NONE

        ```
        """
        return Some(self._inner[0]) if self._inner else NONE

    def last(self) -> Option[T]:
        """Return the last element.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if the `Seq` is empty.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq([7, 8, 9]).last()
        Some(9)
        >>> ti.Seq([]).last()
        NONE

        ```
        """
        return Some(self._inner[-1]) if self._inner else NONE

    def eq(self, other: Self) -> bool:
        """Check if two `Seq` hold equal elements, in the same order.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Seq((1, 2, 3)).eq(ti.Seq([1, 2, 3]))
        True
        >>> ti.Seq((1, 2, 3)).eq(ti.Seq([1, 2]))
        False

        ```
        """
        return self._inner == other._inner
