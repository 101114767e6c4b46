"""Fallible traversal engine.

All operations share one short-circuiting template, `_search`, which walks `(index, element)` pairs and stops at the
first element whose predicate either fails or returns the boolean the operation is waiting for.

The public functions only differ by:

- the direction of the pairs they feed to the template (forward `enumerate`, or backward with forward-relative indices),
- the boolean that stops the traversal,
- how the stop/exhausted outcome is mapped to their return type.

A predicate `Err` is always returned as is, whatever the operation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Reversible, Sized
from typing import Any, TypeIs, cast

from ._core import get_logger
from ._results import NONE, Ok, Option, Result, Some

type Predicate[T, E] = Callable[[T], Result[bool, E]]
"""A per-element test whose outcome is itself fallible."""
type Found[T] = Option[tuple[int, T]]

_LOGGER = get_logger()


def _search[T, E](
    indexed: Iterable[tuple[int, T]],
    predicate: Predicate[T, E],
    *,
    stop_on: bool,
    operation: str,
) -> Result[Found[T], E]:
    for idx, item in indexed:
        outcome = predicate(item)
        if outcome.is_err():
            _LOGGER.debug("%s: predicate failed at index %d", operation, idx)
            return cast(Result[Found[T], E], outcome)
        if bool(outcome.unwrap()) is stop_on:
            _LOGGER.debug("%s: stopped at index %d", operation, idx)
            return Ok(Some((idx, item)))
    return Ok(NONE)


def _rindexed[T](data: Reversible[T]) -> Iterator[tuple[int, T]]:
    return zip(range(len(data) - 1, -1, -1), reversed(data), strict=False)  # type: ignore[arg-type]


def is_double_ended(data: object) -> TypeIs[Reversible[Any]]:
    """Check if **data** can be traversed from its tail with forward-relative indices.

    Args:
        data (object): The candidate producer.

    Returns:
        bool: `True` if **data** is both `Reversible` and `Sized`.

    Example:
    ```python
    >>> from try_iterator import is_double_ended
    >>> is_double_ended([1, 2]), is_double_ended(range(3)), is_double_ended(x for x in "ab")
    (True, True, False)

    ```
    """
    return isinstance(data, Reversible) and isinstance(data, Sized)


def try_all[T, E](data: Iterable[T], predicate: Predicate[T, E]) -> Result[bool, E]:
    """Tests if every element of **data** matches a fallible **predicate**, stopping at the first error.

    This is the fallible form of the builtin `all()`.

    Stops at the first element for which **predicate** returns `Ok(False)`, or `Err`.

    An empty iterable returns `Ok(True)` without calling **predicate**.

    Args:
        data (Iterable[T]): The elements to test, consumed from the front.
        predicate (Predicate[T, E]): Fallible test applied to each element.

    Returns:
        Result[bool, E]: `Ok(True)` if every element matched, `Ok(False)` at the first mismatch, or the first `Err`.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> def is_foo(item: ti.Result[str, int]) -> ti.Result[bool, int]:
    ...     return item.map(lambda s: s == "foo")
    >>> ti.try_all([ti.Ok("foo"), ti.Ok("foo"), ti.Ok("foo")], is_foo)
    Ok(True)
    >>> ti.try_all([ti.Ok("foo"), ti.Err(4444), ti.Ok("foo")], is_foo)
    Err(4444)
    >>> ti.try_all([], is_foo)
    Ok(True)

    ```
    """
    return _search(enumerate(data), predicate, stop_on=False, operation="try_all").map(
        lambda found: found.is_none()
    )


def try_any[T, E](data: Iterable[T], predicate: Predicate[T, E]) -> Result[bool, E]:
    """Tests if any element of **data** matches a fallible **predicate**, stopping at the first error.

    This is the fallible form of the builtin `any()`.

    Stops at the first element for which **predicate** returns `Ok(True)`, or `Err`.

    An empty iterable returns `Ok(False)` without calling **predicate**.

    Args:
        data (Iterable[T]): The elements to test, consumed from the front.
        predicate (Predicate[T, E]): Fallible test applied to each element.

    Returns:
        Result[bool, E]: `Ok(True)` at the first match, `Ok(False)` if nothing matched, or the first `Err`.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> def is_bar(item: ti.Result[str, int]) -> ti.Result[bool, int]:
    ...     return item.map(lambda s: s == "bar")
    >>> ti.try_any([ti.Ok("foo"), ti.Ok("ayy"), ti.Ok("bar")], is_bar)
    Ok(True)
    >>> ti.try_any([ti.Ok("foo"), ti.Err(7777), ti.Ok("bar")], is_bar)
    Err(7777)

    ```
    """
    return _search(enumerate(data), predicate, stop_on=True, operation="try_any").map(
        lambda found: found.is_some()
    )


def try_position[T, E](
    data: Iterable[T], predicate: Predicate[T, E]
) -> Result[Option[int], E]:
    """Searches for an element of **data**, returning its index, stopping at the first error.

    This is the fallible form of `Iterator::position()`.

    Args:
        data (Iterable[T]): The elements to search, consumed from the front.
        predicate (Predicate[T, E]): Fallible test applied to each element.

    Returns:
        Result[Option[int], E]: `Ok(Some(index))` of the first match, `Ok(NONE)` if nothing matched, or the first `Err`.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> def is_bar(item: ti.Result[str, int]) -> ti.Result[bool, int]:
    ...     return item.map(lambda s: s == "bar")
    >>> ti.try_position([ti.Ok("foo"), ti.Ok("ayy"), ti.Ok("bar")], is_bar)
    Ok(Some(2))
    >>> ti.try_position([ti.Ok("foo"), ti.Err(8888), ti.Ok("bar")], is_bar)
    Err(8888)
    >>> ti.try_position([ti.Ok("foo")], is_bar)
    Ok(NONE)

    ```
    """
    return _search(
        enumerate(data), predicate, stop_on=True, operation="try_position"
    ).map(lambda found: found.map(lambda pair: pair[0]))


def try_rposition[T, E](
    data: Reversible[T], predicate: Predicate[T, E]
) -> Result[Option[int], E]:
    """Searches for an element of **data** from the right, returning its index, stopping at the first error.

    This is the fallible form of `Iterator::rposition()`.

    **data** is visited from its last element to its first, but the returned index is counted from the front.

    **data** must be double-ended, i.e. support both `reversed()` and `len()` (`list`, `tuple`, `range`, `Seq`...).

    It is never buffered: collect lazy iterators first if you need to search them from the right.

    Args:
        data (Reversible[T]): The elements to search, visited from the tail.
        predicate (Predicate[T, E]): Fallible test applied to each element.

    Returns:
        Result[Option[int], E]: `Ok(Some(index))` of the last match, `Ok(NONE)` if nothing matched, or the first `Err` met from the tail.

    Raises:
        TypeError: If **data** is not both `Reversible` and `Sized`. **predicate** is not called.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> def is_foo(item: ti.Result[str, int]) -> ti.Result[bool, int]:
    ...     return item.map(lambda s: s == "foo")
    >>> ti.try_rposition([ti.Ok("foo"), ti.Ok("ayy"), ti.Ok("bar")], is_foo)
    Ok(Some(0))
    >>> ti.try_rposition([ti.Ok("foo"), ti.Err(9999), ti.Ok("bar")], is_foo)
    Err(9999)
    >>> ti.try_rposition((x for x in [1]), lambda x: ti.Ok(True))
    Traceback (most recent call last):
        ...
    TypeError: try_rposition requires a double-ended iterable (Reversible and Sized), got generator

    ```
    """
    if not is_double_ended(data):
        msg = f"try_rposition requires a double-ended iterable (Reversible and Sized), got {type(data).__name__}"
        raise TypeError(msg)
    return _search(
        _rindexed(data), predicate, stop_on=True, operation="try_rposition"
    ).map(lambda found: found.map(lambda pair: pair[0]))


def try_find[T, E](
    data: Iterable[T], predicate: Predicate[T, E]
) -> Result[Option[T], E]:
    """Returns the first element of **data** that satisfies a fallible **predicate**, stopping at the first error.

    This is the fallible form of `Iterator::find()`.

    Args:
        data (Iterable[T]): The elements to search, consumed from the front.
        predicate (Predicate[T, E]): Fallible test applied to each element.

    Returns:
        Result[Option[T], E]: `Ok(Some(element))` for the first match, `Ok(NONE)` if nothing matched, or the first `Err`.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> def is_long(word: str) -> ti.Result[bool, str]:
    ...     if not word:
    ...         return ti.Err("empty word")
    ...     return ti.Ok(len(word) > 3)
    >>> ti.try_find(["a", "bb", "cccc", "dd"], is_long)
    Ok(Some('cccc'))
    >>> ti.try_find(["a", "", "cccc"], is_long)
    Err('empty word')

    ```
    """
    return _search(enumerate(data), predicate, stop_on=True, operation="try_find").map(
        lambda found: found.map(lambda pair: pair[1])
    )
