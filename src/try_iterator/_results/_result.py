from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome of a fallible computation: either `Ok(value)` or `Err(error)`.

    Fallible predicates return `Result[bool, E]`, and every `try_*` operation forwards the first `Err`
    it receives as its own outcome.

    Both variants are dataclasses, so they can be destructured with `match`:
    ```python
    >>> import try_iterator as ti
    >>> match ti.try_all([1, 2], lambda x: ti.Ok(x > 0)):
    ...     case ti.Ok(value):
    ...         print(f"decided: {value}")
    ...     case ti.Err(error):
    ...         print(f"failed: {error}")
    decided: True

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Ok`.

        Equivalent to Rust's `Result::is_ok()`.
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Err`.

        Equivalent to Rust's `Result::is_err()`.
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Ok(2).unwrap()
        2
        >>> ti.Err("emergency failure").unwrap()
        Traceback (most recent call last):
            ...
        try_iterator._results._result.ResultUnwrapError: called `unwrap` on Err: 'emergency failure'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`.
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Ok` value, or raises `ResultUnwrapError` with **msg** and the error.

        Args:
            msg (str): The message to display if the result is `Err`.

        Returns:
            T: The contained `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`.
        """
        if self.is_ok():
            return self.unwrap()
        msg = f"{msg}: {self.unwrap_err()!r}"
        raise ResultUnwrapError(msg)

    def expect_err(self, msg: str) -> E:
        """Returns the contained `Err` value, or raises `ResultUnwrapError` with **msg** and the value.

        Args:
            msg (str): The message to display if the result is `Ok`.

        Returns:
            E: The contained `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`.
        """
        if self.is_err():
            return self.unwrap_err()
        msg = f"{msg}: expected Err, got Ok({self.unwrap()!r})"
        raise ResultUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Ok` value or a provided default.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Ok(9).unwrap_or(2)
        9
        >>> ti.Err("error").unwrap_or(2)
        2

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained `Ok` value or computes it from the error with **f**."""
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a `Result[T, E]` to `Result[U, E]` by applying **f** to a contained `Ok` value, leaving `Err` untouched.

        The `Err` instance is returned as is, not copied.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Ok(2).map(lambda x: x * 10)
        Ok(20)
        >>> ti.Err("nope").map(lambda x: x * 10)
        Err('nope')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a `Result[T, E]` to `Result[T, F]` by applying **f** to a contained `Err` value, leaving `Ok` untouched."""
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls **f** with the `Ok` value, otherwise returns the `Err` untouched.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> def halve(x: int) -> ti.Result[int, str]:
        ...     return ti.Ok(x // 2) if x % 2 == 0 else ti.Err(f"{x} is odd")
        >>> ti.Ok(8).and_then(halve).and_then(halve)
        Ok(2)
        >>> ti.Ok(6).and_then(halve).and_then(halve)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Calls **f** with the `Err` value, otherwise returns the `Ok` untouched."""
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.unwrap_err())

    def ok(self) -> Option[T]:
        """Converts the `Result` into an `Option`, mapping `Ok(v)` to `Some(v)` and `Err(e)` to `NONE`."""
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the `Result` into an `Option`, mapping `Err(e)` to `Some(e)` and `Ok(v)` to `NONE`."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """`Result` variant containing the success value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap_err` on Ok: {self.value!r}")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """`Result` variant containing the error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
