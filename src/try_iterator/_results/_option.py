from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeIs

if TYPE_CHECKING:
    from ._result import Result


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Optional value: every `Option` is either `Some` and contains a value, or `NONE`.

    Search operations (`try_position`, `try_rposition`, `try_find`) wrap their answer in an `Option`,
    so that "not found" is a value rather than a sentinel index.
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Build an `Option` from a value that may be `None`.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `Some(value)` if **value** is not `None`, `NONE` otherwise.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Option.from_(3)
        Some(3)
        >>> ti.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Some(2).is_some()
        True
        >>> ti.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Some("car").unwrap()
        'car'
        >>> ti.NONE.unwrap()
        Traceback (most recent call last):
            ...
        try_iterator._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with **msg** if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Some(4).unwrap_or(0)
        4
        >>> ti.NONE.unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **f**."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Some("Hello, World!").map(len)
        Some(13)
        >>> ti.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls **f** with the contained value if `Some`, otherwise returns `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls **f** and returns its result."""
        return self if self.is_some() else f()

    def ok_or[E](self, err: E) -> Result[T, E]:
        """Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `NONE` to `Err(err)`.

        Example:
        ```python
        >>> import try_iterator as ti
        >>> ti.Some(1).ok_or("missing")
        Ok(1)
        >>> ti.NONE.ok_or("missing")
        Err('missing')

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err)


@dataclass(slots=True)
class Some[T](Option[T]):
    """`Option` variant representing the presence of a value."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """`Option` variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
