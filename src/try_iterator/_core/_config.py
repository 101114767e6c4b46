from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from ._format import iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for the wrappers representation.

    Args:
        max_items (int): Maximum number of elements shown in a `Seq` repr before truncating with `...`.
        depth (int): Maximum nesting level shown for each element.
        width (int): Maximum length of each element representation.

    Example:
    ```python
    >>> import try_iterator as ti
    >>> from try_iterator._core import get_config
    >>> previous = get_config().set(max_items=3)
    >>> ti.Seq(range(10))
    Seq(0, 1, 2, ...)
    >>> _ = get_config().set(max_items=previous.max_items)
    >>> ti.Seq(range(4))
    Seq(0, 1, 2, 3)

    ```
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80

    def iter_repr(self, v: Iterable[Any]) -> str:
        return iter_repr(v, self.max_items, self.depth, self.width)

    def set(self, **changes: int) -> Config:
        """Replace the active configuration with a copy of it updated with **changes**.

        Changes are applied on top of the active configuration, whichever handle the method is called on.

        Returns:
            Config: The configuration that was active before the call.
        """
        global _CONFIG  # noqa: PLW0603
        previous = _CONFIG
        _CONFIG = replace(previous, **changes)
        return previous


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG
