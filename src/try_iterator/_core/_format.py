from collections.abc import Iterable
from itertools import islice
from reprlib import Repr
from typing import Any


def iter_repr(
    v: Iterable[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
) -> str:
    head = tuple(islice(v, max_items + 1))
    suffix = ", ..." if len(head) > max_items else ""
    formatter = Repr(maxlevel=depth, maxstring=width, maxother=width)
    return ", ".join(formatter.repr(item) for item in head[:max_items]) + suffix
