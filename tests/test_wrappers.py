"""Tests for the `Iter`/`Seq` wrappers and the traits they implement."""

from collections.abc import Iterator, Reversible, Sized

import pytest

import try_iterator as ti
from try_iterator import traits


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:
    """Wrappers and outcomes don't carry a `__dict__`."""
    assert _check_slots(ti.Iter(()))
    assert _check_slots(ti.Seq(()))
    assert _check_slots(ti.Some(42))
    assert _check_slots(ti.NoneOption())
    assert _check_slots(ti.Err[int, object](42))
    assert _check_slots(ti.Ok[int, object](42))


class TestIter:
    """`Iter` is lazy and single-use."""

    def test_query_consumes_up_to_stop_point(self) -> None:
        """A query leaves the elements after its stop point in the `Iter`."""
        it = ti.Iter(range(6))
        assert it.try_any(lambda x: ti.Ok(x == 2)) == ti.Ok(True)
        assert it.try_all(lambda x: ti.Ok(x > 2)) == ti.Ok(True)
        assert it.next() == ti.NONE

    def test_is_not_double_ended(self) -> None:
        """`Iter` has no tail, and does not expose `try_rposition`."""
        it = ti.Iter([1, 2])
        assert not ti.is_double_ended(it)
        assert not hasattr(it, "try_rposition")
        assert it.collect().try_rposition(lambda x: ti.Ok(x == 1)) == ti.Ok(ti.Some(0))

    def test_chained_adapters_stay_lazy(self) -> None:
        """Adapters only pull what the query needs."""
        pulled: list[int] = []
        result = (
            ti.Iter.from_count()
            .map(lambda x: pulled.append(x) or x * 3)
            .filter(lambda x: x % 2 == 0)
            .try_find(lambda x: ti.Ok(x > 10))
        )
        assert result == ti.Ok(ti.Some(12))
        assert pulled == [0, 1, 2, 3, 4]

    def test_skip_take_length(self) -> None:
        """`skip`/`take` compose with `length`."""
        assert ti.Iter(range(10)).skip(2).take(5).length() == 5

    def test_repr_does_not_consume(self) -> None:
        """`repr` shows the inner iterator type without pulling from it."""
        it = ti.Iter([1, 2])
        assert repr(it) == "Iter(<list_iterator>)"
        assert it.collect().eq(ti.Seq((1, 2)))

    def test_for_each_consumes(self) -> None:
        """`for_each` forwards extra arguments and exhausts the `Iter`."""
        seen: list[int] = []
        it = ti.Iter([1, 2])
        it.for_each(lambda x, offset: seen.append(x + offset), 10)
        assert seen == [11, 12]
        assert it.next() == ti.NONE

    def test_is_an_iterator(self) -> None:
        """`Iter` can be used wherever an `Iterator` is expected."""
        it = ti.Iter("ab")
        assert isinstance(it, Iterator)
        assert list(it) == ["a", "b"]


class TestSeq:
    """`Seq` is eager, reusable and double-ended."""

    def test_is_double_ended(self) -> None:
        """`Seq` is `Reversible` and `Sized`."""
        data = ti.Seq([1, 2, 3])
        assert isinstance(data, Reversible)
        assert isinstance(data, Sized)
        assert ti.is_double_ended(data)

    def test_reusable_across_queries(self) -> None:
        """Queries on a `Seq` don't consume it."""
        data = ti.Seq([3, 1, 3])
        assert data.try_position(lambda x: ti.Ok(x == 3)) == ti.Ok(ti.Some(0))
        assert data.try_rposition(lambda x: ti.Ok(x == 3)) == ti.Ok(ti.Some(2))
        assert data.rposition(lambda x: x == 1) == ti.Some(1)

    def test_sequence_protocol(self) -> None:
        """Indexing, slicing and membership follow `tuple`."""
        data = ti.Seq.from_(1, 2, 3)
        assert data[0] == 1
        assert data[1:].eq(ti.Seq((2, 3)))
        assert 3 in data
        assert data.inner() == (1, 2, 3)
        assert list(reversed(data)) == [3, 2, 1]

    def test_first_and_last(self) -> None:
        """`first`/`last` return `NONE` on an empty `Seq` instead of raising."""
        assert ti.Seq([4, 5, 6]).first() == ti.Some(4)
        assert ti.Seq([4, 5, 6]).last() == ti.Some(6)
        assert ti.Seq(()).first() == ti.NONE
        assert ti.Seq(()).last() == ti.NONE
        assert ti.Seq([None]).first() == ti.Some(None)

    def test_rposition_visits_from_tail(self) -> None:
        """`try_rposition` on a `Seq` visits from the last element."""
        visited: list[int] = []

        def _pred(x: int) -> ti.Result[bool, str]:
            visited.append(x)
            return ti.Err("stop") if x == 2 else ti.Ok(False)

        assert ti.Seq([1, 2, 3, 4]).try_rposition(_pred) == ti.Err("stop")
        assert visited == [4, 3, 2]


class TestTraits:
    """User classes get the operations by implementing the trait requirements."""

    def test_custom_iterable(self) -> None:
        """A `TryIterable` only needs `__iter__`."""

        class Evens(traits.TryIterable[int]):
            __slots__ = ("n",)

            def __init__(self, n: int) -> None:
                self.n = n

            def __iter__(self) -> Iterator[int]:
                return iter(range(0, self.n * 2, 2))

        evens = Evens(5)
        assert evens.try_all(lambda x: ti.Ok(x % 2 == 0)) == ti.Ok(True)
        assert evens.try_position(lambda x: ti.Ok(x == 6)) == ti.Ok(ti.Some(3))
        assert evens.position(lambda x: x == 6) == ti.Some(3)

    def test_custom_double_ended(self) -> None:
        """A `TryDoubleEnded` needs `__iter__`, `__reversed__` and `__len__`."""

        class Window(traits.TryDoubleEnded[str]):
            __slots__ = ("text",)

            def __init__(self, text: str) -> None:
                self.text = text

            def __iter__(self) -> Iterator[str]:
                return iter(self.text)

            def __reversed__(self) -> Iterator[str]:
                return reversed(self.text)

            def __len__(self) -> int:
                return len(self.text)

        window = Window("abcab")
        assert window.try_rposition(lambda c: ti.Ok(c == "a")) == ti.Ok(ti.Some(3))
        assert window.rposition(lambda c: c == "c") == ti.Some(2)

    def test_double_ended_requires_reversed_and_len(self) -> None:
        """A `TryDoubleEnded` missing its requirements can't be instantiated."""

        class Incomplete(traits.TryDoubleEnded[int]):
            def __iter__(self) -> Iterator[int]:
                return iter(())

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]

    def test_pipeable(self) -> None:
        """`into` passes `Self` to a function, `inspect` returns `Self`."""
        seen: list[int] = []
        data = ti.Seq([1, 2])
        assert data.inspect(lambda s: seen.append(s.length())) is data
        assert seen == [2]
        assert data.into(ti.try_rposition, lambda x: ti.Ok(x == 1)) == ti.Ok(ti.Some(0))
