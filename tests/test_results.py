"""Tests for the `Result` and `Option` outcome types."""

import pytest

import try_iterator as ti


class TestPatternMatching:
    """Outcomes can be destructured with `match`."""

    def test_result_pattern_matching(self) -> None:
        """`Ok` and `Err` expose their payload as match arguments."""

        def _describe(result: ti.Result[int, str]) -> str:
            match result:
                case ti.Ok(value):
                    return f"ok {value}"
                case ti.Err(error):
                    return f"err {error}"
                case _:
                    raise AssertionError

        assert _describe(ti.Ok(42)) == "ok 42"
        assert _describe(ti.Err("Something went wrong")) == "err Something went wrong"

    def test_search_outcome_pattern_matching(self) -> None:
        """Nested `Ok(Some(index))` destructures in one pattern."""
        match ti.try_position(["a", "b"], lambda s: ti.Ok(s == "b")):
            case ti.Ok(ti.Some(idx)):
                assert idx == 1
            case _:
                pytest.fail("expected a match")


class TestResult:
    """`Result` combinators."""

    def test_unwrap_err_on_ok_raises(self) -> None:
        """`unwrap_err` on `Ok` raises `ResultUnwrapError`."""
        with pytest.raises(ti.ResultUnwrapError, match="unwrap_err"):
            ti.Ok(1).unwrap_err()

    def test_expect(self) -> None:
        """`expect` returns the value, or raises with the message and the error."""
        assert ti.Ok(1).expect("never") == 1
        with pytest.raises(ti.ResultUnwrapError, match="parsing failed: 'bad'"):
            ti.Err("bad").expect("parsing failed")

    def test_expect_err(self) -> None:
        """`expect_err` returns the error, or raises with the message and the value."""
        assert ti.Err("bad").expect_err("never") == "bad"
        with pytest.raises(ti.ResultUnwrapError, match=r"expected Err, got Ok\(3\)"):
            ti.Ok(3).expect_err("should fail")

    def test_map_err_leaves_ok_untouched(self) -> None:
        """`map_err` only applies to `Err`."""
        assert ti.Ok(1).map_err(len) == ti.Ok(1)
        assert ti.Err("four").map_err(len) == ti.Err(4)

    def test_map_keeps_err_instance(self) -> None:
        """`map` on `Err` returns the same instance."""
        failure: ti.Result[int, str] = ti.Err("x")
        assert failure.map(lambda x: x + 1) is failure

    def test_or_else(self) -> None:
        """`or_else` recovers from `Err` only."""
        assert ti.Err("x").or_else(lambda e: ti.Ok(len(e))) == ti.Ok(1)
        assert ti.Ok(2).or_else(lambda _: ti.Ok(0)) == ti.Ok(2)

    def test_ok_and_err_conversions(self) -> None:
        """`ok`/`err` convert to `Option`."""
        assert ti.Ok(1).ok() == ti.Some(1)
        assert ti.Ok(1).err() == ti.NONE
        assert ti.Err("e").ok() == ti.NONE
        assert ti.Err("e").err() == ti.Some("e")

    def test_unwrap_or_else(self) -> None:
        """`unwrap_or_else` computes a default from the error."""
        assert ti.Err("four").unwrap_or_else(len) == 4

    def test_variants_are_not_equal(self) -> None:
        """`Ok(x)` and `Err(x)` never compare equal."""
        assert ti.Ok(1) != ti.Err(1)


class TestOption:
    """`Option` combinators."""

    def test_from_none(self) -> None:
        """`Option.from_` maps `None` to `NONE`."""
        assert ti.Option.from_(None) is ti.NONE
        assert ti.Option.from_(0) == ti.Some(0)

    def test_expect_on_none_raises(self) -> None:
        """`expect` on `NONE` raises `OptionUnwrapError` with the message."""
        with pytest.raises(ti.OptionUnwrapError, match="no index"):
            ti.NONE.expect("no index")

    def test_and_then_or_else(self) -> None:
        """`and_then` chains on `Some`, `or_else` recovers from `NONE`."""
        assert ti.Some(2).and_then(lambda x: ti.Some(x * 2)) == ti.Some(4)
        assert ti.NONE.and_then(lambda x: ti.Some(x)) == ti.NONE  # noqa: PLW0108
        assert ti.NONE.or_else(lambda: ti.Some(1)) == ti.Some(1)

    def test_unwrap_or_else(self) -> None:
        """`unwrap_or_else` calls the default factory on `NONE` only."""
        assert ti.Some(1).unwrap_or_else(lambda: 0) == 1
        assert ti.NONE.unwrap_or_else(lambda: 0) == 0

    def test_reprs(self) -> None:
        """Outcomes render like their Rust counterparts."""
        assert repr(ti.Ok(ti.Some(2))) == "Ok(Some(2))"
        assert repr(ti.Ok(ti.NONE)) == "Ok(NONE)"
        assert repr(ti.Err("e")) == "Err('e')"
