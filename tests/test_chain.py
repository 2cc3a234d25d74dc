"""Tests for the chain combinator."""

import logging

import pytest

import lazychain as lc


def _drain[T](it: lc.Cursor[T]) -> list[T]:
    values: list[T] = []
    while True:
        match it.next():
            case lc.Some(value):
                values.append(value)
            case _:
                return values


def test_concatenation_order() -> None:
    """Test that sources are yielded fully, one after the other."""
    assert _drain(lc.chain([1, 2, 3], [4, 5, 6])) == [1, 2, 3, 4, 5, 6]


def test_empty_sources_are_skipped() -> None:
    """Test that empty sources contribute nothing."""
    assert _drain(lc.chain([], [1, 2], [], [3])) == [1, 2, 3]


def test_zero_sources() -> None:
    """Test that a chain without sources is exhausted right away."""
    assert lc.chain().next() is lc.NONE


def test_only_empty_sources() -> None:
    """Test a chain made only of empty sources."""
    it = lc.chain([], (), range(0))
    assert it.next().is_none()


def test_exhaustion_is_idempotent() -> None:
    """Test that an exhausted chain keeps signaling exhaustion."""
    it = lc.chain([1], [2])
    assert _drain(it) == [1, 2]
    for _ in range(5):
        assert it.next().is_none()


def test_none_values_are_not_exhaustion() -> None:
    """Test that `None` elements are yielded as `Some(None)`."""
    it = lc.chain([None], [], [None, 0])
    assert it.next() == lc.Some(None)
    assert it.next() == lc.Some(None)
    assert it.next() == lc.Some(0)
    assert it.next().is_none()


def test_many_consecutive_empty_sources() -> None:
    """Test that long runs of empty sources don't grow the call stack."""
    sources = [[] for _ in range(50_000)]
    it = lc.chain(*sources, [1], *sources)
    assert _drain(it) == [1]


def test_python_iteration() -> None:
    """Test that a chain works as a regular Python iterator."""
    it = lc.chain("ab", ["c"])
    assert iter(it) is it
    assert list(it) == ["a", "b", "c"]
    assert list(it) == []


def test_iterate_returns_self() -> None:
    """Test that a chain is its own iterable."""
    it = lc.chain([1])
    assert it.iterate() is it
    assert lc.iterate(it) is it


def test_sources_are_read_lazily() -> None:
    """Test that no value is read before the chain is pulled."""
    pulled: list[int] = []

    def _gen():
        for x in (1, 2):
            pulled.append(x)
            yield x

    it = lc.chain([0], _gen())
    assert pulled == []
    assert it.next() == lc.Some(0)
    assert pulled == []
    assert it.next() == lc.Some(1)
    assert pulled == [1]


def test_clone_independence() -> None:
    """Test that a clone and its original are drained independently."""
    it = lc.chain([1, 2], [3, 4])
    assert it.next() == lc.Some(1)
    twin = it.clone()
    assert _drain(it) == [2, 3, 4]
    assert _drain(twin) == [2, 3, 4]


def test_clone_non_aliasing_interleaved() -> None:
    """Test that interleaved pulls on a clone and its original don't interfere."""
    it = lc.chain([1, 2], [3, 4])
    it.next()
    twin = it.clone()
    assert it.next() == lc.Some(2)
    assert it.next() == lc.Some(3)
    assert twin.next() == lc.Some(2)
    assert it.next() == lc.Some(4)
    assert it.next().is_none()
    assert _drain(twin) == [3, 4]


def test_clone_does_not_advance_shared_sub_cursors() -> None:
    """Test that a clone never advances the sub-cursors not reached at clone time."""
    later = lc.SeqIter([3, 4])
    it = lc.chain([1, 2], later)
    twin = it.clone()
    assert _drain(twin) == [1, 2, 3, 4]
    assert later.__length_hint__() == 2
    assert _drain(it) == [1, 2, 3, 4]
    assert _drain(twin) == []


def test_clone_flag_is_mutual() -> None:
    """Test that both the original and the clone are flagged."""
    it = lc.chain([1])
    assert not it.cloned
    twin = it.clone()
    assert it.cloned
    assert twin.cloned


def test_clone_before_start_and_after_end() -> None:
    """Test cloning at both ends of a traversal."""
    it = lc.chain([1], [2])
    assert it.clone().collect() == (1, 2)
    it.collect()
    assert it.clone().next().is_none()


def test_clone_of_clone() -> None:
    """Test that clones can be cloned again."""
    it = lc.chain([1, 2, 3])
    it.next()
    first = it.clone()
    first.next()
    second = first.clone()
    assert it.collect() == (2, 3)
    assert first.collect() == (3,)
    assert second.collect() == (3,)


def test_nested_chains() -> None:
    """Test that chains can be chained and cloned recursively."""
    inner = lc.chain([1], [2])
    it = lc.chain(inner, [3])
    assert it.next() == lc.Some(1)
    twin = it.clone()
    assert it.collect() == (2, 3)
    assert twin.collect() == (2, 3)


def test_infinite_source() -> None:
    """Test chaining a finite source before an infinite one."""
    it = lc.chain([-1], lc.CountIter())
    assert [it.next().unwrap() for _ in range(4)] == [-1, 0, 1, 2]
    twin = it.clone()
    assert twin.next() == lc.Some(3)
    assert it.next() == lc.Some(3)


def test_clone_over_generator_fails() -> None:
    """Test that cloning a chain whose active cursor is single-pass fails."""
    it = lc.chain(x for x in range(3))
    it.next()
    with pytest.raises(lc.CloneUnsupportedError):
        it.clone()
    assert not it.cloned
    assert it.collect() == (1, 2)


def test_clone_with_pending_generator_fails() -> None:
    """Test that a single-pass source not reached yet makes `clone()` fail right away."""
    it = lc.chain([1], (x for x in (2, 3)))
    with pytest.raises(lc.CloneUnsupportedError):
        it.clone()
    assert not it.cloned
    assert it.collect() == (1, 2, 3)


def test_failed_clone_keeps_every_source() -> None:
    """Test that no source is dropped from a chain after a failed clone."""
    it = lc.chain([1], (x for x in (2, 3)), [9])
    assert it.next() == lc.Some(1)
    with pytest.raises(lc.CloneUnsupportedError):
        it.clone()
    assert _drain(it) == [2, 3, 9]


def test_clone_of_nested_chain_with_pending_generator_fails() -> None:
    """Test that cloning checks the sub-cursors of nested chains too."""
    inner = lc.chain([1], iter([2]))
    it = lc.chain([0], inner)
    with pytest.raises(lc.CloneUnsupportedError):
        it.clone()
    assert not inner.cloned
    assert it.collect() == (0, 1, 2)


def test_clone_over_sets_and_dicts() -> None:
    """Test that chains over unordered collections can be cloned."""
    it = lc.chain({1}, frozenset({2}), {"k": 3})
    twin = it.clone()
    assert it.collect() == (1, 2, "k")
    assert twin.collect() == (1, 2, "k")


def test_generator_without_clone() -> None:
    """Test that single-pass sources are fine as long as nothing is cloned."""
    assert lc.chain(iter([1]), (x for x in (2, 3))).collect() == (1, 2, 3)


@pytest.mark.parametrize("bad", [None, 42, object()])
def test_invalid_source(bad: object) -> None:
    """Test that invalid sources are rejected when the chain is built."""
    with pytest.raises(lc.ChainSourceError, match="position 1"):
        lc.chain([1], bad)  # type: ignore[arg-type]


def test_invalid_source_is_type_error() -> None:
    """Test that source errors can be caught as `TypeError`."""
    with pytest.raises(TypeError):
        lc.chain(None)  # type: ignore[arg-type]


def test_from_iterable() -> None:
    """Test building a chain from an iterable of sources."""
    it = lc.ChainIterator.from_iterable([[1], [], (2, 3)])
    assert it.collect() == (1, 2, 3)


def test_custom_cursor_source() -> None:
    """Test chaining an object implementing only `iterate()`."""

    class Digits:
        def iterate(self) -> lc.Cursor[int]:
            return lc.SeqIter(range(3))

    assert lc.chain(Digits(), Digits()).collect() == (0, 1, 2, 0, 1, 2)


def test_count_and_advance_by() -> None:
    """Test the draining helpers on a chain."""
    it = lc.chain([1, 2], [3, 4, 5])
    assert it.clone().count() == 5
    assert it.advance_by(3).collect() == (4, 5)


def test_clone_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that clones are reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="lazychain"):
        lc.chain([1]).clone()
    assert any("cloned" in record.getMessage() for record in caplog.records)
