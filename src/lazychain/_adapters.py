from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence

import cytoolz as cz

from ._core import get_config
from ._cursor import Cursor, SupportsIterate
from ._errors import ChainSourceError, CloneUnsupportedError
from ._results import NONE, Option, Some

logger = logging.getLogger(__name__)

_IMMUTABLE_SEQUENCES = (tuple, range, str, bytes)


class SeqIter[T](Cursor[T]):
    """A cursor over a finite, ordered sequence of values.

    Mutable sequences are snapshotted into a `tuple` at construction, so later changes of the caller's data never reach the cursor or its clones.

    Cloning is cheap: the clone shares the immutable backing sequence and only copies the read position.

    Args:
        data (Iterable[T]): The values to iterate over.

    Example:
    ```python
    >>> import lazychain as lc
    >>> data = [1, 2, 3]
    >>> it = lc.SeqIter(data)
    >>> data.append(4)
    >>> it.collect()
    (1, 2, 3)

    ```
    """

    _data: Sequence[T]
    _index: int

    __slots__ = ("_data", "_index")

    def __init__(self, data: Iterable[T]) -> None:
        self._data = data if isinstance(data, _IMMUTABLE_SEQUENCES) else tuple(data)  # pyright: ignore[reportAttributeAccessIssue]
        self._index = 0

    def __repr__(self) -> str:
        remaining = itertools.islice(self._data, self._index, None)
        return f"{self.__class__.__name__}({get_config().iter_repr(remaining)})"

    def __length_hint__(self) -> int:
        return len(self._data) - self._index

    def next(self) -> Option[T]:
        if self._index >= len(self._data):
            return NONE
        value = self._data[self._index]
        self._index += 1
        return Some(value)

    def clone(self) -> SeqIter[T]:
        twin = SeqIter(self._data)
        twin._index = self._index
        return twin


class CountIter(Cursor[int]):
    """An infinite cursor of evenly spaced integers.

    **Warning** ⚠️
        This creates an infinite cursor.
        Never `collect()` it; use `advance_by()` or `next()` instead, or `itertools.islice` on it.

    Args:
        start (int): Starting value of the sequence. Defaults to 0.
        step (int): Difference between consecutive values. Defaults to 1.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.CountIter(10, 2)
    >>> it.next().unwrap(), it.next().unwrap()
    (10, 12)
    >>> it.clone().next()
    Some(value=14)
    >>> it.next()
    Some(value=14)

    ```
    """

    _current: int
    _step: int

    __slots__ = ("_current", "_step")

    def __init__(self, start: int = 0, step: int = 1) -> None:
        self._current = start
        self._step = step

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(start={self._current}, step={self._step})"

    def next(self) -> Option[int]:
        value = self._current
        self._current += self._step
        return Some(value)

    def clone(self) -> CountIter:
        return CountIter(self._current, self._step)


class FnIter[S, V](Cursor[V]):
    """A cursor generated by repeatedly applying a **generator** function to a **state**.

    The **generator** takes the current state and must return:

    - `Some((value, new_state))` to emit `value` and continue with `new_state`.
    - `NONE` to stop the generation. The cursor then stays exhausted.

    The **generator** must be pure and the states must not be mutated, since clones share them.

    Args:
        state (S): The initial state.
        generator (Callable[[S], Option[tuple[V, S]]]): Produces the next value and state.

    Example:
    ```python
    >>> import lazychain as lc
    >>> def halve(n: int) -> lc.Option[tuple[int, int]]:
    ...     return lc.Some((n, n // 2)) if n > 0 else lc.NONE
    >>> it = lc.FnIter(20, halve)
    >>> it.next()
    Some(value=20)
    >>> it.clone().collect()
    (10, 5, 2, 1)
    >>> it.collect()
    (10, 5, 2, 1)

    ```
    """

    _state: S
    _generator: Callable[[S], Option[tuple[V, S]]]
    _done: bool

    __slots__ = ("_done", "_generator", "_state")

    def __init__(self, state: S, generator: Callable[[S], Option[tuple[V, S]]]) -> None:
        self._state = state
        self._generator = generator
        self._done = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state!r}, done={self._done})"

    def next(self) -> Option[V]:
        if self._done:
            return NONE
        match self._generator(self._state):
            case Some((value, state)):
                self._state = state
                return Some(value)
            case _:
                self._done = True
                return NONE

    def clone(self) -> FnIter[S, V]:
        twin = FnIter(self._state, self._generator)
        twin._done = self._done
        return twin


class PyIter[T](Cursor[T]):
    """A cursor over any Python `Iterable`, such as a generator or a file.

    The source is consumed on demand, only once.
    Hence a `PyIter` can't be cloned: `clone()` always raises `CloneUnsupportedError`.

    Once the source raised `StopIteration`, the cursor stays exhausted even if the source would resume.

    Args:
        data (Iterable[T]): The source to wrap.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.PyIter(x * 2 for x in range(3))
    >>> it.next()
    Some(value=0)
    >>> it.clone()
    Traceback (most recent call last):
        ...
    lazychain._errors.CloneUnsupportedError: cannot clone a cursor over a single-pass generator

    ```
    """

    _inner: Iterator[T]
    _done: bool

    __slots__ = ("_done", "_inner")

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)
        self._done = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    def next(self) -> Option[T]:
        if self._done:
            return NONE
        try:
            return Some(next(self._inner))
        except StopIteration:
            self._done = True
            return NONE

    def clone(self) -> PyIter[T]:
        kind = type(self._inner).__name__
        logger.debug("refusing to clone %s over %s", self.__class__.__name__, kind)
        msg = f"cannot clone a cursor over a single-pass {kind}"
        raise CloneUnsupportedError(msg)


def iterate[T](data: Iterable[T] | SupportsIterate[T]) -> Cursor[T]:
    """Get a `Cursor` over any supported source.

    - Objects providing an `iterate()` method, cursors included, are asked for their own cursor.
    - Finite `Collection` values (`list`, `tuple`, `range`, `str`, `set`, `dict`...) give a cloneable `SeqIter`.
      Unordered ones are snapshotted in their iteration order, `dict` giving its keys.
    - Any other `Iterable` gives a single-pass `PyIter`.

    Args:
        data (Iterable[T] | SupportsIterate[T]): The source to iterate over.

    Returns:
        Cursor[T]: A cursor over the values of **data**.

    Raises:
        ChainSourceError: If **data** is `None` or isn't iterable.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.iterate([1, 2])
    SeqIter(1, 2)
    >>> it = lc.CountIter()
    >>> lc.iterate(it) is it
    True
    >>> lc.iterate(None)
    Traceback (most recent call last):
        ...
    lazychain._errors.ChainSourceError: expected an iterable source, got None

    ```
    """
    match data:
        case None:
            raise ChainSourceError("expected an iterable source, got None")
        case SupportsIterate():
            return data.iterate()
        case Collection():
            return SeqIter(data)
        case _ if cz.itertoolz.isiterable(data):
            return PyIter(data)
        case _:
            msg = f"expected an iterable source, got {type(data).__name__}"
            raise ChainSourceError(msg)
