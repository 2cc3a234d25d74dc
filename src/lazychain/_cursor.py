"""The iteration protocol shared by every lazychain iterator.

A `Cursor` is a mutable position over an ordered, possibly infinite sequence.
It can be pulled with `next()`, which returns an `Option`, and copied with `clone()`, which returns an independent cursor resuming from the same position.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

import cytoolz as cz
import more_itertools as mit

from ._core import Pipeable
from ._results import Some

if TYPE_CHECKING:
    from ._results import Option


@runtime_checkable
class SupportsIterate[T](Protocol):
    """Any object able to provide a `Cursor` over its values."""

    def iterate(self) -> Cursor[T]: ...


@runtime_checkable
class SupportsClone(Protocol):
    """Any object able to provide an independent copy of itself."""

    def clone(self) -> Self: ...


class Cursor[T](Pipeable, Iterator[T]):
    """Base class of all lazychain iterators.

    Subclasses implement `next()` and `clone()`.

    - `next()` returns `Some(value)` for each element in order, then `NONE` on every further call.
    - `clone()` returns a new cursor producing exactly the remaining elements, without any effect on `self`.
      Cursors over a single-pass source raise `CloneUnsupportedError` instead.

    A `Cursor` is also a standard Python `Iterator`, so it can be used in a for-loop, or given to any function expecting an `Iterable`.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.SeqIter([1, 2, 3])
    >>> it.next()
    Some(value=1)
    >>> twin = it.clone()
    >>> list(it)
    [2, 3]
    >>> it.next()
    NONE
    >>> list(twin)
    [2, 3]

    ```
    """

    __slots__ = ()

    @abstractmethod
    def next(self) -> Option[T]:
        """Pull the next element.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the cursor is exhausted.
        """
        ...

    @abstractmethod
    def clone(self) -> Self:
        """Create an independent cursor resuming from the current position.

        Returns:
            Self: A new cursor yielding the same remaining elements as `self`.

        Raises:
            CloneUnsupportedError: If the underlying source can't be traversed twice.
        """
        ...

    def iterate(self) -> Self:
        """Return `self`, so that a cursor can be used anywhere an iterable source is expected."""
        return self

    def __next__(self) -> T:
        match self.next():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def collect(self) -> tuple[T, ...]:
        """Drain the remaining elements into a `tuple`.

        Returns:
            tuple[T, ...]: The remaining elements, in order.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.chain([1, 2], (3,)).collect()
        (1, 2, 3)

        ```
        """
        return tuple(self)

    def count(self) -> int:
        """Drain the cursor and count the remaining elements.

        Clone it first if the elements are still needed.

        Returns:
            int: The number of remaining elements.

        Example:
        ```python
        >>> import lazychain as lc
        >>> it = lc.chain([1, 2], [], [3])
        >>> it.clone().count()
        3
        >>> it.collect()
        (1, 2, 3)

        ```
        """
        return cz.itertoolz.count(self)

    def advance_by(self, n: int) -> Self:
        """Discard up to **n** elements.

        Args:
            n (int): The number of elements to skip.

        Returns:
            Self: The cursor itself, advanced.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.CountIter(10).advance_by(5).next()
        Some(value=15)

        ```
        """
        mit.consume(self, n)
        return self
