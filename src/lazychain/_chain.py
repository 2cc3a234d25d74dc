from __future__ import annotations

import logging
from collections.abc import Iterable

from ._adapters import SeqIter, iterate
from ._cursor import Cursor, SupportsIterate
from ._errors import ChainSourceError
from ._results import NONE, Option, Some

logger = logging.getLogger(__name__)


def chain[T](*sources: Iterable[T] | SupportsIterate[T]) -> ChainIterator[T]:
    """Chain together several sources.

    A cursor is obtained from every source right away, but no value is read until the chain is pulled.

    Args:
        *sources (Iterable[T] | SupportsIterate[T]): The sources of interest.

    Returns:
        ChainIterator[T]: A cursor yielding the values of the sources, in the order in which they are supplied.

    Raises:
        ChainSourceError: If one of the sources is `None` or isn't iterable.

    Example:
    ```python
    >>> import lazychain as lc
    >>> lc.chain([1, 2, 3], [4, 5, 6]).collect()
    (1, 2, 3, 4, 5, 6)
    >>> lc.chain().next()
    NONE
    >>> lc.chain([1], None)
    Traceback (most recent call last):
        ...
    lazychain._errors.ChainSourceError: invalid source at position 1: expected an iterable source, got None

    ```
    """
    cursors: list[Cursor[T]] = []
    for idx, source in enumerate(sources):
        try:
            cursors.append(iterate(source))
        except ChainSourceError as exc:
            msg = f"invalid source at position {idx}: {exc}"
            raise ChainSourceError(msg) from exc
    return ChainIterator(SeqIter(cursors))


class ChainIterator[T](Cursor[T]):
    """A cursor which chains together several cursors.

    It holds a cursor over the sub-cursors (the **source**), and the sub-cursor currently drained, if any.

    Empty sub-cursors are skipped within a single `next()` call, whatever their number.

    Cloning is deep: the clone gets its own copy of the active sub-cursor and of every sub-cursor still waiting in the **source**.
    Hence a chain and its clones never share a sub-cursor, and a chain holding a single-pass sub-cursor can't be cloned at all.
    The **source** must be finite.

    Args:
        source (Cursor[Cursor[T]]): The cursor of sub-cursors of interest.

    Example:
    ```python
    >>> import lazychain as lc
    >>> it = lc.chain([1, 2], [3, 4])
    >>> it.next()
    Some(value=1)
    >>> twin = it.clone()
    >>> it.collect()
    (2, 3, 4)
    >>> twin.collect()
    (2, 3, 4)

    ```
    """

    _source: Cursor[Cursor[T]]
    _active: Cursor[T] | None
    _cloned: bool

    __slots__ = ("_active", "_cloned", "_source")

    def __init__(self, source: Cursor[Cursor[T]]) -> None:
        self._source = source
        self._active = None
        self._cloned = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(active={self._active!r}, cloned={self._cloned})"

    @staticmethod
    def from_iterable[U](
        sources: Iterable[Iterable[U] | SupportsIterate[U]],
    ) -> ChainIterator[U]:
        """Chain together the sources yielded by **sources**.

        **sources** is read entirely when called, so it must be finite.

        Args:
            sources (Iterable[Iterable[U] | SupportsIterate[U]]): The sources of interest.

        Returns:
            ChainIterator[U]: A cursor yielding the values of each source in turn.

        Example:
        ```python
        >>> import lazychain as lc
        >>> lc.ChainIterator.from_iterable(range(n) for n in range(4)).collect()
        (0, 0, 1, 0, 1, 2)

        ```
        """
        return chain(*sources)

    @property
    def cloned(self) -> bool:
        """Whether this chain has ever been cloned, or is itself a clone."""
        return self._cloned

    def clone(self) -> ChainIterator[T]:
        """Create an independent clone of the chain.

        Every sub-cursor not yet exhausted is cloned right away, so all of them must be cloneable.

        Returns:
            ChainIterator[T]: A new chain resuming from the current value.

        Raises:
            CloneUnsupportedError: If the source or one of the remaining sub-cursors can't be cloned.
                The chain is left untouched in that case.

        Example:
        ```python
        >>> import lazychain as lc
        >>> it = lc.chain([1], (x for x in (2, 3)))
        >>> it.clone()
        Traceback (most recent call last):
            ...
        lazychain._errors.CloneUnsupportedError: cannot clone a cursor over a single-pass generator
        >>> it.collect()
        (1, 2, 3)

        ```
        """
        active = None if self._active is None else self._active.clone()
        pending = SeqIter([cursor.clone() for cursor in self._source.clone()])
        twin = ChainIterator(pending)
        twin._active = active
        twin._cloned = True
        self._cloned = True
        logger.debug("cloned %r", self)
        return twin

    def next(self) -> Option[T]:
        while True:
            if self._active is None:
                match self._source.next():
                    case Some(cursor):
                        self._active = cursor
                    case _:
                        return NONE
            value = self._active.next()
            if value.is_some():
                return value
            self._active = None
