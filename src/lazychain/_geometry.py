"""Hit-testing and scroll-into-view helpers over bounding rectangles.

Any host element can be used, as long as it exposes its on-screen rectangle with a `bounding_rect()` method.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class Rect:
    """An axis-aligned rectangle in client coordinates.

    The y axis points down: `top` is lower than or equal to `bottom`.

    Args:
        left (float): The left edge.
        top (float): The top edge.
        right (float): The right edge.
        bottom (float): The bottom edge.
    """

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def contains(self, x: float, y: float) -> bool:
        """Test whether a point lies within the rectangle.

        Left and top edges are inclusive, right and bottom edges are exclusive.

        Example:
        ```python
        >>> from lazychain import Rect
        >>> rect = Rect(0, 0, 100, 100)
        >>> rect.contains(0, 0), rect.contains(99, 99), rect.contains(100, 50)
        (True, True, False)

        ```
        """
        return self.left <= x < self.right and self.top <= y < self.bottom

    def expanded(self, threshold: float) -> Rect:
        """Grow the rectangle by **threshold** on every side."""
        return Rect(
            self.left - threshold,
            self.top - threshold,
            self.right + threshold,
            self.bottom + threshold,
        )


@runtime_checkable
class HasBoundingRect(Protocol):
    """Any host element able to report its on-screen rectangle."""

    def bounding_rect(self) -> Rect: ...


@runtime_checkable
class Scrollable(HasBoundingRect, Protocol):
    """A host element with a vertical scroll offset that can be changed."""

    scroll_top: float


def hit_test(node: HasBoundingRect, x: float, y: float) -> bool:
    """Test whether a client position lies within a node.

    Args:
        node (HasBoundingRect): The node of interest.
        x (float): The client X coordinate of interest.
        y (float): The client Y coordinate of interest.

    Returns:
        bool: `True` if the node covers the position, `False` otherwise.
    """
    return node.bounding_rect().contains(x, y)


def scroll_if_needed(area: Scrollable, elem: HasBoundingRect, threshold: float = 0) -> None:
    """Scroll an element into view if needed.

    The scroll offset of **area** is moved by the minimal amount revealing the top edge of **elem** when it is above the visible area,
    or its bottom edge when it is below.

    Nothing changes if **elem** already lies within the visible area grown by **threshold**.
    A negative **threshold** is accepted as is, and shrinks the tolerated area by the same arithmetic.

    Args:
        area (Scrollable): The scroll area of interest.
        elem (HasBoundingRect): The element of interest.
        threshold (float): The overflow, in pixels, tolerated before adjusting the scroll position. Defaults to 0.

    Example:
    ```python
    >>> from dataclasses import dataclass
    >>> from lazychain import Rect, scroll_if_needed
    >>> @dataclass
    ... class Box:
    ...     rect: Rect
    ...     scroll_top: float = 0
    ...     def bounding_rect(self) -> Rect:
    ...         return self.rect
    >>> area = Box(Rect(0, 0, 100, 100))
    >>> scroll_if_needed(area, Box(Rect(0, 120, 100, 140)))
    >>> area.scroll_top
    40
    >>> scroll_if_needed(area, Box(Rect(0, 100, 100, 105)), threshold=10)
    >>> area.scroll_top
    40

    ```
    """
    ar = area.bounding_rect()
    er = elem.bounding_rect()
    if er.top < ar.top - threshold:
        area.scroll_top -= ar.top - er.top + threshold
    elif er.bottom > ar.bottom + threshold:
        area.scroll_top += er.bottom - ar.bottom + threshold
