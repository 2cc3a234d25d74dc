from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

import cytoolz as cz


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for lazychain.

    Args:
        repr_max_items (int): Maximum number of remaining items shown by cursor representations.
    """

    repr_max_items: int = 20

    def __post_init__(self) -> None:
        if self.repr_max_items < 0:
            msg = f"repr_max_items must be positive or zero, got {self.repr_max_items}"
            raise ValueError(msg)

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Format the first items of **data**, without consuming more than needed.

        Args:
            data (Iterable[Any]): The items to format.

        Returns:
            str: Comma separated reprs, with a trailing `...` if **data** holds more items.

        Example:
        ```python
        >>> from lazychain import Config
        >>> Config(repr_max_items=3).iter_repr(range(10))
        '0, 1, 2, ...'
        >>> Config().iter_repr(())
        ''

        ```
        """
        items = tuple(cz.itertoolz.take(self.repr_max_items + 1, data))
        text = ", ".join(repr(item) for item in items[: self.repr_max_items])
        if len(items) > self.repr_max_items:
            return f"{text}, ..." if text else "..."
        return text


_CONFIG = Config()


def get_config() -> Config:
    """Get the active configuration."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active configuration.

    Args:
        **changes (Any): Field names of `Config` and their new values.

    Returns:
        Config: The new active configuration.

    Raises:
        ValueError: If a new value is invalid.
        TypeError: If a field name is unknown.

    Example:
    ```python
    >>> import lazychain as lc
    >>> previous = lc.get_config()
    >>> lc.set_config(repr_max_items=2)
    Config(repr_max_items=2)
    >>> lc.SeqIter([1, 2, 3])
    SeqIter(1, 2, ...)
    >>> lc.set_config(repr_max_items=previous.repr_max_items).repr_max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
