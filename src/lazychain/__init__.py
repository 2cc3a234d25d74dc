import logging

from ._adapters import CountIter, FnIter, PyIter, SeqIter, iterate
from ._chain import ChainIterator, chain
from ._core import Config, Pipeable, get_config, set_config
from ._cursor import Cursor, SupportsClone, SupportsIterate
from ._errors import ChainSourceError, CloneUnsupportedError, LazyChainError
from ._geometry import HasBoundingRect, Rect, Scrollable, hit_test, scroll_if_needed
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "ChainIterator",
    "ChainSourceError",
    "CloneUnsupportedError",
    "Config",
    "CountIter",
    "Cursor",
    "FnIter",
    "HasBoundingRect",
    "LazyChainError",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "PyIter",
    "Rect",
    "Scrollable",
    "SeqIter",
    "Some",
    "SupportsClone",
    "SupportsIterate",
    "chain",
    "get_config",
    "hit_test",
    "iterate",
    "scroll_if_needed",
    "set_config",
]
