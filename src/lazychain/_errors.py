class LazyChainError(Exception):
    """Base class for all errors raised by lazychain."""


class CloneUnsupportedError(LazyChainError, RuntimeError):
    """Raised when `clone()` is called on a cursor whose source cannot be re-traversed independently."""


class ChainSourceError(LazyChainError, TypeError):
    """Raised when a value that can't be iterated is given as a source."""
