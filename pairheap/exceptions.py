class HeapError(Exception):
    """Base class for every error raised by a heap."""


class InvalidArgumentError(HeapError, ValueError):
    """Malformed input to one of the bulk constructors."""


class EmptyHeapError(HeapError, RuntimeError):
    """Peek or extraction attempted on a heap holding no pairs."""


class CapacityExceededError(HeapError, RuntimeError):
    """Insertion attempted on a heap whose storage is already full."""
