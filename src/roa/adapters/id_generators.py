"""ID generators for resource records."""

import threading

from ulid import monotonic

from roa.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort in creation order, so record links created later compare
    greater. Backed by the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SequentialIdGenerator(IdGenerator):
    """Sequential ids ("1", "2", ...), optionally zero-padded to `width`.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, start: int = 1, width: int = 0) -> None:
        self._next = start
        self._width = width

    def new_id(self) -> str:
        """Return the next id in the sequence."""
        value = self._next
        self._next += 1
        return f"{value:0{self._width}d}" if self._width else str(value)
