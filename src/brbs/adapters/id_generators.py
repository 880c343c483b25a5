"""ID generators for BRBS."""

import threading

from ulid import monotonic

from brbs.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    millisecond timestamp and a random component, so ids of new posts and
    replies sort in creation order. Uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential, prefixed IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, prefix: str = "", length: int = 6) -> None:
        self._counter = 0
        self._prefix = prefix
        self._length = length

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        self._counter += 1
        return f"{self._prefix}{self._counter:0{self._length}d}"
