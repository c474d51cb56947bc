"""Bounded, evict-oldest history used by sessions and trees."""

from collections import deque
from typing import Deque, Iterator, List


class BoundedHistory:
    """Fixed-capacity history of text entries.

    Appending to a full history drops the oldest entry.

    Example:
        >>> history = BoundedHistory(limit=2)
        >>> for entry in ["a", "b", "c"]:
        ...     history.add(entry)
        >>> history.entries()
        ['b', 'c']
    """

    def __init__(self, limit: int = 20):
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self._entries: Deque[str] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._entries.maxlen

    def add(self, entry: str) -> None:
        self._entries.append(entry)

    def entries(self) -> List[str]:
        """Entries from oldest to newest."""
        return list(self._entries)

    def numbered(self) -> List[tuple]:
        """``(position, entry)`` pairs, positions starting at 1."""
        return list(enumerate(self._entries, start=1))

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
