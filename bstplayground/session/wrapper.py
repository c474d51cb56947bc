"""TreeWrapper: a named tree with its own operation history.

Each wrapper forwards to exactly one BinarySearchTree call and records a
short description of what happened. Results are passed back untouched for
the renderer to format.
"""

import logging
from typing import Any, List, Tuple

from ..core.results import LevelStats, OccurrenceStats, PathResult, TreeStats
from ..tree import BinarySearchTree
from .history import BoundedHistory

logger = logging.getLogger(__name__)


def value_to_string(value: Any) -> str:
    """Text form of a value for history entries and messages."""
    return value if isinstance(value, str) else str(value)


class TreeWrapper:
    """A BinarySearchTree plus a display name and bounded history."""

    def __init__(self, name: str, history_limit: int = 20):
        self.name = name
        self.tree: BinarySearchTree = BinarySearchTree()
        self.history = BoundedHistory(history_limit)

    def insert(self, value: Any, admit_duplicates: bool = False) -> None:
        self.tree.insert(value, admit_duplicates)
        self.history.add(f"insert {value_to_string(value)}")

    def search(self, value: Any) -> bool:
        found = self.tree.search(value)
        outcome = "found" if found else "not found"
        self.history.add(f"search {value_to_string(value)} -> {outcome}")
        return found

    def traverse(self, order: str) -> List[Any]:
        values = self.tree.traverse(order)
        self.history.add(order)
        return values

    def count(self, value: Any) -> OccurrenceStats:
        stats = self.tree.count_occurrences(value)
        self.history.add(f"count {value_to_string(value)} -> {stats.count}")
        return stats

    def path(self, value: Any) -> PathResult:
        result = self.tree.find_path(value)
        outcome = "found" if result.found else "not found"
        self.history.add(f"path {value_to_string(value)} -> {outcome}")
        return result

    def layout(self) -> List[Tuple[Any, int]]:
        rows = self.tree.layout()
        self.history.add("print")
        return rows

    def levels(self) -> LevelStats:
        stats = self.tree.levels()
        self.history.add("levels")
        return stats

    def stats(self) -> TreeStats:
        return self.tree.stats()

    def clear(self) -> None:
        logger.debug("Clearing tree %r (%d nodes)", self.name, len(self.tree))
        self.tree.clear()
        self.history.add("clear")

    def size(self) -> int:
        return self.tree.size()

    def empty(self) -> bool:
        return self.tree.is_empty()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, size={len(self.tree)})"
