"""Data collection strategies for binary search trees.

DataCollectors define what information to extract from nodes during a
traversal. The same traverser can feed a value list, an occurrence counter
or a path recorder depending on which collector consumes it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from .node import BSTNode
from .adapter import BinaryTreeAdapter
from .results import LevelStats, OccurrenceStats, PathResult


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    ``collect`` is called once per visited node. Accumulating collectors
    also expose ``result()`` to read what they gathered.
    """

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: BinaryTreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: BSTNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def result(self) -> Any:
        """Return accumulated data. Per-node collectors return None."""
        return None


class ValueCollector(DataCollector):
    """Collects only node values.

    The cheapest collector - used to materialize traversal sequences.
    """

    def collect(self, node: BSTNode, depth: int) -> Any:
        return node.value


class DepthValueCollector(DataCollector):
    """Collects ``(value, depth)`` pairs for layout rendering."""

    def collect(self, node: BSTNode, depth: int) -> Tuple[Any, int]:
        return (node.value, depth)


class OccurrenceCollector(DataCollector):
    """Counts nodes equal to a target and tracks their depth range."""

    def __init__(self, adapter: BinaryTreeAdapter, target: Any):
        super().__init__(adapter)
        self.target = target
        self._count = 0
        self._min_depth: Optional[int] = None
        self._max_depth: Optional[int] = None

    def collect(self, node: BSTNode, depth: int) -> bool:
        if node.value != self.target:
            return False
        self._count += 1
        if self._min_depth is None or depth < self._min_depth:
            self._min_depth = depth
        if self._max_depth is None or depth > self._max_depth:
            self._max_depth = depth
        return True

    def result(self) -> OccurrenceStats:
        return OccurrenceStats(self._count, self._min_depth, self._max_depth)


class PathCollector(DataCollector):
    """Records root-to-node paths for nodes matching a target.

    Must be fed by a pre-order traverser. The current path is kept as a
    stack: on each visit the stack is cut back to the node's depth and the
    node's value is pushed, so the stack always holds the ancestor chain of
    the node being visited, across independent branches too.
    """

    def __init__(self, adapter: BinaryTreeAdapter, target: Any):
        super().__init__(adapter)
        self.target = target
        self._stack: List[Any] = []
        self._first_path: Optional[Tuple[Any, ...]] = None
        self._occurrences = OccurrenceCollector(adapter, target)

    def collect(self, node: BSTNode, depth: int) -> Optional[Tuple[Any, ...]]:
        del self._stack[depth:]
        self._stack.append(node.value)

        if not self._occurrences.collect(node, depth):
            return None

        path = tuple(self._stack)
        if self._first_path is None:
            self._first_path = path
        return path

    def result(self) -> PathResult:
        if self._first_path is None:
            return PathResult.not_found()
        stats = self._occurrences.result()
        return PathResult(
            found=True,
            path=self._first_path,
            min_depth=stats.min_depth,
            max_depth=stats.max_depth,
        )


class HeightCollector(DataCollector):
    """Computes subtree heights bottom-up.

    Must be fed by a post-order traverser so both children are measured
    before their parent. Heights are edge counts; an absent child counts
    as -1, which makes a leaf 0.
    """

    def __init__(self, adapter: BinaryTreeAdapter):
        super().__init__(adapter)
        self._heights: Dict[int, int] = {}
        self._last: int = -1

    def collect(self, node: BSTNode, depth: int) -> int:
        child_heights = [
            self._heights.pop(id(child))
            for child in self.adapter.get_children(node)
        ]
        height = 1 + max(child_heights, default=-1)
        self._heights[id(node)] = height
        self._last = height
        return height

    def result(self) -> int:
        """Height of the last node collected, the root in post-order."""
        return self._last


class LevelCollector(DataCollector):
    """Builds a depth profile: nodes per level and leaf depth range."""

    def __init__(self, adapter: BinaryTreeAdapter):
        super().__init__(adapter)
        self._per_level: Dict[int, int] = {}
        self._min_leaf: Optional[int] = None
        self._max_leaf: Optional[int] = None

    def collect(self, node: BSTNode, depth: int) -> None:
        self._per_level[depth] = self._per_level.get(depth, 0) + 1

        if node.is_leaf():
            if self._min_leaf is None or depth < self._min_leaf:
                self._min_leaf = depth
            if self._max_leaf is None or depth > self._max_leaf:
                self._max_leaf = depth

    def result(self) -> LevelStats:
        height = max(self._per_level) if self._per_level else -1
        return LevelStats(
            height=height,
            min_leaf_depth=self._min_leaf,
            max_leaf_depth=self._max_leaf,
            nodes_per_level=dict(sorted(self._per_level.items())),
        )
