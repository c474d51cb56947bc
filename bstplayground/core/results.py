"""Structured results returned by tree queries.

Queries never print. They return these immutable records and leave all
formatting to the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OccurrenceStats:
    """How often a value occurs and at which depths.

    ``min_depth`` and ``max_depth`` are None when ``count`` is 0.
    """

    count: int = 0
    min_depth: Optional[int] = None
    max_depth: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class PathResult(Generic[T]):
    """Root-to-value path plus the depth range of every match.

    When ``found`` is False the path is empty and both depths are None.
    This is the not-found outcome, distinct from any successful result.
    """

    found: bool
    path: Tuple[T, ...] = ()
    min_depth: Optional[int] = None
    max_depth: Optional[int] = None

    @classmethod
    def not_found(cls) -> 'PathResult':
        return cls(found=False)

    @property
    def depth(self) -> int:
        """Depth of the first match (path length - 1), -1 when not found."""
        return len(self.path) - 1


@dataclass(frozen=True)
class LevelStats:
    """Depth profile of a tree.

    Attributes:
        height: Longest root-to-leaf edge count (-1 for an empty tree)
        min_leaf_depth: Depth of the shallowest leaf (None when empty)
        max_leaf_depth: Depth of the deepest leaf (None when empty)
        nodes_per_level: Mapping depth -> number of nodes at that depth
    """

    height: int = -1
    min_leaf_depth: Optional[int] = None
    max_leaf_depth: Optional[int] = None
    nodes_per_level: Dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class TreeStats:
    """Summary statistics for a whole tree."""

    total_nodes: int = 0
    leaf_nodes: int = 0
    root_value: Any = None
    min_value: Any = None
    max_value: Any = None
    levels: LevelStats = field(default_factory=LevelStats)

    @property
    def internal_nodes(self) -> int:
        return self.total_nodes - self.leaf_nodes

    @property
    def height(self) -> int:
        return self.levels.height

    @property
    def is_empty(self) -> bool:
        return self.total_nodes == 0
