"""Core abstractions for the BST engine.

Nodes, navigation, traversal strategies and data collectors. Nothing in
this package performs I/O.
"""

from .node import BSTNode
from .adapter import BinaryTreeAdapter, ChildSelector, ordered_descent
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    DepthValueCollector,
    OccurrenceCollector,
    PathCollector,
    HeightCollector,
    LevelCollector,
)
from .results import OccurrenceStats, PathResult, LevelStats, TreeStats

__all__ = [
    "BSTNode",
    "BinaryTreeAdapter",
    "ChildSelector",
    "ordered_descent",
    "TreeTraverser",
    "InOrderTraverser",
    "ReverseInOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "DepthValueCollector",
    "OccurrenceCollector",
    "PathCollector",
    "HeightCollector",
    "LevelCollector",
    "OccurrenceStats",
    "PathResult",
    "LevelStats",
    "TreeStats",
]
