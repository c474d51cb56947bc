"""BST Playground - Binary Search Tree Engine with an Interactive Session.

The engine lives in ``bstplayground.tree`` and performs no I/O; every query
returns structured data. The session layer in ``bstplayground.session``
turns command lines into engine calls and renders the results.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Library:
    from bstplayground import BinarySearchTree

Interactive:
    $ bst-playground --type int
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import ElementType, SessionConfig, TraversalOrder, parse_order
from .core.results import LevelStats, OccurrenceStats, PathResult, TreeStats
from .tree import BinarySearchTree
from .api import build_tree, get_tree_stats, traverse_values
from .exceptions import (
    BSTPlaygroundError,
    CommandUsageError,
    NoTreeSelectedError,
    TreeExistsError,
    TreeNotFoundError,
    UnknownCommandError,
    ValueParseError,
)

__all__ = [
    "__version__",
    # Engine
    "BinarySearchTree",
    "OccurrenceStats",
    "PathResult",
    "LevelStats",
    "TreeStats",
    # Config
    "TraversalOrder",
    "ElementType",
    "SessionConfig",
    "parse_order",
    # API
    "build_tree",
    "traverse_values",
    "get_tree_stats",
    # Errors
    "BSTPlaygroundError",
    "NoTreeSelectedError",
    "TreeExistsError",
    "TreeNotFoundError",
    "CommandUsageError",
    "ValueParseError",
    "UnknownCommandError",
]
