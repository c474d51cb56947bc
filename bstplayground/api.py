"""High-level API for the BST engine.

Simple functional interfaces for common one-shot operations. These wrap the
BinarySearchTree class for callers that just want an answer from a list of
values.
"""

from typing import Any, Dict, Iterable, List, Union

from .config import TraversalOrder
from .tree import BinarySearchTree


def build_tree(values: Iterable[Any], admit_duplicates: bool = False) -> BinarySearchTree:
    """Build a tree by inserting values in order.

    Args:
        values: Values to insert, in insertion order
        admit_duplicates: Insertion policy for every value

    Returns:
        A new BinarySearchTree

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> tree.root_value()
        5
    """
    tree = BinarySearchTree()
    tree.insert_many(values, admit_duplicates)
    return tree


def traverse_values(
    values: Iterable[Any],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    admit_duplicates: bool = False,
) -> List[Any]:
    """Build a tree from values and return them in traversal order.

    Example:
        >>> traverse_values([4, 2, 6, 1], order="preorder")
        [4, 2, 1, 6]
    """
    return build_tree(values, admit_duplicates).traverse(order)


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree as a plain dictionary.

    Args:
        tree: Tree to describe

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['total_nodes'], stats['height']
        (3, 1)
    """
    summary = tree.stats()
    levels = summary.levels

    stats = {
        'total_nodes': summary.total_nodes,
        'leaf_nodes': summary.leaf_nodes,
        'internal_nodes': summary.internal_nodes,
        'height': levels.height,
        'min_leaf_depth': levels.min_leaf_depth,
        'max_leaf_depth': levels.max_leaf_depth,
        'depths': dict(levels.nodes_per_level),
        'root_value': summary.root_value,
        'min_value': summary.min_value,
        'max_value': summary.max_value,
    }
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats
