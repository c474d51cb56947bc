"""Tree traversal strategies for binary search trees.

Traversers implement different algorithms for walking through a binary tree.
They work through a BinaryTreeAdapter, so the same traverser can walk the
whole tree or only the branches an ordered descent selects.

All traversers are iterative. An unbalanced BST built from sorted input is
as deep as it is large, which would exhaust the interpreter's recursion
limit with recursive generators.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple
from .node import BSTNode
from .adapter import BinaryTreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers walk a tree in a specific order and yield ``(node, depth)``
    pairs where depth is the number of edges from the starting node.
    """

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. On a
    tree that satisfies the order invariant this yields values in
    ascending order.
    """

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        stack: List[Tuple[BSTNode, int]] = []
        current, depth = root, 0

        while stack or current is not None:
            # Walk down the left spine
            while current is not None:
                stack.append((current, depth))
                current = self.adapter.get_left(current)
                depth += 1

            node, depth = stack.pop()
            yield (node, depth)

            current = self.adapter.get_right(node)
            depth += 1


class ReverseInOrderTraverser(TreeTraverser):
    """In-order traversal mirrored: right subtree, node, left subtree.

    Yields values in descending order. Used for printing a tree sideways
    with the right subtree on top.
    """

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        stack: List[Tuple[BSTNode, int]] = []
        current, depth = root, 0

        while stack or current is not None:
            while current is not None:
                stack.append((current, depth))
                current = self.adapter.get_right(current)
                depth += 1

            node, depth = stack.pop()
            yield (node, depth)

            current = self.adapter.get_left(node)
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits the node before its children, left subtree before right.
    Good for copying trees or recording root-to-node paths.
    """

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return
        stack: List[Tuple[BSTNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            yield (node, depth)

            # Right goes on the stack first so left is processed first
            right = self.adapter.get_right(node)
            if right is not None:
                stack.append((right, depth + 1))
            left = self.adapter.get_left(node)
            if left is not None:
                stack.append((left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before the node. Used for aggregation (heights) and
    for tearing a tree down bottom-up.
    """

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return
        # Entries are (node, depth, children_done)
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, children_done = stack.pop()

            if children_done:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            right = self.adapter.get_right(node)
            if right is not None:
                stack.append((right, depth + 1, False))
            left = self.adapter.get_left(node)
            if left is not None:
                stack.append((left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1,
    left to right within a level.
    """

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[BSTNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            yield (node, depth)

            for child in (self.adapter.get_left(node),
                          self.adapter.get_right(node)):
                if child is not None:
                    queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: BinaryTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (inorder, preorder, postorder,
            level, reverse_inorder)
        adapter: BinaryTreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'inorder': InOrderTraverser,
        'in_order': InOrderTraverser,
        'preorder': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'postorder': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
        'reverse_inorder': ReverseInOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
