"""The binary search tree engine.

BinarySearchTree owns a graph of BSTNode objects and exposes value-level
operations only. Nodes never leave the tree, and no operation performs I/O:
every query returns plain values or records from ``core.results``.
"""

from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .config import TraversalOrder, parse_order
from .core.node import BSTNode
from .core.adapter import BinaryTreeAdapter, ordered_descent
from .core.traverser import (
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)
from .core.collector import (
    DepthValueCollector,
    HeightCollector,
    LevelCollector,
    OccurrenceCollector,
    PathCollector,
    ValueCollector,
)
from .core.results import LevelStats, OccurrenceStats, PathResult, TreeStats

T = TypeVar("T")


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree over any totally ordered type.

    Two insertion policies share one tree:

    - duplicate-free: left subtree ``<`` node, right subtree ``>`` node;
      inserting a value already present does nothing.
    - duplicate-admitting: left subtree ``<=`` node, right subtree ``>``
      node; equal values accumulate in the left subtree of the first equal
      node met on the way down.

    Example:
        >>> tree = BinarySearchTree()
        >>> for v in [5, 3, 8, 3, 3]:
        ...     tree.insert(v, admit_duplicates=True)
        >>> tree.inorder()
        [3, 3, 3, 5, 8]
        >>> tree.count_occurrences(3).count
        3
    """

    def __init__(self):
        self._root: Optional[BSTNode[T]] = None
        self._size = 0
        self._adapter = BinaryTreeAdapter()

    # Mutation

    def insert(self, value: T, admit_duplicates: bool = False) -> None:
        """Insert a value.

        Args:
            value: Value to insert
            admit_duplicates: When False, a value already in the tree is
                left alone. When True, a new node is always added and
                equal values go left.
        """
        if not admit_duplicates and self.search(value):
            return

        node = BSTNode(value)
        self._size += 1

        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if value < current.value or (admit_duplicates and value == current.value):
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def insert_many(self, values, admit_duplicates: bool = False) -> None:
        """Insert every value from an iterable, in order."""
        for value in values:
            self.insert(value, admit_duplicates)

    def clear(self) -> None:
        """Release every node, children before parents."""
        if self._root is None:
            return
        # Detach bottom-up so no subtree outlives the tree
        for node, _ in PostOrderTraverser(self._adapter).traverse(self._root):
            node.left = None
            node.right = None
        self._root = None
        self._size = 0

    # Membership

    def search(self, value: T) -> bool:
        """Ordered membership test in O(depth) comparisons.

        Goes left when ``value`` is smaller than the node, right otherwise.
        Trusts the order invariant; it does not look at pruned branches.
        """
        current = self._root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def search_unordered(self, value: T) -> bool:
        """Linear membership test that visits every node.

        Costs O(n) but does not rely on the order invariant.
        """
        for node, _ in PreOrderTraverser(self._adapter).traverse(self._root):
            if node.value == value:
                return True
        return False

    # Traversals

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[T]:
        """Return every value in the requested order.

        The sequence is fully materialized and each call starts again from
        the root.

        Raises:
            ValueError: If the order is not recognized
        """
        order = parse_order(order)
        traverser = create_traverser(order.value, self._adapter)
        collector = ValueCollector(self._adapter)
        return [collector.collect(node, depth) for node, depth in traverser.traverse(self._root)]

    def inorder(self) -> List[T]:
        """Values in ascending order."""
        return self.traverse(TraversalOrder.INORDER)

    def preorder(self) -> List[T]:
        """Values with each node before its subtrees."""
        return self.traverse(TraversalOrder.PREORDER)

    def layout(self) -> List[Tuple[T, int]]:
        """Return ``(value, depth)`` pairs for printing the tree sideways.

        Pairs come in reverse in-order, so the right subtree is listed above
        its parent and the left subtree below.
        """
        traverser = create_traverser(TraversalOrder.REVERSE_INORDER.value, self._adapter)
        collector = DepthValueCollector(self._adapter)
        return [collector.collect(node, depth) for node, depth in traverser.traverse(self._root)]

    # Occurrences and paths

    def count_occurrences(self, value: T) -> OccurrenceStats:
        """Count nodes equal to ``value`` and report their depth range.

        Every node is visited. When nothing matches, ``count`` is 0 and the
        depths are None.
        """
        collector = OccurrenceCollector(self._adapter, value)
        for node, depth in PreOrderTraverser(self._adapter).traverse(self._root):
            collector.collect(node, depth)
        return collector.result()

    def find_path(self, value: T) -> PathResult:
        """Find the root-to-node path of the first node equal to ``value``.

        The walk follows the insertion rule for duplicates (left when
        ``value <= node``, right otherwise) and keeps going after the first
        match, so ``min_depth``/``max_depth`` cover every equal node on the
        way down. Any copy of ``value`` lies on this path whichever policy
        inserted it.

        Returns:
            PathResult with ``found=False`` when no node matches
        """
        adapter = BinaryTreeAdapter(selector=ordered_descent(value, admit_equal_left=True))
        collector = PathCollector(adapter, value)
        for node, depth in PreOrderTraverser(adapter).traverse(self._root):
            collector.collect(node, depth)
        return collector.result()

    # Shape

    def height(self, value: Any = None) -> int:
        """Edge count of the longest path from a subtree root to a leaf.

        Args:
            value: Root of the subtree to measure. None measures the whole
                tree; otherwise the first node found by ordered search is
                used.

        Returns:
            Height, or -1 for an empty tree or a value not in the tree
        """
        root = self._root if value is None else self._find_node(value)
        if root is None:
            return -1
        collector = HeightCollector(self._adapter)
        for node, depth in PostOrderTraverser(self._adapter).traverse(root):
            collector.collect(node, depth)
        return collector.result()

    def levels(self) -> LevelStats:
        """Depth profile: height, leaf depth range and nodes per level."""
        collector = LevelCollector(self._adapter)
        for node, depth in LevelOrderTraverser(self._adapter).traverse(self._root):
            collector.collect(node, depth)
        return collector.result()

    def size(self) -> int:
        """Number of nodes, duplicates included."""
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def root_value(self) -> Optional[T]:
        """Value at the root, None for an empty tree."""
        return None if self._root is None else self._root.value

    def min_value(self) -> Optional[T]:
        """Leftmost value, None for an empty tree."""
        node = self._root
        while node is not None and node.left is not None:
            node = node.left
        return None if node is None else node.value

    def max_value(self) -> Optional[T]:
        """Rightmost value, None for an empty tree."""
        node = self._root
        while node is not None and node.right is not None:
            node = node.right
        return None if node is None else node.value

    def stats(self) -> TreeStats:
        """Summary statistics for the whole tree."""
        levels = self.levels()
        leaves = sum(
            1 for node, _ in PreOrderTraverser(self._adapter).traverse(self._root)
            if node.is_leaf()
        )
        return TreeStats(
            total_nodes=self._size,
            leaf_nodes=leaves,
            root_value=self.root_value(),
            min_value=self.min_value(),
            max_value=self.max_value(),
            levels=levels,
        )

    # Internal

    def _find_node(self, value: T) -> Optional[BSTNode[T]]:
        current = self._root
        while current is not None:
            if current.value == value:
                return current
            current = current.left if value < current.value else current.right
        return None

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, value: object) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.inorder())

    def __copy__(self):
        raise TypeError("BinarySearchTree cannot be copied; it exclusively owns its nodes")

    def __deepcopy__(self, memo):
        raise TypeError("BinarySearchTree cannot be copied; it exclusively owns its nodes")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
