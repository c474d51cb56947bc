"""BSTNode for the binary search tree engine.

The node is intentionally kept simple - it's a data container holding one
value and its two optional children. Navigation is delegated to the
BinaryTreeAdapter, and ordering decisions live in the tree itself.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class BSTNode(Generic[T]):
    """A single node of a binary search tree.

    Each node exclusively owns its left and right subtrees. There are no
    parent or back references, so a subtree is reachable from exactly one
    place: its parent's child slot (or the tree's root slot).

    The value is fixed at construction. Duplicates are stored as new nodes,
    never by mutating an existing one.
    """

    __slots__ = ("_value", "left", "right")

    def __init__(self, value: T):
        self._value = value
        self.left: Optional["BSTNode[T]"] = None
        self.right: Optional["BSTNode[T]"] = None

    @property
    def value(self) -> T:
        """The value stored in this node (read-only)."""
        return self._value

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def __copy__(self):
        raise TypeError("BSTNode cannot be copied; nodes are owned by their tree")

    def __deepcopy__(self, memo):
        raise TypeError("BSTNode cannot be copied; nodes are owned by their tree")

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"
