"""BinaryTreeAdapter for navigating BSTNode structures.

The adapter provides the navigation logic for binary nodes, decoupling the
node representation from the traversal mechanism. Traversers and collectors
never touch ``node.left``/``node.right`` directly; they ask the adapter.
"""

from typing import Callable, Iterator, Optional, Tuple
from .node import BSTNode


# Decides which children of a node are worth exploring.
# Receives the node and returns (explore_left, explore_right).
ChildSelector = Callable[[BSTNode], Tuple[bool, bool]]


class BinaryTreeAdapter:
    """Navigation over binary nodes with an optional child selector.

    Without a selector every existing child is explored. With one, the
    adapter prunes branches the selector rejects. This is how ordered
    descents such as path finding reuse the generic traversers.
    """

    def __init__(self, selector: Optional[ChildSelector] = None):
        """Initialize adapter.

        Args:
            selector: Optional pruning function, see ChildSelector
        """
        self.selector = selector

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        """Get the left child if it should be explored."""
        if node.left is None:
            return None
        if self.selector is not None and not self.selector(node)[0]:
            return None
        return node.left

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        """Get the right child if it should be explored."""
        if node.right is None:
            return None
        if self.selector is not None and not self.selector(node)[1]:
            return None
        return node.right

    def get_children(self, node: BSTNode) -> Iterator[BSTNode]:
        """Get an iterator of explorable children, left before right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child BSTNode instances
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right


def ordered_descent(target, admit_equal_left: bool) -> ChildSelector:
    """Build a selector that follows a single comparison path.

    Args:
        target: Value being looked for
        admit_equal_left: If True, equal values descend left (the rule
            used by duplicate-admitting insertion). If False, only
            strictly smaller targets go left.

    Returns:
        ChildSelector exploring exactly one side of each node
    """
    def _select(node: BSTNode):
        go_left = target <= node.value if admit_equal_left else target < node.value
        return (go_left, not go_left)

    return _select
