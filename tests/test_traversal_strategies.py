"""Unit tests for traversers, the adapter and collectors.

Works on hand-built node graphs so each strategy is checked independently
of the insertion logic.
"""

import unittest

from bstplayground.core import (
    BSTNode,
    BinaryTreeAdapter,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    ValueCollector,
    OccurrenceCollector,
    PathCollector,
    HeightCollector,
    LevelCollector,
    create_traverser,
    ordered_descent,
)


def make_tree() -> BSTNode:
    """Build a small lopsided tree.

    Structure:
            8
           / \\
          4   10
         / \\
        2   6
             \\
              7
    """
    root = BSTNode(8)
    root.left = BSTNode(4)
    root.right = BSTNode(10)
    root.left.left = BSTNode(2)
    root.left.right = BSTNode(6)
    root.left.right.right = BSTNode(7)
    return root


def values(pairs):
    return [node.value for node, _ in pairs]


class TestTraversers(unittest.TestCase):
    """Test node orders and depths for each strategy."""

    def setUp(self):
        self.root = make_tree()
        self.adapter = BinaryTreeAdapter()

    def test_inorder(self):
        pairs = list(InOrderTraverser(self.adapter).traverse(self.root))
        self.assertEqual(values(pairs), [2, 4, 6, 7, 8, 10])
        self.assertEqual([d for _, d in pairs], [2, 1, 2, 3, 0, 1])

    def test_reverse_inorder(self):
        pairs = list(ReverseInOrderTraverser(self.adapter).traverse(self.root))
        self.assertEqual(values(pairs), [10, 8, 7, 6, 4, 2])

    def test_preorder(self):
        pairs = list(PreOrderTraverser(self.adapter).traverse(self.root))
        self.assertEqual(values(pairs), [8, 4, 2, 6, 7, 10])
        self.assertEqual([d for _, d in pairs], [0, 1, 2, 2, 3, 1])

    def test_postorder(self):
        pairs = list(PostOrderTraverser(self.adapter).traverse(self.root))
        self.assertEqual(values(pairs), [2, 7, 6, 4, 10, 8])

    def test_level_order(self):
        pairs = list(LevelOrderTraverser(self.adapter).traverse(self.root))
        self.assertEqual(values(pairs), [8, 4, 10, 2, 6, 7])
        self.assertEqual([d for _, d in pairs], [0, 1, 1, 2, 2, 3])

    def test_none_root_yields_nothing(self):
        for cls in (InOrderTraverser, ReverseInOrderTraverser, PreOrderTraverser,
                    PostOrderTraverser, LevelOrderTraverser):
            self.assertEqual(list(cls(self.adapter).traverse(None)), [])

    def test_factory(self):
        self.assertIsInstance(create_traverser("inorder", self.adapter), InOrderTraverser)
        self.assertIsInstance(create_traverser("BFS", self.adapter), LevelOrderTraverser)
        with self.assertRaises(ValueError):
            create_traverser("zigzag", self.adapter)


class TestAdapter(unittest.TestCase):
    """Test child navigation and pruning."""

    def test_children_left_before_right(self):
        root = make_tree()
        children = list(BinaryTreeAdapter().get_children(root))
        self.assertEqual([c.value for c in children], [4, 10])

    def test_leaf_has_no_children(self):
        self.assertEqual(list(BinaryTreeAdapter().get_children(BSTNode(1))), [])

    def test_ordered_descent_follows_one_path(self):
        adapter = BinaryTreeAdapter(selector=ordered_descent(7, admit_equal_left=False))
        pairs = list(PreOrderTraverser(adapter).traverse(make_tree()))
        self.assertEqual(values(pairs), [8, 4, 6, 7])

    def test_equal_goes_left_when_admitted(self):
        root = BSTNode(5)
        root.left = BSTNode(5)
        root.right = BSTNode(9)
        left_biased = BinaryTreeAdapter(selector=ordered_descent(5, admit_equal_left=True))
        strict = BinaryTreeAdapter(selector=ordered_descent(5, admit_equal_left=False))
        self.assertEqual([c.value for c in left_biased.get_children(root)], [5])
        self.assertEqual([c.value for c in strict.get_children(root)], [9])


class TestCollectors(unittest.TestCase):
    """Test collectors fed by traversers."""

    def setUp(self):
        self.root = make_tree()
        self.adapter = BinaryTreeAdapter()

    def run_collector(self, traverser_cls, collector, adapter=None):
        adapter = adapter or self.adapter
        for node, depth in traverser_cls(adapter).traverse(self.root):
            collector.collect(node, depth)
        return collector.result()

    def test_value_collector(self):
        collector = ValueCollector(self.adapter)
        self.assertEqual(collector.collect(self.root, 0), 8)
        self.assertIsNone(collector.result())

    def test_occurrence_collector(self):
        stats = self.run_collector(PreOrderTraverser, OccurrenceCollector(self.adapter, 7))
        self.assertEqual((stats.count, stats.min_depth, stats.max_depth), (1, 3, 3))

    def test_path_collector_on_full_walk(self):
        result = self.run_collector(PreOrderTraverser, PathCollector(self.adapter, 7))
        self.assertTrue(result.found)
        self.assertEqual(result.path, (8, 4, 6, 7))

    def test_path_stack_crosses_branches(self):
        # 10 is visited after the whole left subtree has been walked
        result = self.run_collector(PreOrderTraverser, PathCollector(self.adapter, 10))
        self.assertEqual(result.path, (8, 10))

    def test_path_collector_not_found(self):
        result = self.run_collector(PreOrderTraverser, PathCollector(self.adapter, 5))
        self.assertFalse(result.found)

    def test_height_collector(self):
        height = self.run_collector(PostOrderTraverser, HeightCollector(self.adapter))
        self.assertEqual(height, 3)

    def test_level_collector(self):
        levels = self.run_collector(LevelOrderTraverser, LevelCollector(self.adapter))
        self.assertEqual(levels.height, 3)
        self.assertEqual(levels.min_leaf_depth, 1)
        self.assertEqual(levels.max_leaf_depth, 3)
        self.assertEqual(levels.nodes_per_level, {0: 1, 1: 2, 2: 2, 3: 1})


class TestNode(unittest.TestCase):
    """Test the node container."""

    def test_leaf(self):
        node = BSTNode(3)
        self.assertTrue(node.is_leaf())
        node.left = BSTNode(1)
        self.assertFalse(node.is_leaf())

    def test_value_is_read_only(self):
        node = BSTNode(3)
        with self.assertRaises(AttributeError):
            node.value = 4

    def test_repr(self):
        self.assertEqual(repr(BSTNode("a")), "BSTNode(value='a')")


if __name__ == "__main__":
    unittest.main()
