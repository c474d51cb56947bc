"""Unit tests for the BinarySearchTree engine.

Covers both insertion policies, ordered search, traversals, occurrence
counting, path finding and height/level bookkeeping.
"""

import copy
import unittest

from bstplayground import BinarySearchTree, TraversalOrder, build_tree
from bstplayground.core.results import OccurrenceStats, PathResult


def balanced_tree() -> BinarySearchTree:
    """Build the reference tree used across these tests.

    Structure:
                50
             /      \\
           30        70
          /  \\      /  \\
        20    40   60    80
    """
    return build_tree([50, 30, 70, 20, 40, 60, 80])


class TestInsertion(unittest.TestCase):
    """Test both insertion policies."""

    def test_insert_into_empty_tree_sets_root(self):
        """First value becomes the root in either mode."""
        for admit in (False, True):
            tree = BinarySearchTree()
            tree.insert(42, admit_duplicates=admit)
            self.assertEqual(tree.root_value(), 42)
            self.assertEqual(tree.size(), 1)
            self.assertEqual(tree.height(), 0)

    def test_duplicate_free_insert_is_idempotent(self):
        """Re-inserting an existing value does nothing."""
        tree = balanced_tree()
        tree.insert(40)
        tree.insert(50)
        self.assertEqual(tree.size(), 7)
        self.assertEqual(tree.inorder(), [20, 30, 40, 50, 60, 70, 80])

    def test_sorted_input_builds_right_spine(self):
        """Inserting 1..7 keeps 1 at the root and sorts the inorder output."""
        tree = build_tree(range(1, 8))
        self.assertEqual(tree.inorder(), [1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(tree.root_value(), 1)
        self.assertEqual(tree.height(), 6)

    def test_duplicates_accumulate_on_the_left(self):
        """Equal values go left of the first equal node."""
        tree = build_tree([5, 3, 8, 3, 3], admit_duplicates=True)
        self.assertEqual(tree.inorder(), [3, 3, 3, 5, 8])
        self.assertEqual(tree.preorder(), [5, 3, 3, 3, 8])
        self.assertEqual(tree.count_occurrences(3).count, 3)
        self.assertEqual(tree.size(), 5)

    def test_mixed_policies(self):
        """A strict insert after duplicates still finds the value and skips."""
        tree = BinarySearchTree()
        tree.insert(5)
        tree.insert(5, admit_duplicates=True)
        tree.insert(5)
        self.assertEqual(tree.size(), 2)
        self.assertEqual(tree.count_occurrences(5), OccurrenceStats(2, 0, 1))

    def test_insert_many(self):
        tree = BinarySearchTree()
        tree.insert_many([2, 1, 2, 3], admit_duplicates=True)
        self.assertEqual(tree.inorder(), [1, 2, 2, 3])


class TestSearch(unittest.TestCase):
    """Test ordered and linear membership tests."""

    def test_search_present_and_absent(self):
        tree = balanced_tree()
        for value in (20, 30, 40, 50, 60, 70, 80):
            self.assertTrue(tree.search(value))
        for value in (0, 25, 55, 90):
            self.assertFalse(tree.search(value))

    def test_search_empty_tree(self):
        tree = BinarySearchTree()
        self.assertFalse(tree.search(42))
        self.assertFalse(tree.search_unordered(42))

    def test_unordered_search_agrees(self):
        tree = build_tree([5, 3, 8, 3, 1, 9], admit_duplicates=True)
        for value in range(0, 11):
            self.assertEqual(tree.search(value), tree.search_unordered(value))

    def test_contains_protocol(self):
        tree = balanced_tree()
        self.assertIn(60, tree)
        self.assertNotIn(65, tree)


class TestTraversals(unittest.TestCase):
    """Test traversal orders on the reference tree."""

    def setUp(self):
        self.tree = balanced_tree()

    def test_inorder(self):
        self.assertEqual(self.tree.inorder(), [20, 30, 40, 50, 60, 70, 80])

    def test_preorder(self):
        self.assertEqual(self.tree.preorder(), [50, 30, 20, 40, 70, 60, 80])

    def test_postorder(self):
        self.assertEqual(
            self.tree.traverse(TraversalOrder.POSTORDER),
            [20, 40, 30, 60, 80, 70, 50],
        )

    def test_level_order(self):
        self.assertEqual(self.tree.traverse("level"), [50, 30, 70, 20, 40, 60, 80])

    def test_string_aliases(self):
        self.assertEqual(self.tree.traverse("in"), self.tree.inorder())
        self.assertEqual(self.tree.traverse("PRE"), self.tree.preorder())

    def test_unknown_order(self):
        with self.assertRaises(ValueError):
            self.tree.traverse("sideways")

    def test_traversal_is_restartable(self):
        first = self.tree.inorder()
        second = self.tree.inorder()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_iteration_is_inorder(self):
        self.assertEqual(list(self.tree), self.tree.inorder())

    def test_layout_is_reverse_inorder_with_depths(self):
        self.assertEqual(self.tree.layout(), [
            (80, 2), (70, 1), (60, 2), (50, 0), (40, 2), (30, 1), (20, 2),
        ])

    def test_empty_tree_traversals(self):
        tree = BinarySearchTree()
        for order in TraversalOrder:
            self.assertEqual(tree.traverse(order), [])
        self.assertEqual(tree.layout(), [])


class TestOccurrences(unittest.TestCase):
    """Test duplicate counting with depth tracking."""

    def test_count_with_depths(self):
        tree = build_tree([5, 3, 8, 3, 3], admit_duplicates=True)
        stats = tree.count_occurrences(3)
        self.assertEqual(stats.count, 3)
        self.assertEqual(stats.min_depth, 1)
        self.assertEqual(stats.max_depth, 3)
        self.assertTrue(stats.found)

    def test_root_occurrence_is_depth_zero(self):
        tree = build_tree([5, 3, 8], admit_duplicates=True)
        self.assertEqual(tree.count_occurrences(5), OccurrenceStats(1, 0, 0))

    def test_no_match_leaves_sentinels(self):
        tree = balanced_tree()
        stats = tree.count_occurrences(99)
        self.assertEqual(stats.count, 0)
        self.assertIsNone(stats.min_depth)
        self.assertIsNone(stats.max_depth)
        self.assertFalse(stats.found)

    def test_empty_tree(self):
        self.assertEqual(BinarySearchTree().count_occurrences(42).count, 0)


class TestFindPath(unittest.TestCase):
    """Test root-to-value path retrieval."""

    def test_path_to_leaf(self):
        result = balanced_tree().find_path(60)
        self.assertTrue(result.found)
        self.assertEqual(result.path, (50, 70, 60))
        self.assertEqual(result.min_depth, 2)
        self.assertEqual(result.max_depth, 2)
        self.assertEqual(result.depth, 2)

    def test_path_to_root(self):
        result = balanced_tree().find_path(50)
        self.assertEqual(result.path, (50,))
        self.assertEqual(result.depth, 0)

    def test_path_covers_every_duplicate(self):
        tree = build_tree([5, 3, 8, 3, 3], admit_duplicates=True)
        result = tree.find_path(3)
        self.assertEqual(result.path, (5, 3))
        self.assertEqual(result.min_depth, 1)
        self.assertEqual(result.max_depth, 3)

    def test_not_found_is_distinct(self):
        result = balanced_tree().find_path(65)
        self.assertFalse(result.found)
        self.assertEqual(result, PathResult.not_found())
        self.assertEqual(result.path, ())
        self.assertIsNone(result.min_depth)
        self.assertIsNone(result.max_depth)

    def test_empty_tree(self):
        self.assertFalse(BinarySearchTree().find_path(42).found)

    def test_strings(self):
        tree = build_tree(["m", "c", "x", "a"])
        self.assertEqual(tree.find_path("a").path, ("m", "c", "a"))


class TestShape(unittest.TestCase):
    """Test height, levels and summary statistics."""

    def test_empty_height(self):
        self.assertEqual(BinarySearchTree().height(), -1)

    def test_subtree_heights(self):
        tree = balanced_tree()
        self.assertEqual(tree.height(), 2)
        self.assertEqual(tree.height(30), 1)
        self.assertEqual(tree.height(20), 0)
        self.assertEqual(tree.height(99), -1)

    def test_levels(self):
        levels = build_tree([10, 5, 15, 3]).levels()
        self.assertEqual(levels.height, 2)
        self.assertEqual(levels.min_leaf_depth, 1)
        self.assertEqual(levels.max_leaf_depth, 2)
        self.assertEqual(levels.nodes_per_level, {0: 1, 1: 2, 2: 1})

    def test_empty_levels(self):
        levels = BinarySearchTree().levels()
        self.assertEqual(levels.height, -1)
        self.assertIsNone(levels.min_leaf_depth)
        self.assertEqual(levels.nodes_per_level, {})

    def test_stats(self):
        stats = balanced_tree().stats()
        self.assertEqual(stats.total_nodes, 7)
        self.assertEqual(stats.leaf_nodes, 4)
        self.assertEqual(stats.internal_nodes, 3)
        self.assertEqual(stats.root_value, 50)
        self.assertEqual(stats.min_value, 20)
        self.assertEqual(stats.max_value, 80)
        self.assertEqual(stats.height, 2)

    def test_min_max_of_empty_tree(self):
        tree = BinarySearchTree()
        self.assertIsNone(tree.min_value())
        self.assertIsNone(tree.max_value())
        self.assertTrue(tree.stats().is_empty)


class TestLifecycle(unittest.TestCase):
    """Test clearing and ownership rules."""

    def test_clear_releases_everything(self):
        tree = balanced_tree()
        tree.clear()
        self.assertTrue(tree.is_empty())
        self.assertEqual(len(tree), 0)
        self.assertFalse(tree)
        self.assertEqual(tree.inorder(), [])
        self.assertEqual(tree.height(), -1)

    def test_tree_is_reusable_after_clear(self):
        tree = balanced_tree()
        tree.clear()
        tree.insert(1)
        self.assertEqual(tree.inorder(), [1])

    def test_copy_is_refused(self):
        tree = balanced_tree()
        with self.assertRaises(TypeError):
            copy.copy(tree)
        with self.assertRaises(TypeError):
            copy.deepcopy(tree)

    def test_trees_are_independent(self):
        a, b = BinarySearchTree(), BinarySearchTree()
        a.insert(1)
        self.assertFalse(b.search(1))
        self.assertTrue(b.is_empty())


if __name__ == "__main__":
    unittest.main()
