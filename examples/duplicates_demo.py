#!/usr/bin/env python3
"""Demo script for duplicate handling in the BST engine.

Builds the same input under both insertion policies and shows how
duplicates change the shape, the counts and the paths.
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstplayground import build_tree, get_tree_stats


VALUES = [50, 30, 70, 30, 20, 30, 60, 80, 70]


def show_tree(title: str, admit_duplicates: bool):
    """Print one tree sideways plus its counts and paths."""
    print(f"\n=== {title} ===")
    tree = build_tree(VALUES, admit_duplicates=admit_duplicates)

    for value, depth in tree.layout():
        print("   " * depth + str(value))

    print(f"\nInorder:  {tree.inorder()}")
    print(f"Preorder: {tree.preorder()}")

    for value in (30, 70, 65):
        stats = tree.count_occurrences(value)
        path = tree.find_path(value)
        if not path.found:
            print(f"  {value}: not found")
            continue
        route = " -> ".join(str(v) for v in path.path)
        print(f"  {value}: count={stats.count} depths={stats.min_depth}..{stats.max_depth} path={route}")

    stats = get_tree_stats(tree)
    print("\nDepth statistics:")
    for depth, count in stats['depths'].items():
        print(f"  Depth {depth}: {count} nodes")


def main():
    print(f"Input: {VALUES}")
    show_tree("Duplicate-free", admit_duplicates=False)
    show_tree("Duplicates admitted", admit_duplicates=True)


if __name__ == "__main__":
    main()
