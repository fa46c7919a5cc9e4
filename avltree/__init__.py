"""
A sorted map backed by an AVL tree.

- Every node keeps its height, and after an insert or delete each node on the
  path back to the root is rebalanced with a single or double rotation if its
  subtrees differ in height by 2. This keeps the tree height below
  1.44 * log2(n + 2), so inserts, lookups and deletes are O(log n).
- Deleting a node with children moves the max of its left subtree (or the min
  of its right one) into its place.
- Iteration walks the tree inorder, so keys always come out sorted.
- Sizes aren't cached, `len()` walks the tree.

Usage:

    >>> tree = AVLTree(default=0)
    >>> tree["b"] = 2
    >>> tree["a"] = 1
    >>> list(tree.items())
    [('a', 1), ('b', 2)]
    >>> tree["missing"]
    0
"""
from .node import EMPTY, HeightMismatch, TreeCorruption, UnbalancedTree
from .tree import AVLTree, ConfigurationError

__all__ = [
    "AVLTree",
    "ConfigurationError",
    "EMPTY",
    "HeightMismatch",
    "TreeCorruption",
    "UnbalancedTree",
]
