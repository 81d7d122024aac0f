"""orderedtree - Unbalanced binary search tree over any ordering.

OrderedTree stores values of any type under a caller-supplied three-way
comparator and supports insertion, deletion, membership tests and
iterative pre-, in- and post-order traversal.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtree import OrderedTree

    tree = OrderedTree(items=[5, 3, 8, 1, 4, 7, 9])
    list(tree)                # [1, 3, 4, 5, 7, 8, 9]
    list(tree.pre_order())    # [5, 3, 1, 4, 8, 7, 9]
    tree.remove(3)            # True
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .errors import OrderedTreeError, InvalidComparatorError, UnknownTraversalOrderError
from .ordering import natural_order, by_key, reverse_order, resolve_comparator
from .config import TraversalOrder, TreeConfig, parse_order
from .core import (
    TreeNode,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)
from .tree import OrderedTree, TreeTraversal
from .api import build_tree, traverse_tree, tree_sort, count_nodes, get_tree_stats

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Tree
    "OrderedTree",
    "TreeTraversal",
    # Core
    "TreeNode",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    # Ordering
    "natural_order",
    "by_key",
    "reverse_order",
    "resolve_comparator",
    # Config
    "TraversalOrder",
    "TreeConfig",
    "parse_order",
    # Errors
    "OrderedTreeError",
    "InvalidComparatorError",
    "UnknownTraversalOrderError",
    # API
    "build_tree",
    "traverse_tree",
    "tree_sort",
    "count_nodes",
    "get_tree_stats",
]
