"""High-level API for orderedtree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of
use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Tuple, TypeVar, Union

from .config import TraversalOrder
from .core.node import TreeNode
from .ordering import natural_order
from .tree import OrderedTree

T = TypeVar('T')


def build_tree(items: Iterable[T], compare: Any = natural_order) -> OrderedTree[T]:
    """Build a tree by adding items in iteration order.

    Args:
        items: Values to insert
        compare: Three-way comparator or comparer object

    Returns:
        A new OrderedTree holding every item

    Example:
        >>> tree = build_tree([5, 3, 8, 1, 4, 7, 9])
        >>> list(tree.pre_order())
        [5, 3, 1, 4, 8, 7, 9]
    """
    return OrderedTree(compare, items)


def traverse_tree(tree: OrderedTree[T],
                  order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator[T]:
    """Simple interface for walking a tree in a named order.

    Args:
        tree: Tree to walk
        order: TraversalOrder member or name (pre, in, post, ...)

    Yields:
        Values in the requested order
    """
    yield from tree.traverse(order)


def tree_sort(items: Iterable[T], compare: Any = natural_order) -> List[T]:
    """Sort items by inserting them into a tree and reading it in order.

    Stable: ties route right on insertion and in-order emits left before
    right, so equal items keep their input order. Runs in quadratic time
    on already sorted input since the tree never rebalances.
    """
    return list(build_tree(items, compare))


def count_nodes(tree: OrderedTree) -> int:
    """Count the values currently stored in a tree.

    The tree does not track its size, so this walks every node.
    """
    return sum(1 for _ in tree.pre_order())


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree's shape.

    Args:
        tree: Tree to inspect

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes,
        height (edges on the longest root-to-leaf path, -1 when empty)
        and depths (node count per depth)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'internal_nodes': 0,
        'height': -1,
        'depths': {},
    }

    root = tree._root
    if root is None:
        return stats

    stack: List[Tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats
