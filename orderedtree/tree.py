"""OrderedTree - an unbalanced binary search tree over any ordering.

The tree never rebalances. Insertion order determines shape, and sorted
input degenerates into a linked list, which is why every descent and
traversal here is a loop rather than a recursion.

Ties route right: a value comparing equal to a node is placed in that
node's right subtree. ``add``, ``remove`` and ``contains`` all call the
comparator as ``compare(item, node.value)``.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar, Union

from .config import TraversalOrder, TreeConfig, parse_order
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .ordering import Comparator, natural_order, resolve_comparator

logger = logging.getLogger(__name__)

T = TypeVar('T')

_LEFT = 'left'
_RIGHT = 'right'


class TreeTraversal(Generic[T]):
    """A lazy, restartable sequence of tree values.

    Each ``iter()`` starts a fresh walk from the tree's current root
    with its own stack, so a TreeTraversal can be consumed any number of
    times. Mutating the tree while an iteration is in progress gives
    unspecified results.
    """

    def __init__(self, tree: 'OrderedTree[T]', traverser: TreeTraverser) -> None:
        self._tree = tree
        self._traverser = traverser

    @property
    def order(self) -> TraversalOrder:
        return self._traverser.order

    def __iter__(self) -> Iterator[T]:
        for node in self._traverser.traverse(self._tree._root):
            yield node.value

    def __repr__(self) -> str:
        return f"TreeTraversal(order={self.order.value!r}, values={list(self)!r})"


class OrderedTree(Generic[T]):
    """Unbalanced binary search tree driven by a three-way comparator.

    Invariant: for every node, values in its left subtree compare less
    than the node's value and values in its right subtree compare
    greater than or equal to it.

    Example:
        >>> tree = OrderedTree()
        >>> for value in [5, 3, 8]:
        ...     tree.add(value)
        >>> list(tree)
        [3, 5, 8]
    """

    def __init__(self,
                 compare: Any = natural_order,
                 items: Iterable[T] = (),
                 default_order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> None:
        """Create an empty tree, optionally seeded with items.

        Args:
            compare: Three-way comparator ``(a, b) -> int`` or an object
                with a ``compare(a, b)`` method. Defaults to natural
                ordering. None is rejected.
            items: Values to add, in order
            default_order: Order used by ``traverse()`` with no argument

        Raises:
            InvalidComparatorError: If compare is None or unusable
        """
        self._compare: Comparator = resolve_comparator(compare)
        self._default_order = parse_order(default_order)
        self._root: Optional[TreeNode[T]] = None
        for item in items:
            self.add(item)

    @classmethod
    def from_config(cls, config: TreeConfig, items: Iterable[T] = ()) -> 'OrderedTree[T]':
        """Create a tree from a TreeConfig.

        Raises:
            InvalidComparatorError: If the config does not validate
        """
        return cls(config.build_comparator(), items, default_order=config.default_order)

    @property
    def comparator(self) -> Comparator:
        """The ordering function fixed at construction."""
        return self._compare

    def add(self, item: T) -> None:
        """Insert item. Duplicates are accepted and placed to the right."""
        node = TreeNode(item)
        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if self._compare(item, current.value) < 0:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def contains(self, key: T) -> bool:
        """Check whether a value comparing equal to key is stored."""
        current = self._root
        while current is not None:
            result = self._compare(key, current.value)
            if result == 0:
                return True
            current = current.left if result < 0 else current.right
        return False

    def remove(self, item: T) -> bool:
        """Remove one value comparing equal to item.

        With duplicates, the first equal node met on the way down is the
        one removed, i.e. the earliest inserted of the equal values on
        that path.

        Returns:
            True if a value was removed, False if none matched
        """
        if self._root is None:
            return False

        parent: Optional[TreeNode[T]] = None
        side: Optional[str] = None
        current: Optional[TreeNode[T]] = self._root

        while current is not None:
            result = self._compare(item, current.value)
            if result == 0:
                break
            parent = current
            if result < 0:
                side, current = _LEFT, current.left
            else:
                side, current = _RIGHT, current.right

        if current is None:
            return False

        replacement = self._detach(current)

        if parent is None:
            logger.debug("Replacing root %r with %r", current.value,
                         replacement.value if replacement is not None else None)
            self._root = replacement
        else:
            setattr(parent, side, replacement)
        return True

    def _detach(self, node: TreeNode[T]) -> Optional[TreeNode[T]]:
        """Unlink node's children into the subtree that takes its place."""
        right = node.right

        if right is None:
            logger.debug("Removing %r: no right child", node.value)
            return node.left

        if right.left is None:
            logger.debug("Removing %r: right child has no left child", node.value)
            right.left = node.left
            return right

        logger.debug("Removing %r: splicing in-order successor", node.value)
        prev, successor = right, right.left
        while successor.left is not None:
            prev, successor = successor, successor.left

        prev.left = successor.right
        successor.left = node.left
        successor.right = node.right
        return successor

    def pre_order(self) -> TreeTraversal[T]:
        """Values in pre-order: node, left subtree, right subtree."""
        return self.traverse(TraversalOrder.PRE_ORDER)

    def in_order(self) -> TreeTraversal[T]:
        """Values in ascending order under the comparator."""
        return self.traverse(TraversalOrder.IN_ORDER)

    def post_order(self) -> TreeTraversal[T]:
        """Values in post-order: left subtree, right subtree, node."""
        return self.traverse(TraversalOrder.POST_ORDER)

    def traverse(self, order: Union[TraversalOrder, str, None] = None) -> TreeTraversal[T]:
        """Values in the given order, or the tree's default order.

        Raises:
            UnknownTraversalOrderError: If the order name is not recognized
        """
        if order is None:
            order = self._default_order
        return TreeTraversal(self, create_traverser(order))

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"OrderedTree({list(self)!r})"
