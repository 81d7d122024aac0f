"""TreeNode for orderedtree.

The TreeNode is intentionally kept simple - it's a data container with
two owned child slots. All ordering and relinking logic lives in
OrderedTree; traversal logic lives in the traversers.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class TreeNode(Generic[T]):
    """A single node of a binary search tree.

    Each node is owned by exactly one parent (or by the tree, for the
    root). There are no parent back-references, so the structure can
    never contain a cycle.
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['TreeNode[T]'] = None
        self.right: Optional['TreeNode[T]'] = None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"
