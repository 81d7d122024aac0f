"""Tree traversal strategies for orderedtree.

Traversers implement the classical depth-first orders over a binary
tree of TreeNodes. All of them are iterative with an explicit stack:
an unbalanced tree built from sorted input is as deep as it is long,
so recursion would hit the interpreter's call depth limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Union

from ..config import TraversalOrder, parse_order
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    A traverser holds no state between calls; each call to
    ``traverse`` owns its own stack, so several traversals over the
    same unmodified tree can run side by side.
    """

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        """Traverse the tree starting from root.

        Args:
            root: Root node, or None for an empty tree

        Yields:
            Nodes in this traverser's order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node, then its left subtree, then its right subtree.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        if root is None:
            return

        stack: List[TreeNode] = [root]
        while stack:
            node = stack.pop()
            yield node
            # Right goes in first so left comes out first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal.

    Visits the left subtree, the node, then the right subtree. On a
    binary search tree this yields values in ascending order.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        stack: List[TreeNode] = []
        current = root

        while current is not None or stack:
            if current is not None:
                stack.append(current)
                current = current.left
            else:
                node = stack.pop()
                yield node
                current = node.right


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits the left subtree, the right subtree, then the node. A node's
    right child is pushed beneath it; when the node is popped with its
    right child still on top of the stack, the right subtree has not
    been walked yet, so the two swap places and the walk descends right.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        stack: List[TreeNode] = []
        current = root

        while current is not None or stack:
            if current is not None:
                if current.right is not None:
                    stack.append(current.right)
                stack.append(current)
                current = current.left
                continue

            node = stack.pop()
            if stack and node.right is not None and stack[-1] is node.right:
                stack.pop()
                stack.append(node)
                current = node.right
            else:
                yield node


_TRAVERSERS = {
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or name (pre, in, post, ...)

    Returns:
        TreeTraverser instance

    Raises:
        UnknownTraversalOrderError: If the order name is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
