"""Test fixtures for orderedtree consumers.

These fixtures provide controlled access to internal tree structure for
testing purposes without exposing node objects as part of the public
API.
"""

from typing import Any, List, Optional, Tuple

from ..core.node import TreeNode
from ..tree import OrderedTree


class TreeTestHelper:
    """Public test fixture for inspecting tree shape.

    Example:
        tree = OrderedTree(items=[5, 3, 8])
        helper = TreeTestHelper(tree)

        assert helper.root_value() == 5
        assert helper.find_invariant_violations() == []
    """

    def __init__(self, tree: OrderedTree) -> None:
        """Initialize with the tree under test.

        Args:
            tree: OrderedTree to inspect
        """
        self._tree = tree

    def root_value(self) -> Any:
        """Value at the root.

        Raises:
            ValueError: If the tree is empty
        """
        if self._tree._root is None:
            raise ValueError("root_value of empty tree")
        return self._tree._root.value

    def shape(self) -> Optional[Tuple]:
        """Nested ``(value, left, right)`` tuples describing the tree.

        Empty slots are None. Built bottom-up without recursion so deep
        trees are safe.
        """
        root = self._tree._root
        if root is None:
            return None

        # Post-order guarantees children are built before their parent
        built = {}
        stack: List[Tuple[TreeNode, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                built[id(node)] = (
                    node.value,
                    built.pop(id(node.left)) if node.left is not None else None,
                    built.pop(id(node.right)) if node.right is not None else None,
                )
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
        return built[id(root)]

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        root = self._tree._root
        if root is None:
            return -1
        height = 0
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return height

    def find_invariant_violations(self) -> List[str]:
        """Check the ordering invariant at every node.

        Every value in a node's left subtree must compare less than the
        node's value and every value in its right subtree greater than or
        equal to it. Each node carries the tightest bounds inherited from
        its ancestors, which is equivalent to checking whole subtrees.

        Returns:
            Human readable descriptions of violations (empty if valid)
        """
        compare = self._tree.comparator
        violations: List[str] = []
        root = self._tree._root
        if root is None:
            return violations

        # (node, lower bound inclusive, upper bound exclusive)
        stack: List[Tuple[TreeNode, Optional[TreeNode], Optional[TreeNode]]] = [(root, None, None)]
        while stack:
            node, low, high = stack.pop()
            if low is not None and compare(node.value, low.value) < 0:
                violations.append(f"{node.value!r} is less than ancestor {low.value!r} but sits in its right subtree")
            if high is not None and compare(node.value, high.value) >= 0:
                violations.append(f"{node.value!r} is not less than ancestor {high.value!r}")
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))
        return violations

    def node_count(self) -> int:
        """Count reachable nodes, independently of the traversers."""
        root = self._tree._root
        if root is None:
            return 0
        count = 0
        stack: List[TreeNode] = [root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return count
