"""Core building blocks for orderedtree.

This module contains the node container and the traversal strategies
that OrderedTree is built on.
"""

from .node import TreeNode
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

__all__ = [
    "TreeNode",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
]
