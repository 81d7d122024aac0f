"""Configuration system for orderedtree.

This module defines how users describe the ordering a tree should use
and which traversal order ``OrderedTree.traverse()`` falls back to.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .errors import InvalidComparatorError, UnknownTraversalOrderError
from .ordering import Comparator, by_key, natural_order, resolve_comparator, reverse_order


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    PRE_ORDER = "pre"     # Node, then left subtree, then right subtree
    IN_ORDER = "in"       # Left subtree, node, right subtree (ascending)
    POST_ORDER = "post"   # Left subtree, right subtree, then node


_ORDER_ALIASES = {
    'pre': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'in': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'sorted': TraversalOrder.IN_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a name.

    Args:
        order: TraversalOrder member or alias such as "pre" or "in_order"

    Returns:
        TraversalOrder enum value

    Raises:
        UnknownTraversalOrderError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    if isinstance(order, str):
        normalized = order.lower().replace('-', '_')
        if normalized in _ORDER_ALIASES:
            return _ORDER_ALIASES[normalized]

    raise UnknownTraversalOrderError(
        f"Unknown traversal order: {order!r}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class TreeConfig:
    """Complete configuration for an OrderedTree.

    The comparator is fixed for the lifetime of a tree, so a config is
    consumed once at construction. ``key`` and ``reverse`` are applied on
    top of ``compare``: with a key the values are compared by
    ``compare(key(a), key(b))``.
    """

    compare: Optional[Any] = natural_order
    key: Optional[Callable[[Any], Any]] = None
    reverse: bool = False

    # Used by OrderedTree.traverse() when no order is given
    default_order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER

    # Convenience constructors for common configurations

    @classmethod
    def natural(cls) -> 'TreeConfig':
        """Create config using the values' natural ordering."""
        return cls()

    @classmethod
    def from_key(cls, key: Callable[[Any], Any], reverse: bool = False) -> 'TreeConfig':
        """Create config ordering values by a key function.

        Args:
            key: Function extracting a naturally ordered sort key
            reverse: Sort largest keys first

        Returns:
            TreeConfig using the key
        """
        return cls(key=key, reverse=reverse)

    @classmethod
    def descending(cls) -> 'TreeConfig':
        """Create config that iterates largest values first."""
        return cls(reverse=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.compare is None:
            errors.append("compare must not be None")
        elif isinstance(self.compare, type) and callable(getattr(self.compare, 'compare', None)):
            errors.append("compare must be a comparer instance, not a class")
        elif not callable(self.compare) and not callable(getattr(self.compare, 'compare', None)):
            errors.append("compare must be callable or expose a compare() method")

        if self.key is not None and not callable(self.key):
            errors.append("key must be callable")

        try:
            parse_order(self.default_order)
        except UnknownTraversalOrderError:
            errors.append(f"unknown default_order: {self.default_order!r}")

        return errors

    def build_comparator(self) -> Comparator:
        """Resolve this config into a single three-way function.

        Raises:
            InvalidComparatorError: If the config does not validate
        """
        errors = self.validate()
        if errors:
            raise InvalidComparatorError(f"Invalid configuration: {'; '.join(errors)}")

        compare = resolve_comparator(self.compare)
        if self.key is not None:
            compare = by_key(self.key, compare)
        if self.reverse:
            compare = reverse_order(compare)
        return compare
