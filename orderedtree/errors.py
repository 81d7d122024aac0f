"""Exception types raised by orderedtree.

A missing item is not an error: ``OrderedTree.remove`` reports it by
returning False. The exceptions here cover misconfiguration only.
"""


class OrderedTreeError(Exception):
    """Base class for all errors raised by orderedtree."""
    pass


class InvalidComparatorError(OrderedTreeError, ValueError):
    """Raised when no usable ordering function can be established.

    This happens at construction time only, e.g. ``OrderedTree(None)``
    or a comparator object that is neither callable nor exposes a
    callable ``compare`` method.
    """
    pass


class UnknownTraversalOrderError(OrderedTreeError, ValueError):
    """Raised when a traversal order name is not recognized."""
    pass
