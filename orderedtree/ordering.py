"""Comparator plumbing for orderedtree.

Every tree holds a single three-way comparison function
``compare(a, b) -> int`` returning a negative number, zero or a positive
number. This module builds such functions from the forms callers
commonly have at hand: nothing (natural ordering), a key function, or a
comparer object with a ``compare`` method.
"""

import logging
from typing import Any, Callable, TypeVar

from .errors import InvalidComparatorError

logger = logging.getLogger(__name__)

T = TypeVar('T')
K = TypeVar('K')

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``<`` and ``>``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def by_key(key: Callable[[T], K], compare_keys: Comparator = natural_order) -> Comparator:
    """Build a comparator that orders values by ``key(value)``.

    Args:
        key: Function extracting a sort key
        compare_keys: Three-way comparator applied to the extracted keys

    Returns:
        Three-way comparator over the original values
    """
    if not callable(key):
        raise InvalidComparatorError(f"key must be callable, got {key!r}")

    def compare(a: T, b: T) -> int:
        return compare_keys(key(a), key(b))

    compare.__name__ = f"by_key({getattr(key, '__name__', repr(key))})"
    return compare


def reverse_order(compare: Comparator) -> Comparator:
    """Flip a comparator so larger values sort first."""

    def reversed_compare(a: Any, b: Any) -> int:
        return compare(b, a)

    reversed_compare.__name__ = f"reversed({getattr(compare, '__name__', repr(compare))})"
    return reversed_compare


def resolve_comparator(comparer: Any) -> Comparator:
    """Turn a user-supplied ordering into a plain three-way function.

    Accepts either a callable ``(a, b) -> int`` or an object exposing a
    callable ``compare(a, b)`` method. Anything else, including None, is
    rejected immediately so a bad tree can never be constructed.

    Args:
        comparer: Callable or comparer object

    Returns:
        Three-way comparison function

    Raises:
        InvalidComparatorError: If no usable comparison can be derived
    """
    if comparer is None:
        logger.debug("Rejected comparator: None")
        raise InvalidComparatorError("comparator must not be None")

    method = getattr(comparer, 'compare', None)
    if callable(method):
        if isinstance(comparer, type):
            logger.debug("Rejected comparator class: %r", comparer)
            raise InvalidComparatorError(
                f"pass a comparer instance, not the class {comparer.__name__}"
            )
        return method

    if callable(comparer):
        return comparer

    logger.debug("Rejected comparator: %r", comparer)
    raise InvalidComparatorError(
        f"comparator must be callable or expose a compare() method, got {type(comparer).__name__}"
    )
