"""Pure comparison functions deciding whether two found members are the same.

Several parents commonly reach one shared member (a function from a common
base class, a module-level helper). That is not a conflict; only members that
are observably different are.
"""

from __future__ import annotations

from types import MethodType
from typing import Any

# Immutable scalars compare by value: equal instances are interchangeable
SCALAR_TYPES: tuple[type, ...] = (str, bytes, int, float, complex, bool, type(None))


def same_identity(first: Any, other: Any) -> bool:
    """Compare by identity, treating equivalent bound methods as the same.

    Each attribute read of a method builds a fresh bound-method object, so two
    reads are the same member when they wrap the same function and the same
    receiver. Immutable scalars of one exact type are the same member when
    they are equal: ``"red"`` built at runtime and the literal ``"red"`` are
    one value. ``True`` and ``1`` are not.

    Args:
        first: Value found in the first parent defining the key.
        other: Value found in a later parent.

    Returns:
        True if both denote the same underlying member.
    """
    if first is other:
        return True
    if type(first) is type(other) and type(first) in SCALAR_TYPES:
        return bool(first == other)
    if isinstance(first, MethodType) and isinstance(other, MethodType):
        return first.__func__ is other.__func__ and first.__self__ is other.__self__
    return False


def same_equality(first: Any, other: Any) -> bool:
    """Compare with ``==`` after the identity check.

    Args:
        first: Value found in the first parent defining the key.
        other: Value found in a later parent.

    Returns:
        True if identical or equal.
    """
    if same_identity(first, other):
        return True
    return bool(first == other)
