"""Homogeneity check run before any composition work.

Objects compose with objects and classes compose with classes; a list mixing
both is rejected up front rather than producing a half-working composite.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from multidelegate.core.classify.models import ParentKind
from multidelegate.core.errors import EmptyParentsError, HeterogeneousParentsError


def is_class_parent(parent: Any) -> bool:
    """Check if a parent is type-like (a class rather than a plain object).

    Args:
        parent: Candidate parent.

    Returns:
        True for classes, False for anything else.
    """
    return isinstance(parent, type)


def classify_parents(parents: Sequence[Any], *, allow_empty: bool = True) -> ParentKind:
    """Decide whether every parent is a plain object or every parent is a class.

    Args:
        parents: Ordered parent list.
        allow_empty: If True, zero parents classify as OBJECT (an empty
            composite where nothing resolves).

    Returns:
        The kind shared by every parent.

    Raises:
        EmptyParentsError: If parents is empty and allow_empty is False.
        HeterogeneousParentsError: If classes and plain objects are mixed.
    """
    if not parents:
        if not allow_empty:
            raise EmptyParentsError()
        return ParentKind.OBJECT

    flags = [is_class_parent(parent) for parent in parents]
    if all(flags):
        return ParentKind.CLASS
    if not any(flags):
        return ParentKind.OBJECT
    raise HeterogeneousParentsError(tuple(parents))
