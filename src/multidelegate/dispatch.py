"""Single entry point: classify the parents, then compose objects or classes."""

from __future__ import annotations

import logging
from typing import Any

from multidelegate.classes import compose_types
from multidelegate.config import CompositionSettings, get_settings
from multidelegate.core.classify import ParentKind, classify_parents
from multidelegate.core.composite import Composite, compose_objects

logger = logging.getLogger(__name__)


def inherit(*parents: Any, settings: CompositionSettings | None = None) -> Composite | type:
    """Delegate to several parents at once.

    Plain objects (and mappings) give a read-only Composite. Classes give a
    placeholder class to use as the single base of a class statement.

    Args:
        *parents: All plain objects or all classes, in priority order.
        settings: Overrides the process-wide settings.

    Returns:
        A Composite for object parents, a placeholder class for class parents.

    Raises:
        HeterogeneousParentsError: If classes and plain objects are mixed.
        EmptyParentsError: If no parent is given and empty composition is disabled.

    Example:
        >>> class Base1:
        ...     def foo(self):
        ...         return "foo"
        >>> class Base2:
        ...     def bar(self):
        ...         return "bar"
        >>> class Both(inherit(Base1, Base2)):
        ...     pass
        >>> Both().foo(), Both().bar()
        ('foo', 'bar')
    """
    if settings is None:
        settings = get_settings()
    kind = classify_parents(parents, allow_empty=settings.allow_empty_parents)
    logger.debug("Dispatching %d parents as %s", len(parents), kind.name)
    if kind is ParentKind.CLASS:
        return compose_types(parents, settings=settings)
    return compose_objects(parents, settings=settings)
