"""Composition of classes into one placeholder base class.

Usage:
    class Walker:
        def walk(self): return "walk"

        @staticmethod
        def legs(): return 2

    class Swimmer:
        def swim(self): return "swim"

    class Duck(compose_types([Walker, Swimmer])):
        pass

    duck = Duck()
    duck.walk(), duck.swim()  # ("walk", "swim")
    Duck.legs()               # 2

Nothing is copied from the parents: the placeholder resolves every member
through its two layers at access time, so patching ``Walker`` later is
visible on ``duck`` and ``Duck``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from multidelegate.classes.meta import CompositeType, MemberForwarder, instance_hooks
from multidelegate.classes.operations import NEVER_FORWARDED, is_forwardable
from multidelegate.config.settings import CompositionSettings, get_settings
from multidelegate.core.classify import ParentKind, classify_parents
from multidelegate.core.composite import Composite, compose_sources, is_composite
from multidelegate.core.errors import AmbiguousMemberError
from multidelegate.core.source import (
    MISSING,
    PROTOTYPE_ATTR,
    STATIC_ATTR,
    ClassSource,
    PrototypeSource,
    lookup_in_mro,
    names_in_mro,
)

logger = logging.getLogger(__name__)


def _placeholder_name(parents: Sequence[type]) -> str:
    return f"Composite({', '.join(parent.__qualname__ for parent in parents)})"


def _defines_forwardable(name: str, parents: Sequence[type]) -> bool:
    for parent in parents:
        try:
            raw = lookup_in_mro(parent, name)
        except AmbiguousMemberError:
            # Conflict inside a nested composite: keep the name so reads raise it
            return name not in NEVER_FORWARDED
        if raw is not MISSING and is_forwardable(name, raw):
            return True
    return False


def install_forwarders(placeholder: type, parents: Sequence[type]) -> list[str]:
    """Put a MemberForwarder on the placeholder for every member the parents define now.

    Members added to a parent later are still reachable through ``__getattr__``,
    just not through ``super()`` or implicit special-method lookup.

    Args:
        placeholder: Class built by compose_types.
        parents: The classes it composes.

    Returns:
        Sorted names that received a forwarder.
    """
    prototype = placeholder.__dict__[PROTOTYPE_ATTR]
    static = placeholder.__dict__[STATIC_ATTR]

    candidates: set[str] = set()
    for parent in parents:
        candidates.update(names_in_mro(parent))

    installed: list[str] = []
    for name in sorted(candidates):
        if name in placeholder.__dict__ or not _defines_forwardable(name, parents):
            continue
        setattr(placeholder, name, MemberForwarder(name, prototype, static))
        installed.append(name)
    return installed


def compose_types(
    parents: Sequence[type],
    *,
    settings: CompositionSettings | None = None,
) -> type:
    """Build a placeholder class delegating to several parent classes.

    Steps:
        1. Instance layer: composite over each parent's instance-level members.
        2. Placeholder: empty class owning the instance layer and the hooks
           that route instance misses into it.
        3. Static layer: composite over the parents themselves with the
           placeholder as virtual target, so the placeholder's own members
           (its instance layer first of all) take priority.

    Args:
        parents: Classes in priority order.
        settings: Overrides the process-wide settings.

    Returns:
        The placeholder class, usable as the single base of a class statement.

    Raises:
        HeterogeneousParentsError: If classes and plain objects are mixed.
        EmptyParentsError: If parents is empty and empty composition is disabled.
        TypeError: If no parent is a class.
    """
    if settings is None:
        settings = get_settings()
    kind = classify_parents(parents, allow_empty=settings.allow_empty_parents)
    if parents and kind is not ParentKind.CLASS:
        raise TypeError("compose_types() takes classes, use compose_objects() for plain objects")

    parents = tuple(parents)
    equality = settings.member_equality

    prototype = compose_sources(
        [PrototypeSource(parent) for parent in parents],
        equality=equality,
    )
    namespace: dict[str, Any] = {
        "__module__": __name__,
        "__doc__": f"Delegates to {', '.join(p.__qualname__ for p in parents) or 'nothing'}.",
        PROTOTYPE_ATTR: prototype,
        **instance_hooks(prototype),
    }
    placeholder = CompositeType(_placeholder_name(parents), (), namespace)

    static = compose_sources(
        [ClassSource(parent) for parent in parents],
        virtual_target=placeholder,
        equality=equality,
    )
    setattr(placeholder, STATIC_ATTR, static)

    forwarded = install_forwarders(placeholder, parents) if settings.forward_members else []
    logger.debug(
        "Composed %d class parents into %s (%d forwarders)",
        len(parents),
        placeholder.__name__,
        len(forwarded),
    )
    return placeholder


def is_composite_type(obj: Any) -> bool:
    """Check if obj is a placeholder class built by compose_types (not a subclass of one)."""
    return isinstance(obj, CompositeType) and is_composite(obj.__dict__.get(STATIC_ATTR))


def _layer(cls: type, attr: str) -> Composite:
    for klass in cls.__mro__:
        layer = klass.__dict__.get(attr)
        if is_composite(layer):
            return layer
    raise TypeError(f"{cls!r} does not derive from a composite class")


def prototype_of(cls: type) -> Composite:
    """Return the instance layer a composite class hands to its subclasses.

    Args:
        cls: A placeholder class or any class derived from one.

    Returns:
        The instance-level composite of the nearest placeholder.

    Raises:
        TypeError: If no placeholder is in the class's MRO.
    """
    return _layer(cls, PROTOTYPE_ATTR)


def static_of(cls: type) -> Composite:
    """Return the class-level composite of the nearest placeholder in cls's MRO."""
    return _layer(cls, STATIC_ATTR)
