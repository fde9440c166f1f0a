"""Concrete member sources wrapping the parents handed to a composition.

Plain objects resolve by attribute, mappings by key, and classes by a raw walk
of their namespaces so the caller decides how the member gets bound.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from multidelegate.core.source.models import MISSING, PROTOTYPE_ATTR, STATIC_ATTR


class ObjectSource:
    """Resolves members with one ``getattr`` on a plain object."""

    __slots__ = ("_parent",)

    def __init__(self, parent: Any) -> None:
        self._parent = parent

    @property
    def parent(self) -> Any:
        return self._parent

    def try_get(self, key: str) -> Any:
        return getattr(self._parent, key, MISSING)

    def keys(self) -> list[str]:
        return dir(self._parent)

    def __repr__(self) -> str:
        return f"ObjectSource({self._parent!r})"


class MappingSource:
    """Resolves members with one item read on a mapping."""

    __slots__ = ("_parent",)

    def __init__(self, parent: Mapping[str, Any]) -> None:
        self._parent = parent

    @property
    def parent(self) -> Mapping[str, Any]:
        return self._parent

    def try_get(self, key: str) -> Any:
        try:
            return self._parent[key]
        except KeyError:
            return MISSING

    def keys(self) -> list[str]:
        return [key for key in self._parent if isinstance(key, str)]

    def __repr__(self) -> str:
        return f"MappingSource({self._parent!r})"


def _walk(cls: type, layer_attr: str) -> Iterator[tuple[type, Any]]:
    """Yield ``(klass, layer_or_None)`` for every class consulted on a raw lookup.

    ``object`` is skipped: the derived class already inherits it for real, and
    every parent reaching it would otherwise look like a conflict.
    """
    # Late import to avoid circular dependency
    from multidelegate.core.composite.core import is_composite

    for klass in cls.__mro__:
        if klass is object:
            continue
        layer = klass.__dict__.get(layer_attr)
        yield klass, layer if is_composite(layer) else None


def lookup_in_mro(cls: type, key: str, layer_attr: str = PROTOTYPE_ATTR) -> Any:
    """Find the raw (unbound) member ``key`` along ``cls.__mro__``.

    Placeholder classes built by an earlier type composition contribute their
    parents' members through their layer, never their own machinery.

    Args:
        cls: Class to search.
        key: Member name.
        layer_attr: Which layer of a placeholder to consult.

    Returns:
        The raw namespace value, or MISSING.
    """
    # Late import to avoid circular dependency
    from multidelegate.core.composite.core import lookup

    for klass, layer in _walk(cls, layer_attr):
        if layer is not None:
            value = lookup(layer, key, skip_target=True)
            if value is not MISSING:
                return value
            continue
        namespace = klass.__dict__
        if key in namespace:
            return namespace[key]
    return MISSING


def names_in_mro(cls: type, layer_attr: str = PROTOTYPE_ATTR) -> set[str]:
    """All member names a raw lookup on ``cls`` could resolve."""
    # Late import to avoid circular dependency
    from multidelegate.core.composite.core import member_names

    names: set[str] = set()
    for klass, layer in _walk(cls, layer_attr):
        if layer is not None:
            names.update(member_names(layer, skip_target=True))
        else:
            names.update(klass.__dict__)
    return names


class PrototypeSource:
    """The instance-level behavior of a class: what its instances would inherit.

    Returns raw namespace values (functions, properties, ...); binding to an
    instance is left to the reader.
    """

    __slots__ = ("_parent",)

    def __init__(self, parent: type) -> None:
        self._parent = parent

    @property
    def parent(self) -> type:
        return self._parent

    def try_get(self, key: str) -> Any:
        return lookup_in_mro(self._parent, key, PROTOTYPE_ATTR)

    def keys(self) -> set[str]:
        return names_in_mro(self._parent, PROTOTYPE_ATTR)

    def __repr__(self) -> str:
        return f"PrototypeSource({self._parent.__qualname__})"


class ClassSource:
    """The class-level (static) behavior of a class."""

    __slots__ = ("_parent",)

    def __init__(self, parent: type) -> None:
        self._parent = parent

    @property
    def parent(self) -> type:
        return self._parent

    @property
    def prototype(self) -> PrototypeSource:
        """Instance-prototype holder reachable from this class."""
        return PrototypeSource(self._parent)

    def try_get(self, key: str) -> Any:
        return lookup_in_mro(self._parent, key, STATIC_ATTR)

    def keys(self) -> set[str]:
        return names_in_mro(self._parent, STATIC_ATTR)

    def __repr__(self) -> str:
        return f"ClassSource({self._parent.__qualname__})"


def as_source(parent: Any) -> ObjectSource | MappingSource | ClassSource:
    """Wrap a parent in the source matching its kind.

    Args:
        parent: A class, a mapping, or any other object.

    Returns:
        ClassSource for classes, MappingSource for mappings, ObjectSource otherwise.
    """
    if isinstance(parent, type):
        return ClassSource(parent)
    if isinstance(parent, Mapping):
        return MappingSource(parent)
    return ObjectSource(parent)
