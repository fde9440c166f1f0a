"""Placeholder class machinery: metaclass, member forwarders, instance hooks.

A placeholder is the concrete class a derivation needs as its single base.
It owns no behavior of its own, only two layers:

    __prototype__  composite over the parents' instance-level members
    __static__     composite over the parents' class-level members,
                   with the placeholder itself as virtual target

Reads that miss the normal lookup fall through ``__getattr__`` (instances)
or ``CompositeType.__getattr__`` (classes) into the matching layer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from multidelegate.classes.operations import bind_member, is_data_descriptor, is_layout_descriptor
from multidelegate.core.composite import Composite, is_composite, lookup
from multidelegate.core.errors import AmbiguousMemberError
from multidelegate.core.source import MISSING, STATIC_ATTR


class CompositeType(type):
    """Metaclass of placeholder classes and everything derived from them.

    Class-level misses resolve through the static layer of the first
    placeholder in the class's MRO, and the result is bound to the class
    being read, so classmethods receive the derived class.
    """

    def __getattr__(cls, name: str) -> Any:
        for klass in cls.__mro__:
            static = klass.__dict__.get(STATIC_ATTR)
            if not is_composite(static):
                continue
            raw = lookup(static, name, skip_target=True)
            if raw is not MISSING:
                return bind_member(raw, None, cls)
        raise AttributeError(f"type object {cls.__name__!r} has no attribute {name!r}")


class MemberForwarder:
    """Non-data descriptor standing in for one parent member on a placeholder.

    Real lookups that never reach ``__getattr__`` (``super()``, implicit
    special-method calls such as ``len(obj)`` or ``obj == other``) find the
    forwarder instead. It resolves its name through the layers on every
    access; nothing is cached.
    """

    __slots__ = ("name", "_prototype", "_static")

    def __init__(self, name: str, prototype: Composite, static: Composite) -> None:
        self.name = name
        self._prototype = prototype
        self._static = static

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if owner is None:
            owner = type(instance)
        if instance is None:
            raw = lookup(self._static, self.name, skip_target=True)
        else:
            raw = lookup(self._prototype, self.name)
            if is_layout_descriptor(raw):
                raw = MISSING
        if raw is MISSING:
            # Parents dropped the member since composition
            raise AttributeError(self.name)
        return bind_member(raw, instance, owner)

    def __repr__(self) -> str:
        return f"<MemberForwarder {self.name!r}>"


def _class_member(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return klass.__dict__[name]
    return MISSING


def instance_hooks(prototype: Composite) -> dict[str, Callable[..., Any]]:
    """Build the attribute hooks a placeholder installs for its instances.

    Args:
        prototype: The placeholder's instance layer.

    Returns:
        Namespace entries for ``__getattr__``, ``__setattr__`` and ``__delattr__``.
    """

    def parent_descriptor(instance: Any, name: str, method: str) -> Any:
        # Names the derived class really defines keep their normal semantics
        member = _class_member(type(instance), name)
        if member is not MISSING and not isinstance(member, MemberForwarder):
            return MISSING
        try:
            raw = lookup(prototype, name)
        except AmbiguousMemberError as exc:
            # Conflicting plain values do not stop an instance from shadowing them
            if any(is_data_descriptor(value, method) for _, value in exc.candidates):
                raise
            return MISSING
        if raw is not MISSING and is_data_descriptor(raw, method):
            return raw
        return MISSING

    def __getattr__(self: Any, name: str) -> Any:
        if isinstance(_class_member(type(self), name), MemberForwarder):
            # The forwarder already resolved this read and found nothing
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        raw = lookup(prototype, name)
        if raw is MISSING or is_layout_descriptor(raw):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return bind_member(raw, self, type(self))

    def __setattr__(self: Any, name: str, value: Any) -> None:
        raw = parent_descriptor(self, name, "__set__")
        if raw is not MISSING:
            type(raw).__set__(raw, self, value)
        else:
            object.__setattr__(self, name, value)

    def __delattr__(self: Any, name: str) -> None:
        raw = parent_descriptor(self, name, "__delete__")
        if raw is not MISSING:
            type(raw).__delete__(raw, self)
        else:
            object.__delattr__(self, name)

    return {
        "__getattr__": __getattr__,
        "__setattr__": __setattr__,
        "__delattr__": __delattr__,
    }
