"""Pure helpers for binding raw class members and picking members to forward."""

from __future__ import annotations

from types import GetSetDescriptorType, MemberDescriptorType
from typing import Any, Final

# Names a placeholder never forwards: construction, the attribute protocol,
# class bookkeeping, and the placeholder's own layers.
NEVER_FORWARDED: Final = frozenset(
    {
        "__new__",
        "__init__",
        "__init_subclass__",
        "__class_getitem__",
        "__subclasshook__",
        "__set_name__",
        "__del__",
        "__getattr__",
        "__getattribute__",
        "__setattr__",
        "__delattr__",
        "__class__",
        "__dict__",
        "__weakref__",
        "__slots__",
        "__module__",
        "__qualname__",
        "__doc__",
        "__annotations__",
        "__annotate__",
        "__type_params__",
        "__orig_bases__",
        "__parameters__",
        "__abstractmethods__",
        "__prototype__",
        "__static__",
    }
)


def bind_member(raw: Any, instance: Any, owner: type) -> Any:
    """Bind a raw namespace value the way normal attribute lookup would.

    Args:
        raw: Value taken from a class namespace.
        instance: Instance being read, or None for class-level reads.
        owner: Class the read goes through.

    Returns:
        Result of the descriptor protocol, or raw itself for plain values.
    """
    getter = getattr(type(raw), "__get__", None)
    if getter is None:
        return raw
    return getter(raw, instance, owner)


def is_layout_descriptor(raw: Any) -> bool:
    """Check if a raw member is a slot or C-level field of its own class.

    Such descriptors only apply to real instances of the parent, never to an
    instance of a class derived from a composite.
    """
    return isinstance(raw, (MemberDescriptorType, GetSetDescriptorType))


def is_data_descriptor(raw: Any, method: str = "__set__") -> bool:
    """Check if a raw member handles writes (``__set__``) or deletes (``__delete__``)."""
    if is_layout_descriptor(raw):
        return False
    return hasattr(type(raw), method)


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def is_forwardable(name: str, raw: Any) -> bool:
    """Decide whether a placeholder should carry a forwarder for ``name``.

    Ordinary names are always forwarded. Special names only when the member
    behaves like one: callable, a descriptor, or ``None`` (how a class marks
    itself unhashable).

    Args:
        name: Member name.
        raw: Raw value found in some parent.

    Returns:
        True if a forwarder should be installed.
    """
    if name in NEVER_FORWARDED or is_layout_descriptor(raw):
        return False
    if not is_dunder(name):
        return True
    return raw is None or callable(raw) or hasattr(type(raw), "__get__")
