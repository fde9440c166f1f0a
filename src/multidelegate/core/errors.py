"""Error taxonomy for composition and member resolution.

All errors are raised synchronously and never retried inside the engine.
Classification errors surface at composition time, ambiguity errors at the
read that hit the conflicting member.
"""

from __future__ import annotations

from typing import Any


class MultiDelegateError(Exception):
    """Base class for every error raised by multidelegate."""

    pass


class HeterogeneousParentsError(MultiDelegateError, TypeError):
    """Raised when a parent list mixes classes and plain objects."""

    def __init__(self, parents: tuple[Any, ...]) -> None:
        self.parents = parents
        kinds = ", ".join(
            f"class {p.__qualname__}" if isinstance(p, type) else f"{type(p).__name__} object"
            for p in parents
        )
        super().__init__(
            "Either every parent should be an ordinary object or every parent "
            f"should be a class. Got: {kinds}"
        )


class EmptyParentsError(MultiDelegateError, ValueError):
    """Raised when composing zero parents while empty composition is disabled."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot compose zero parents (allow_empty_parents is disabled)"
        )


class AmbiguousMemberError(MultiDelegateError):
    """Raised when two or more parents define different values for one key.

    Not an AttributeError on purpose: ``hasattr`` and ``getattr(obj, k, default)``
    must not turn a conflict into "absent".

    Attributes:
        key: The member name that was read.
        candidates: Every ``(parent, value)`` pair found for the key, in
            parent order.
    """

    def __init__(self, key: str, candidates: list[tuple[Any, Any]]) -> None:
        self.key = key
        self.candidates = tuple(candidates)
        owners = ", ".join(_describe(parent) for parent, _ in candidates)
        super().__init__(f"Ambiguous member {key!r}: defined differently by {owners}")


class UnsupportedOperationError(MultiDelegateError, AttributeError):
    """Raised on writes or deletes against a read-only composite."""

    pass


def _describe(parent: Any) -> str:
    if isinstance(parent, type):
        return parent.__qualname__
    return f"<{type(parent).__name__} at {id(parent):#x}>"
