"""Parent source models: the absent sentinel, the source protocol, resolution results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Literal, Protocol, runtime_checkable


class Missing(Enum):
    """Sentinel type for "this source does not define the key".

    ``None`` is an ordinary member value, so absence needs its own marker.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> Literal[False]:
        return False


MISSING: Final = Missing.MISSING

# Names under which a composite placeholder class keeps its two layers.
PROTOTYPE_ATTR: Final = "__prototype__"
STATIC_ATTR: Final = "__static__"


@runtime_checkable
class MemberSource(Protocol):
    """A parent as seen by a composite: a keyed capability holder.

    ``try_get`` must touch the underlying parent exactly once, since a member
    can be a computed accessor with side effects.
    """

    @property
    def parent(self) -> Any:
        """The wrapped parent object (not owned by the source)."""
        ...

    def try_get(self, key: str) -> Any:
        """Return the member stored under ``key``, or ``MISSING``."""
        ...

    def keys(self) -> Iterable[str]:
        """Names this source can currently resolve (used by ``dir()``)."""
        ...


@dataclass(frozen=True, slots=True)
class Resolution:
    """Successful read of one key through a composite."""

    key: str
    value: Any
    origins: tuple[Any, ...]
    """Parents that supplied the value, in parent order (or the virtual target)."""

    from_target: bool = False
    """True when the virtual target answered and parents were never consulted."""
