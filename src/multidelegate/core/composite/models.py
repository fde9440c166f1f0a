"""Composite models: sameness strategies and the per-composite state record."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from multidelegate.core.source.models import MemberSource

SameMember = Callable[[Any, Any], bool]
"""Signature: (first_found, other_found) -> True if both denote the same member"""


class MemberEquality(Enum):
    """How values found in several parents are compared before declaring ambiguity."""

    IDENTITY = "identity"  # Same object (or same function bound to the same object)
    EQUALITY = "equality"  # Values compare equal with ==

    def get_strategy(self) -> SameMember:
        """Get the comparison function for this mode.

        Returns:
            Pure function implementing the comparison.
        """
        # Late import to avoid circular dependency
        from multidelegate.core.composite import operations

        strategies = {
            MemberEquality.IDENTITY: operations.same_identity,
            MemberEquality.EQUALITY: operations.same_equality,
        }
        return strategies[self]


@dataclass(frozen=True, slots=True)
class CompositeState:
    """Everything a composite knows. Fixed for the composite's lifetime."""

    sources: tuple[MemberSource, ...]
    """Parents in priority order."""

    target: Any
    """Virtual target consulted before any parent, or None."""

    same: SameMember
    """Comparison used to tell shared members from conflicting ones."""
