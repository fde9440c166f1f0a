"""Instance-level composition: composite objects, resolution, sameness strategies."""

from multidelegate.core.composite.core import (
    Composite,
    compose_objects,
    compose_sources,
    is_composite,
    lookup,
    member_names,
    parents_of,
    resolve,
    sources_of,
)
from multidelegate.core.composite.models import CompositeState, MemberEquality, SameMember
from multidelegate.core.composite.operations import same_equality, same_identity

__all__ = [
    # Models
    "CompositeState",
    "MemberEquality",
    "SameMember",
    # Operations
    "same_identity",
    "same_equality",
    # Core
    "Composite",
    "compose_sources",
    "compose_objects",
    "resolve",
    "lookup",
    "member_names",
    "is_composite",
    "parents_of",
    "sources_of",
]
