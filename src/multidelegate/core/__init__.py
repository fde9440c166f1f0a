"""Core functionalities: parent sources, classification, instance composition.

Architecture Note:
    core/ holds the delegation engine itself: stateless sources, the
    homogeneity classifier and the instance composer. Composition of classes
    (placeholder classes, metaclass, member forwarding) lives in classes/.
"""

from multidelegate.core.classify import ParentKind, classify_parents, is_class_parent
from multidelegate.core.composite import (
    Composite,
    CompositeState,
    MemberEquality,
    SameMember,
    compose_objects,
    compose_sources,
    is_composite,
    lookup,
    member_names,
    parents_of,
    resolve,
    same_equality,
    same_identity,
    sources_of,
)
from multidelegate.core.errors import (
    AmbiguousMemberError,
    EmptyParentsError,
    HeterogeneousParentsError,
    MultiDelegateError,
    UnsupportedOperationError,
)
from multidelegate.core.source import (
    MISSING,
    PROTOTYPE_ATTR,
    STATIC_ATTR,
    ClassSource,
    MappingSource,
    MemberSource,
    Missing,
    ObjectSource,
    PrototypeSource,
    Resolution,
    as_source,
    lookup_in_mro,
    names_in_mro,
)

__all__ = [
    # Errors
    "MultiDelegateError",
    "HeterogeneousParentsError",
    "EmptyParentsError",
    "AmbiguousMemberError",
    "UnsupportedOperationError",
    # Sources
    "MISSING",
    "Missing",
    "MemberSource",
    "Resolution",
    "PROTOTYPE_ATTR",
    "STATIC_ATTR",
    "ObjectSource",
    "MappingSource",
    "PrototypeSource",
    "ClassSource",
    "as_source",
    "lookup_in_mro",
    "names_in_mro",
    # Classification
    "ParentKind",
    "classify_parents",
    "is_class_parent",
    # Composite
    "Composite",
    "CompositeState",
    "MemberEquality",
    "SameMember",
    "same_identity",
    "same_equality",
    "compose_sources",
    "compose_objects",
    "resolve",
    "lookup",
    "member_names",
    "is_composite",
    "parents_of",
    "sources_of",
]
