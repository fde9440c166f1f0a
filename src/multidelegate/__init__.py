"""multidelegate: multiple inheritance through delegation.

Usage:
    from multidelegate import inherit

    # Objects delegating to several objects
    defaults = {"color": "red"}
    overrides = SimpleNamespace(size=3)
    both = inherit(defaults, overrides)
    both.color, both.size  # ("red", 3)

    # Classes delegating to several classes
    class Duck(inherit(Walker, Swimmer)):
        pass

    Duck().walk()
    Duck().swim()

Members are never copied. Every read asks the parents again, so later
changes to a parent show through. When two parents define different values
for the same name, the read raises AmbiguousMemberError.
"""

__version__ = "0.1.0"

# Class composition
from multidelegate.classes import (
    CompositeType,
    compose_types,
    is_composite_type,
    prototype_of,
    static_of,
)

# Configuration
from multidelegate.config import CompositionSettings, get_settings, reset_settings

# Core primitives
from multidelegate.core import (
    MISSING,
    AmbiguousMemberError,
    ClassSource,
    Composite,
    EmptyParentsError,
    HeterogeneousParentsError,
    MappingSource,
    MemberEquality,
    MemberSource,
    MultiDelegateError,
    ObjectSource,
    ParentKind,
    PrototypeSource,
    Resolution,
    UnsupportedOperationError,
    classify_parents,
    compose_objects,
    compose_sources,
    is_composite,
    lookup,
    parents_of,
    resolve,
)

# Entry point
from multidelegate.dispatch import inherit

__all__ = [
    # Version
    "__version__",
    # Entry point
    "inherit",
    # Core
    "MISSING",
    "MemberSource",
    "ObjectSource",
    "MappingSource",
    "PrototypeSource",
    "ClassSource",
    "Resolution",
    "ParentKind",
    "classify_parents",
    "Composite",
    "MemberEquality",
    "compose_sources",
    "compose_objects",
    "resolve",
    "lookup",
    "is_composite",
    "parents_of",
    # Classes
    "CompositeType",
    "compose_types",
    "is_composite_type",
    "prototype_of",
    "static_of",
    # Config
    "CompositionSettings",
    "get_settings",
    "reset_settings",
    # Errors
    "MultiDelegateError",
    "HeterogeneousParentsError",
    "EmptyParentsError",
    "AmbiguousMemberError",
    "UnsupportedOperationError",
]
