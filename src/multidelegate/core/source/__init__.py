"""Parent sources: how a composite reads members from each parent."""

from multidelegate.core.source.adapters import (
    ClassSource,
    MappingSource,
    ObjectSource,
    PrototypeSource,
    as_source,
    lookup_in_mro,
    names_in_mro,
)
from multidelegate.core.source.models import (
    MISSING,
    PROTOTYPE_ATTR,
    STATIC_ATTR,
    MemberSource,
    Missing,
    Resolution,
)

__all__ = [
    # Models
    "MISSING",
    "Missing",
    "MemberSource",
    "Resolution",
    "PROTOTYPE_ATTR",
    "STATIC_ATTR",
    # Adapters
    "ObjectSource",
    "MappingSource",
    "PrototypeSource",
    "ClassSource",
    "as_source",
    "lookup_in_mro",
    "names_in_mro",
]
