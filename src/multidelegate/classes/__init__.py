"""Class composition: placeholder classes usable as a single derivation base."""

from multidelegate.classes.core import (
    compose_types,
    install_forwarders,
    is_composite_type,
    prototype_of,
    static_of,
)
from multidelegate.classes.meta import CompositeType, MemberForwarder, instance_hooks
from multidelegate.classes.operations import (
    NEVER_FORWARDED,
    bind_member,
    is_data_descriptor,
    is_forwardable,
    is_layout_descriptor,
)

__all__ = [
    # Operations
    "NEVER_FORWARDED",
    "bind_member",
    "is_data_descriptor",
    "is_layout_descriptor",
    "is_forwardable",
    # Meta
    "CompositeType",
    "MemberForwarder",
    "instance_hooks",
    # Core
    "compose_types",
    "install_forwarders",
    "is_composite_type",
    "prototype_of",
    "static_of",
]
