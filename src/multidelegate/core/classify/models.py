"""Classification verdicts for parent lists."""

from __future__ import annotations

from enum import Enum, auto


class ParentKind(Enum):
    """Which composer a homogeneous parent list is routed to."""

    OBJECT = auto()  # Plain objects and mappings -> one instance-level composite
    CLASS = auto()  # Classes -> placeholder class with instance and static layers
