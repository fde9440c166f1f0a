"""Parent list classification."""

from multidelegate.core.classify.core import classify_parents, is_class_parent
from multidelegate.core.classify.models import ParentKind

__all__ = [
    "ParentKind",
    "classify_parents",
    "is_class_parent",
]
