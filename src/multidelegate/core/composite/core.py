"""Composite objects that delegate attribute reads to several parents.

Usage:
    base1 = SimpleNamespace(foo="foo")
    base2 = {"bar": "bar"}

    both = compose_objects([base1, base2])
    both.foo  # "foo"
    both.bar  # "bar"

    base1.foo = "patched"
    both.foo  # "patched" - nothing is cached

Every read queries every parent exactly once, in order. If more than one
parent answers, the answers must denote the same member or the read fails
with AmbiguousMemberError. There is no tie-break.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, NoReturn

from multidelegate.core.classify import ParentKind, classify_parents
from multidelegate.core.composite.models import CompositeState, MemberEquality
from multidelegate.core.errors import AmbiguousMemberError, UnsupportedOperationError
from multidelegate.core.source.adapters import as_source
from multidelegate.core.source.models import MISSING, STATIC_ATTR, MemberSource, Resolution

if TYPE_CHECKING:
    from multidelegate.config.settings import CompositionSettings

logger = logging.getLogger(__name__)


class Composite:
    """Storage-less object resolving attribute reads against its parents.

    The composite owns no members. Its only state is the parent list, an
    optional virtual target and the sameness strategy, all fixed at
    construction. Writes and deletes raise UnsupportedOperationError.
    """

    __slots__ = ("__state",)

    def __init__(self, state: CompositeState) -> None:
        object.__setattr__(self, "_Composite__state", state)

    def __getattr__(self, name: str) -> Any:
        resolution = resolve(self, name)
        if resolution is MISSING:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return resolution.value

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise UnsupportedOperationError(
            f"Cannot set {name!r}: composites are read-only, assign on a parent instead"
        )

    def __delattr__(self, name: str) -> NoReturn:
        raise UnsupportedOperationError(
            f"Cannot delete {name!r}: composites are read-only, delete on a parent instead"
        )

    def __dir__(self) -> list[str]:
        return sorted(member_names(self))

    def __repr__(self) -> str:
        state = _state_of(self)
        parents = ", ".join(repr(source) for source in state.sources)
        return f"<Composite [{parents}]>"


def _state_of(composite: Composite) -> CompositeState:
    return object.__getattribute__(composite, "_Composite__state")


def is_composite(obj: Any) -> bool:
    """Check if an object is a composite built by this package."""
    return isinstance(obj, Composite)


def _target_namespace(target: Any) -> Mapping[str, Any] | None:
    if target is None:
        return None
    if isinstance(target, Mapping):
        return target
    try:
        return vars(target)
    except TypeError:
        # Targets without __dict__ own nothing
        return None


def resolve(composite: Composite, key: str, *, skip_target: bool = False) -> Resolution | Any:
    """Resolve one key against a composite, reporting where the value came from.

    Args:
        composite: Composite to read from.
        key: Member name.
        skip_target: If True, ignore the virtual target and consult parents only.

    Returns:
        Resolution on success, MISSING if nothing defines the key.

    Raises:
        AmbiguousMemberError: If parents define observably different values.
    """
    state = _state_of(composite)

    if not skip_target:
        namespace = _target_namespace(state.target)
        if namespace is not None and key in namespace:
            return Resolution(key, namespace[key], (state.target,), from_target=True)

    found: list[tuple[Any, Any]] = []
    for source in state.sources:
        # Exactly one access per parent: members may be side-effecting accessors
        value = source.try_get(key)
        if value is not MISSING:
            found.append((source.parent, value))

    if not found:
        return MISSING

    first = found[0][1]
    for _, value in found[1:]:
        if not state.same(first, value):
            logger.debug("Ambiguous member %r across %d parents", key, len(found))
            raise AmbiguousMemberError(key, found)

    return Resolution(key, first, tuple(parent for parent, _ in found))


def lookup(composite: Composite, key: str, *, skip_target: bool = False) -> Any:
    """Resolve a key and return just the value, or MISSING."""
    resolution = resolve(composite, key, skip_target=skip_target)
    if resolution is MISSING:
        return MISSING
    return resolution.value


def member_names(composite: Composite, *, skip_target: bool = False) -> set[str]:
    """Names resolvable through a composite at this moment.

    Args:
        composite: Composite to inspect.
        skip_target: If True, leave out the virtual target's own names.

    Returns:
        Union of the target's and every parent's names.
    """
    state = _state_of(composite)
    names: set[str] = set()
    if not skip_target:
        namespace = _target_namespace(state.target)
        if namespace is not None:
            names.update(key for key in namespace if isinstance(key, str))
    for source in state.sources:
        names.update(source.keys())
    return names


def sources_of(composite: Composite) -> tuple[MemberSource, ...]:
    """Return the member sources of a composite, in priority order."""
    return _state_of(composite).sources


def parents_of(composite: Any) -> tuple[Any, ...]:
    """Return the parents a composite (or composite class) delegates to.

    Args:
        composite: A Composite, or a placeholder class from compose_types.

    Returns:
        Parents in the order they were given.

    Raises:
        TypeError: If the argument is neither.
    """
    if isinstance(composite, type):
        layer = composite.__dict__.get(STATIC_ATTR)
        if is_composite(layer):
            return parents_of(layer)
    elif is_composite(composite):
        return tuple(source.parent for source in _state_of(composite).sources)
    raise TypeError(f"{composite!r} is not a composite")


def compose_sources(
    sources: Iterable[MemberSource],
    virtual_target: Any = None,
    *,
    equality: MemberEquality = MemberEquality.IDENTITY,
) -> Composite:
    """Build a composite over already-wrapped member sources.

    Args:
        sources: Member sources in priority order.
        virtual_target: Object (or mapping) whose own members answer first.
            None means an empty target.
        equality: How answers from several parents are compared.

    Returns:
        A new read-only composite.
    """
    state = CompositeState(
        sources=tuple(sources),
        target=virtual_target,
        same=equality.get_strategy(),
    )
    return Composite(state)


def compose_objects(
    parents: Sequence[Any],
    virtual_target: Any = None,
    *,
    settings: CompositionSettings | None = None,
) -> Composite:
    """Build a composite delegating to plain objects and mappings.

    Mappings resolve members by key; every other parent by attribute.

    Args:
        parents: Parents in priority order. Must not contain classes.
        virtual_target: Object (or mapping) whose own members answer first.
        settings: Overrides the process-wide settings.

    Returns:
        A new read-only composite.

    Raises:
        HeterogeneousParentsError: If classes and plain objects are mixed.
        TypeError: If every parent is a class.
        EmptyParentsError: If parents is empty and empty composition is disabled.
    """
    # Late import to avoid circular dependency
    from multidelegate.config.settings import get_settings

    if settings is None:
        settings = get_settings()
    kind = classify_parents(parents, allow_empty=settings.allow_empty_parents)
    if kind is not ParentKind.OBJECT:
        raise TypeError("compose_objects() takes plain objects, use compose_types() for classes")

    sources = [as_source(parent) for parent in parents]

    logger.debug("Composing %d object parents", len(sources))
    return compose_sources(sources, virtual_target, equality=settings.member_equality)
