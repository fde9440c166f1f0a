"""End-to-end journeys through the inherit() entry point."""

from types import SimpleNamespace

import pytest

from multidelegate import (
    AmbiguousMemberError,
    Composite,
    HeterogeneousParentsError,
    inherit,
    is_composite_type,
)


def test_object_journey():
    """Compose plain objects, patch a parent, hit a conflict."""
    base1 = {"foo": "foo"}
    base2 = SimpleNamespace(bar="bar")
    base3 = SimpleNamespace(baz="baz")

    delegates = inherit(base1, base2, base3)

    assert isinstance(delegates, Composite)
    assert (delegates.foo, delegates.bar, delegates.baz) == ("foo", "bar", "baz")

    base3.foo = "other foo"
    with pytest.raises(AmbiguousMemberError):
        delegates.foo  # noqa: B018

    del base3.foo
    assert delegates.foo == "foo"


def test_class_journey():
    """Derive from several classes, call instance and static members, use super()."""

    class Base1:
        def foo(self):
            return "foo"

        @staticmethod
        def describe():
            return "base1"

    class Base2:
        def bar(self):
            return "bar"

        @classmethod
        def named(cls):
            return cls.__name__

    class Base3:
        def baz(self):
            return "baz"

    base = inherit(Base1, Base2, Base3)
    assert is_composite_type(base)

    class DelegatesToMultiple(base):
        def foo(self):
            return super().foo().upper()

    item = DelegatesToMultiple()

    assert (item.foo(), item.bar(), item.baz()) == ("FOO", "bar", "baz")
    assert DelegatesToMultiple.describe() == "base1"
    assert DelegatesToMultiple.named() == "DelegatesToMultiple"


def test_heterogeneous_parents_rejected_before_reads():
    class Reader:
        reads = 0

        @property
        def value(self):
            Reader.reads += 1
            return 1

    with pytest.raises(HeterogeneousParentsError):
        inherit(Reader(), Reader)

    assert Reader.reads == 0


def test_composites_share_parents_independently():
    shared = SimpleNamespace(k="shared")

    first = inherit(shared, {"a": 1})
    second = inherit({"b": 2}, shared)

    shared.k = "patched"

    assert first.k == second.k == "patched"
    assert (first.a, second.b) == (1, 2)
