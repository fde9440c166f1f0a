"""Tests for member sources and sameness strategies."""

from types import SimpleNamespace

import pytest

from multidelegate.core import (
    MISSING,
    ClassSource,
    MappingSource,
    MemberEquality,
    MemberSource,
    ObjectSource,
    PrototypeSource,
    as_source,
    same_equality,
    same_identity,
)


class Base:
    def shared(self):
        return "shared"


class Child(Base):
    label = "child"

    def own(self):
        return "own"

    @property
    def computed(self):
        return 42

    @classmethod
    def build(cls):
        return cls()


def test_missing_is_falsy_singleton():
    assert not MISSING
    assert repr(MISSING) == "MISSING"


def test_object_source_reads_attributes():
    source = ObjectSource(SimpleNamespace(a=1))

    assert source.try_get("a") == 1
    assert source.try_get("b") is MISSING
    assert "a" in source.keys()


def test_mapping_source_reads_keys_not_attributes():
    source = MappingSource({"a": 1})

    assert source.try_get("a") == 1
    # dict methods are not members of a mapping parent
    assert source.try_get("keys") is MISSING
    assert list(source.keys()) == ["a"]


def test_prototype_source_returns_raw_members():
    source = PrototypeSource(Child)

    assert source.try_get("own") is Child.__dict__["own"]
    assert source.try_get("shared") is Base.__dict__["shared"]
    assert isinstance(source.try_get("computed"), property)
    assert isinstance(source.try_get("build"), classmethod)


def test_class_sources_skip_object():
    """Members every class inherits from object are not parent members."""
    assert PrototypeSource(Child).try_get("__repr__") is MISSING
    assert ClassSource(Child).try_get("__init__") is MISSING
    assert "__repr__" not in PrototypeSource(Child).keys()


def test_class_source_exposes_prototype():
    source = ClassSource(Child)

    assert isinstance(source.prototype, PrototypeSource)
    assert source.prototype.parent is Child
    assert source.try_get("label") == "child"


def test_prototype_source_sees_later_patches():
    class Patched:
        pass

    source = PrototypeSource(Patched)
    assert source.try_get("late") is MISSING

    Patched.late = "late"

    assert source.try_get("late") == "late"


@pytest.mark.parametrize(
    ("parent", "expected"),
    [
        (Child, ClassSource),
        ({"k": 1}, MappingSource),
        (SimpleNamespace(), ObjectSource),
        (Child(), ObjectSource),
    ],
)
def test_as_source_picks_adapter(parent, expected):
    source = as_source(parent)

    assert type(source) is expected
    assert source.parent is parent
    assert isinstance(source, MemberSource)


def test_same_identity():
    child = Child()
    other = Child()

    assert same_identity(Base.shared, Base.shared)
    assert same_identity(child.own, child.own)
    assert not same_identity(child.own, other.own)
    assert not same_identity([1], [1])


def test_same_identity_compares_scalars_by_value():
    assert same_identity("".join(["re", "d"]), "red")
    assert same_identity(int("100000"), 100000)
    assert same_identity(b"".join([b"a", b"b"]), b"ab")
    assert not same_identity(True, 1)
    assert not same_identity(1, 1.0)
    assert not same_identity(float("nan"), float("nan"))


def test_same_equality():
    assert same_equality([1], [1])
    assert not same_equality([1], [2])


def test_member_equality_strategies():
    assert MemberEquality.IDENTITY.get_strategy() is same_identity
    assert MemberEquality.EQUALITY.get_strategy() is same_equality
    assert MemberEquality("equality") is MemberEquality.EQUALITY
