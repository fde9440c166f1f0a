"""Tests for parent list classification."""

from types import SimpleNamespace

import pytest

from multidelegate.core import (
    EmptyParentsError,
    HeterogeneousParentsError,
    MultiDelegateError,
    ParentKind,
    classify_parents,
    is_class_parent,
)


class A:
    pass


class B:
    pass


def test_all_classes_classify_as_class():
    assert classify_parents([A, B]) is ParentKind.CLASS


def test_plain_objects_and_mappings_classify_as_object():
    assert classify_parents([A(), {"k": 1}, SimpleNamespace(), 42]) is ParentKind.OBJECT


def test_functions_are_plain_objects():
    """Only real classes are type-like; a callable is not enough."""

    def factory():
        return None

    assert not is_class_parent(factory)
    assert classify_parents([factory]) is ParentKind.OBJECT


def test_mixed_parents_rejected():
    """CRITICAL: mixing kinds fails before any composition work.

    Why: half the parents would be read with the wrong protocol.
    """
    plain = A()

    with pytest.raises(HeterogeneousParentsError, match="Either every parent") as exc_info:
        classify_parents([plain, B])

    assert exc_info.value.parents == (plain, B)
    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, MultiDelegateError)


def test_zero_parents_allowed_by_default():
    assert classify_parents([]) is ParentKind.OBJECT


def test_zero_parents_rejected_when_disabled():
    with pytest.raises(EmptyParentsError):
        classify_parents([], allow_empty=False)


def test_classification_has_no_side_effects():
    parents = [A, B]

    classify_parents(parents)

    assert parents == [A, B]
