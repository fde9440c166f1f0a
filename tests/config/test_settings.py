"""Tests for composition settings."""

import pytest
from pydantic import ValidationError

from multidelegate import (
    AmbiguousMemberError,
    CompositionSettings,
    EmptyParentsError,
    MemberEquality,
    get_settings,
    inherit,
)


def test_defaults(fresh_settings):
    settings = get_settings()

    assert settings.allow_empty_parents is True
    assert settings.member_equality is MemberEquality.IDENTITY
    assert settings.forward_members is True


def test_settings_loaded_once(fresh_settings):
    assert get_settings() is get_settings()


def test_environment_variables(fresh_settings, monkeypatch):
    monkeypatch.setenv("MULTIDELEGATE_ALLOW_EMPTY_PARENTS", "false")
    monkeypatch.setenv("MULTIDELEGATE_MEMBER_EQUALITY", "equality")
    monkeypatch.setenv("MULTIDELEGATE_FORWARD_MEMBERS", "false")

    settings = CompositionSettings()

    assert settings.allow_empty_parents is False
    assert settings.member_equality is MemberEquality.EQUALITY
    assert settings.forward_members is False


def test_environment_disables_member_forwarding(fresh_settings, monkeypatch):
    monkeypatch.setenv("MULTIDELEGATE_FORWARD_MEMBERS", "false")

    class Sized:
        def __len__(self):
            return 3

    class Other:
        pass

    class D(inherit(Sized, Other)):
        pass

    assert D().__len__() == 3
    with pytest.raises(TypeError):
        len(D())


def test_environment_controls_empty_composition(fresh_settings, monkeypatch):
    monkeypatch.setenv("MULTIDELEGATE_ALLOW_EMPTY_PARENTS", "false")

    with pytest.raises(EmptyParentsError):
        inherit()


def test_explicit_settings_override_environment(fresh_settings, monkeypatch):
    monkeypatch.setenv("MULTIDELEGATE_ALLOW_EMPTY_PARENTS", "false")

    composite = inherit(settings=CompositionSettings(allow_empty_parents=True))

    assert dir(composite) == []


def test_equality_mode_accepts_equal_values(fresh_settings):
    parents = ({"k": [1, 2]}, {"k": [1, 2]})

    with pytest.raises(AmbiguousMemberError):
        inherit(*parents).k  # noqa: B018

    composite = inherit(*parents, settings=CompositionSettings(member_equality="equality"))

    assert composite.k == [1, 2]


def test_invalid_equality_rejected(fresh_settings):
    with pytest.raises(ValidationError):
        CompositionSettings(member_equality="loose")


def test_settings_are_frozen(fresh_settings):
    settings = CompositionSettings()

    with pytest.raises(ValidationError):
        settings.allow_empty_parents = False
