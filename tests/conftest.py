"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from multidelegate import reset_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Default settings, unaffected by the environment, reloaded after the test."""
    for name in (
        "MULTIDELEGATE_ALLOW_EMPTY_PARENTS",
        "MULTIDELEGATE_MEMBER_EQUALITY",
        "MULTIDELEGATE_FORWARD_MEMBERS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


class FixtureX:
    def x(self):
        return "x"

    @staticmethod
    def static_x():
        return "static x"


class FixtureY:
    def y(self):
        return "y"

    @staticmethod
    def static_y():
        return "static y"


class FixtureZ:
    def z(self):
        return "z"

    @staticmethod
    def static_z():
        return "static z"


@pytest.fixture
def xyz():
    return FixtureX, FixtureY, FixtureZ
