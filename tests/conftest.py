"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from strview import StringView, WStringView
from strview.config import configure, reset_settings


@pytest.fixture
def override_settings():
    """Apply settings overrides for one test, reloading from the environment after."""
    yield configure
    reset_settings()


@pytest.fixture
def checked(override_settings):
    """Precondition checking enabled."""
    override_settings(check_preconditions=True)


@pytest.fixture
def hello():
    """View over b"hello world"."""
    return StringView(b"hello world")


@pytest.fixture
def whello():
    """View over the str "hello world"."""
    return WStringView("hello world")
