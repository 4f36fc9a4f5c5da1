"""Shared fixtures: a fixed home directory of /home/test."""

import os

import pytest

from resolve_path import Resolver, ResolverConfig

HOME = "/home/test"


def pytest_collection_modifyitems(config, items):
    if os.name != "nt":
        return
    skip = pytest.mark.skip(reason="written with POSIX path literals")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def resolver():
    return Resolver(ResolverConfig.from_home(HOME))


@pytest.fixture
def home_env(monkeypatch):
    """Point the live home lookup used by the module-level API at /home/test."""
    monkeypatch.setenv("HOME", HOME)
    return HOME
