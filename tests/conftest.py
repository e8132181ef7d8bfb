"""Configuration file for pytest containing shared fixtures.

This module provides fixtures that can be used across multiple test files:
- clean_env: removes TOPOLOGY_SCHEMA_* variables so host settings do not leak in
- project_dir: an empty working directory with no configuration files
"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove topology-schema environment variables for every test."""
    for name in list(os.environ):
        if name.startswith("TOPOLOGY_SCHEMA_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Run the test from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
