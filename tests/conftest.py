"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from node_ps import process_wrapper

_NODE_PS_ENV = (
    "NODE_PS_GRACEFUL_TIMEOUT_SECONDS",
    "NODE_PS_FORCE_TIMEOUT_SECONDS",
    "MANAGED_BY_MONITOR",
)


@pytest.fixture(autouse=True)
def clean_node_ps_env(monkeypatch):
    for name in _NODE_PS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_wrapper(monkeypatch):
    monkeypatch.setattr(process_wrapper, "_default_wrapper", None)
