"""Root conftest — shared fixtures and markers."""

from __future__ import annotations

import os

import pytest
import requests


def pytest_configure(config):
    config.addinivalue_line("markers", "opa: requires a running OPA server")


def pytest_collection_modifyitems(config, items):
    if os.environ.get("SQLGATE_TEST_OPA"):
        return

    skip_opa = pytest.mark.skip(reason="OPA not available (set SQLGATE_TEST_OPA=1)")
    for item in items:
        if "opa" in item.keywords:
            item.add_marker(skip_opa)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp path and clear SQLGATE_* overrides."""
    path = tmp_path / "sqlgate" / "config.toml"
    monkeypatch.setenv("SQLGATE_CONFIG", str(path))
    for var in ("SQLGATE_URI", "SQLGATE_TIMEOUT", "SQLGATE_DIALECT"):
        monkeypatch.delenv(var, raising=False)
    return path


def make_response(body: bytes | str, status: int = 200, reason: str = "OK") -> requests.Response:
    """Build a real requests.Response carrying ``body``."""
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    return resp


@pytest.fixture
def opa_response():
    return make_response
