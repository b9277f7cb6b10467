"""Shared fixtures — pin settings so host env vars can't change sample values."""

from __future__ import annotations

import os

import pytest

for _key in [k for k in os.environ if k.startswith("HRCONF_")]:
    del os.environ[_key]
os.environ["HRCONF_LOG_LEVEL"] = "DEBUG"

import hrconf.settings as _settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached Settings singleton between tests."""
    _settings._settings = None
    yield
    _settings._settings = None
