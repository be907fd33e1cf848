"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from core.config import AppSettings


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> AppSettings:
    """Settings isolated from the developer's env vars and `.env`."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("MERCHANT_CLIENT_"):
            monkeypatch.delenv(key)
    return AppSettings(api_base_url="http://backend.test/api/v1", page_size=2)
