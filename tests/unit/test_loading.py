"""Unit tests for the loading guard."""

import pytest

from core.services.loading import LoadingGuard


def test_guard_counts_nested_acquisitions():
    guard = LoadingGuard()
    assert not guard.is_busy

    with guard.track():
        assert guard.count == 1
        with guard.track():
            assert guard.count == 2
        assert guard.count == 1
        assert guard.is_busy

    assert guard.count == 0
    assert not guard.is_busy


def test_guard_releases_when_block_raises():
    guard = LoadingGuard()

    with pytest.raises(RuntimeError):
        with guard.track():
            raise RuntimeError("boom")

    assert guard.count == 0
