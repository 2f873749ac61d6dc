# tests/test_errors.py
"""Tests for ghsync.core.errors."""

import pytest

from ghsync.core.errors import (
    AlreadySyncedError,
    DeletionError,
    FetchError,
    NotificationError,
    PersistenceError,
    SyncError,
)

pytestmark = pytest.mark.tier1


class TestSyncError:
    def test_default_codes(self):
        assert FetchError("x").code == "fetch_failed"
        assert AlreadySyncedError().code == "commit_synced"
        assert PersistenceError("x").code == "save_failed"
        assert NotificationError("x").code == "notify_failed"
        assert DeletionError("x").code == "delete_failed"
        assert SyncError("x").code == "sync_error"

    def test_explicit_code_wins(self):
        error = DeletionError("gone", code="path_not_found")
        assert error.code == "path_not_found"
        assert error.message == "gone"

    def test_single_cause_str_is_message(self):
        assert str(FetchError("no such commit")) == "no such commit"

    def test_add_keeps_order(self):
        error = SyncError("first", code="a")
        error.add("b", "second")

        assert error.errors == [("a", "first"), ("b", "second")]
        assert error.codes == ["a", "b"]
        assert error.messages == ["first", "second"]
        assert str(error) == "a: first; b: second"

    def test_merge_returns_self_with_all_causes(self):
        base = DeletionError("a.md failed")
        other = DeletionError("b.md failed")
        other.add("delete_failed", "b.md retry failed")

        merged = base.merge(other)

        assert merged is base
        assert len(base.errors) == 3
        assert base.message == "a.md failed"

    def test_errors_returns_copy(self):
        error = SyncError("x")
        error.errors.append(("y", "z"))
        assert len(error.errors) == 1


class TestBenign:
    def test_already_synced_is_benign(self):
        assert AlreadySyncedError().benign is True

    def test_failures_are_not_benign(self):
        assert FetchError("x").benign is False

    def test_benign_with_real_failure_is_not_benign(self):
        error = AlreadySyncedError()
        error.merge(DeletionError("a.md failed"))
        assert error.benign is False
