"""Unit tests for the in-memory branch directory and its TTL cache"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from domain.vendors import Branch
from infrastructure.branches import (
    CachedBranchDirectory,
    InMemoryBranchDirectory,
    get_branch_directory,
)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def _branch(branch_id, active=True):
    return Branch(
        id=branch_id,
        name=f"Filial {branch_id}",
        cnpj="11222333000181",
        city="Curitiba",
        state="PR",
        kind="Filial",
        active=active,
        registered_at=datetime(2022, 1, 1, tzinfo=timezone.utc),
    )


class TestInMemoryBranchDirectory:
    """Test the reference branch list"""

    def test_reference_branches(self, branch_directory):
        assert branch_directory.find_by_id("1").city == "São Paulo"
        assert [b.id for b in branch_directory.list_active()] == ["1", "2", "3"]

    def test_is_active(self, branch_directory):
        assert branch_directory.is_active("1") is True
        assert branch_directory.is_active("4") is False   # inactive
        assert branch_directory.is_active("99") is False  # unknown

    def test_custom_branches(self):
        directory = InMemoryBranchDirectory([_branch("10"), _branch("11", active=False)])

        assert directory.find_by_id("1") is None
        assert [b.id for b in directory.list_active()] == ["10"]


class TestCachedBranchDirectory:
    """Test TTL caching in front of another directory"""

    @pytest.fixture
    def inner(self):
        inner = MagicMock(spec=InMemoryBranchDirectory)
        inner.find_by_id.side_effect = lambda branch_id: _branch(branch_id) if branch_id != "99" else None
        inner.is_active.side_effect = lambda branch_id: branch_id != "99"
        inner.list_active.return_value = [_branch("1")]
        return inner

    def test_repeated_lookup_served_from_cache(self, inner):
        directory = CachedBranchDirectory(inner, ttl_seconds=60, clock=FakeClock())

        first = directory.find_by_id("1")
        second = directory.find_by_id("1")

        assert first == second
        inner.find_by_id.assert_called_once_with("1")

    def test_unknown_branch_cached(self, inner):
        directory = CachedBranchDirectory(inner, ttl_seconds=60, clock=FakeClock())

        assert directory.find_by_id("99") is None
        assert directory.find_by_id("99") is None
        assert inner.find_by_id.call_count == 1

    def test_entries_expire(self, inner):
        clock = FakeClock()
        directory = CachedBranchDirectory(inner, ttl_seconds=60, clock=clock)

        directory.is_active("1")
        clock.advance(59)
        directory.is_active("1")
        assert inner.is_active.call_count == 1

        clock.advance(1)
        directory.is_active("1")
        assert inner.is_active.call_count == 2

    def test_oldest_entry_evicted_when_full(self, inner):
        directory = CachedBranchDirectory(inner, ttl_seconds=60, max_entries=2, clock=FakeClock())

        directory.find_by_id("1")
        directory.find_by_id("2")
        directory.find_by_id("3")  # evicts "1"
        directory.find_by_id("3")
        directory.find_by_id("1")

        assert [c.args[0] for c in inner.find_by_id.call_args_list] == ["1", "2", "3", "1"]

    def test_list_active_returns_copy(self, inner):
        directory = CachedBranchDirectory(inner, ttl_seconds=60, clock=FakeClock())

        directory.list_active().clear()

        assert len(directory.list_active()) == 1
        inner.list_active.assert_called_once()

    def test_invalidate(self, inner):
        directory = CachedBranchDirectory(inner, ttl_seconds=60, clock=FakeClock())

        directory.find_by_id("1")
        directory.invalidate()
        directory.find_by_id("1")

        assert inner.find_by_id.call_count == 2

    @pytest.mark.parametrize("kwargs", [{"ttl_seconds": 0}, {"max_entries": 0}])
    def test_invalid_bounds(self, inner, kwargs):
        with pytest.raises(ValueError):
            CachedBranchDirectory(inner, **kwargs)

    def test_process_wide_directory_uses_settings(self, monkeypatch):
        monkeypatch.setenv("BRANCH_CACHE_TTL_SECONDS", "12.5")
        monkeypatch.setenv("BRANCH_CACHE_MAX_ENTRIES", "8")

        directory = get_branch_directory()

        assert directory is get_branch_directory()
        assert directory.ttl_seconds == 12.5
        assert directory.max_entries == 8
        assert directory.is_active("4") is False
