import asyncio

import pytest

from sharktank_tracker import refresh as refresh_module
from sharktank_tracker.models import CompanyUpdate
from sharktank_tracker.refresh import RefreshResult, batched, refresh_companies, significant_updates
from sharktank_tracker.sources import MockCompanySource


def make_update(name, status="Active", valuation=None):
    return CompanyUpdate(id=name.lower(), name=name, current_status=status, current_valuation=valuation,
                         current_update=f"{name} update", last_updated="2026-10-19")


class RecordingSource:
    def __init__(self, fail=(), missing=()):
        self.fail = set(fail)
        self.missing = set(missing)
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls = []

    async def fetch(self, name, mode="full"):
        self.calls.append((name, mode))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.01)
            if name in self.fail:
                raise RuntimeError("source timed out")
            if name in self.missing:
                return None
            return make_update(name)
        finally:
            self.in_flight -= 1


def test_batched():
    assert [list(b) for b in batched(list("abcdefg"), 3)] == [["a", "b", "c"], ["d", "e", "f"], ["g"]]


@pytest.mark.asyncio
async def test_batches_run_concurrently_up_to_batch_size():
    source = RecordingSource()
    names = [f"Company {i}" for i in range(12)]
    result = await refresh_companies(names, source, mode="quick", batch_size=5, batch_delay=0)
    assert source.max_in_flight == 5
    assert [n for n, _ in source.calls] == names
    assert all(mode == "quick" for _, mode in source.calls)
    assert result.count == 12
    assert [u.name for u in result.data] == names


@pytest.mark.asyncio
async def test_failures_are_reported_and_misses_dropped():
    source = RecordingSource(fail={"Bad Co"}, missing={"Ghost Co"})
    result = await refresh_companies(["Good Co", "Bad Co", "Ghost Co"], source, batch_delay=0)
    assert result.errors == ["Bad Co: source timed out"]
    assert [u.name for u in result.data] == ["Good Co"]
    assert result.count == len(result.data)
    returned = {u.name for u in result.data}
    for err in result.errors:
        assert err.split(":")[0] not in returned


@pytest.mark.asyncio
async def test_blank_name_lands_in_errors():
    result = await refresh_companies(["Ring", ""], MockCompanySource(delay_ms=(0, 0)), mode="quick", batch_delay=0)
    assert [u.name for u in result.data] == ["Ring"]
    assert result.errors == [": empty company name"]


@pytest.mark.asyncio
async def test_sleeps_between_batches_only(monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    class InstantSource:
        async def fetch(self, name, mode="full"):
            return make_update(name)

    monkeypatch.setattr(refresh_module.asyncio, "sleep", fake_sleep)
    await refresh_companies([str(i) for i in range(11)], InstantSource(), batch_size=5, batch_delay=1.5)
    assert sleeps == [1.5, 1.5]


@pytest.mark.asyncio
async def test_envelope_shape_with_mock_source():
    result = await refresh_companies(["Ring", "Acme Widgets"], MockCompanySource(delay_ms=(0, 0)),
                                     mode="quick", batch_delay=0)
    env = result.envelope()
    assert env["success"] is True
    assert env["count"] == len(env["data"]) == 2
    assert env["errors"] == []
    assert env["mode"] == "quick"
    assert "Crunchbase" in env["sources"]
    ring = env["data"][0]
    assert ring["currentStatus"] == "Acquired"
    assert ring["currentValuation"] == 1200000000
    assert env["scrapedAt"]


@pytest.mark.asyncio
async def test_empty_name_list():
    result = await refresh_companies([], RecordingSource(), batch_delay=0)
    assert isinstance(result, RefreshResult)
    assert result.count == 0 and result.errors == []


def test_significant_updates():
    updates = [
        make_update("Quiet", "Active", 5_000_000),
        make_update("Big", "Active", 300_000_000),
        make_update("Sold", "Acquired"),
        make_update("Gone", "Closed"),
    ]
    assert [u.name for u in significant_updates(updates)] == ["Big", "Sold", "Gone"]
