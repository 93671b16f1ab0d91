"""Tests for GetCurrentCountUseCase."""

import logging

import pytest

from counter_service.adapters.cache.view_cache import InMemoryCounterViewCache
from counter_service.application.ports.counter_repo import CounterRepository
from counter_service.application.ports.request_context import RequestContext
from counter_service.application.use_cases.get_current_count import GetCurrentCountUseCase
from counter_service.domain.entities.counter import Counter


class ReadOnlyCounterRepo(CounterRepository):
    def __init__(self, counters: list[Counter]):
        self._counters = {c.id: c for c in counters}
        self.reads = 0

    async def get_by_id(self, counter_id, lock=False):
        self.reads += 1
        return self._counters.get(counter_id)

    async def create(self, counter_id, count):
        raise AssertionError("read path must not write")

    async def update(self, counter_id, count):
        raise AssertionError("read path must not write")

    async def commit(self):
        pass

    async def rollback(self):
        pass


class HeaderContext(RequestContext):
    def __init__(self, value):
        self._value = value

    async def get_header(self, name):
        return self._value


@pytest.mark.asyncio
async def test_missing_counter_reads_as_zero():
    uc = GetCurrentCountUseCase(ReadOnlyCounterRepo([]))
    result = await uc.execute()
    assert (result.counter_id, result.count, result.cached) == (0, 0, False)


@pytest.mark.asyncio
async def test_reads_counter_for_e2e_id():
    repo = ReadOnlyCounterRepo([Counter(id=0, count=1), Counter(id=9, count=12)])
    result = await GetCurrentCountUseCase(repo).execute(HeaderContext("9"))
    assert (result.counter_id, result.count) == (9, 12)


@pytest.mark.asyncio
async def test_second_read_served_from_cache():
    repo = ReadOnlyCounterRepo([Counter(id=0, count=4)])
    uc = GetCurrentCountUseCase(repo, InMemoryCounterViewCache(ttl_seconds=60))
    first = await uc.execute()
    second = await uc.execute()
    assert first.count == second.count == 4
    assert second.cached is True
    assert repo.reads == 1


class RaisingLogger(logging.Logger):
    def __init__(self):
        super().__init__("raising-logger")

    def log(self, level, msg, *args, **kwargs):
        raise RuntimeError("Logging service unavailable")


@pytest.mark.asyncio
async def test_logging_failure_does_not_fail_read(capsys):
    repo = ReadOnlyCounterRepo([Counter(id=0, count=3)])
    result = await GetCurrentCountUseCase(repo, log=RaisingLogger()).execute()
    assert result.count == 3
    assert "Logging service unavailable" in capsys.readouterr().err
