import asyncio
import os

import pytest

from moodmix import persistence
from moodmix.persistence import JsonStore


@pytest.fixture
def json_store(tmp_path):
    return JsonStore(str(tmp_path / "nested" / "data.json"))


def _put(store, data):
    return asyncio.run(store.update(lambda _: data))


def test_load_missing_returns_default(json_store):
    assert asyncio.run(json_store.load()) == {}
    assert asyncio.run(json_store.load(default=[])) == []


def test_update_and_load(json_store):
    _put(json_store, {"a": 1, "title": "Gymnopédie"})
    assert asyncio.run(json_store.load()) == {"a": 1, "title": "Gymnopédie"}
    assert os.path.exists(json_store.path)


def test_no_temp_files_left(json_store):
    _put(json_store, {"a": 1})
    leftovers = [f for f in os.listdir(os.path.dirname(json_store.path)) if f.endswith(".tmp")]
    assert leftovers == []


def test_corrupt_file_returns_default(json_store, caplog):
    os.makedirs(os.path.dirname(json_store.path))
    with open(json_store.path, "w") as f:
        f.write("{not json")
    assert asyncio.run(json_store.load()) == {}
    assert "Corrupt JSON" in caplog.text


def test_update(json_store):
    _put(json_store, {"a": 1})
    result = asyncio.run(json_store.update(lambda d: {**d, "b": 2}))
    assert result == {"a": 1, "b": 2}
    assert asyncio.run(json_store.load()) == {"a": 1, "b": 2}


def test_concurrent_updates_are_serialized(json_store):
    async def run():
        await asyncio.gather(*(
            json_store.update(lambda d, i=i: {**d, str(i): i}) for i in range(20)
        ))
        return await json_store.load()

    assert len(asyncio.run(run())) == 20


def test_empty_result_removes_file(json_store):
    _put(json_store, {"a": 1})
    assert asyncio.run(json_store.update(lambda d: {}, remove_empty=True)) == {}
    assert not os.path.exists(json_store.path)
    # Nothing to remove the second time around
    asyncio.run(json_store.update(lambda d: {}, remove_empty=True))
    assert asyncio.run(json_store.load()) == {}


def test_empty_result_is_written_by_default(json_store):
    _put(json_store, {"a": 1})
    asyncio.run(json_store.update(lambda d: {}))
    assert os.path.exists(json_store.path)


def test_replace_retries_permission_error(json_store, monkeypatch):
    real_replace = os.replace
    calls = []

    def flaky(src, dst):
        calls.append(dst)
        if len(calls) == 1:
            raise PermissionError("file in use")
        real_replace(src, dst)

    monkeypatch.setattr(persistence.os, "replace", flaky)
    _put(json_store, {"a": 1})
    assert len(calls) == 2
    assert asyncio.run(json_store.load()) == {"a": 1}


def test_replace_retry_sleeps_without_blocking_the_loop(json_store, monkeypatch):
    real_replace = os.replace
    calls = []

    def flaky(src, dst):
        calls.append(dst)
        if len(calls) == 1:
            raise PermissionError("file in use")
        real_replace(src, dst)

    monkeypatch.setattr(persistence.os, "replace", flaky)
    ticks = []

    async def ticker():
        for _ in range(20):
            ticks.append(len(calls))
            await asyncio.sleep(0.01)

    async def run():
        await asyncio.gather(json_store.update(lambda _: {"a": 1}), ticker())

    asyncio.run(run())
    # The ticker kept running while the write waited between attempts
    assert 1 in ticks
