from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from todo_registry_api.app.core.concurrency import ReadWriteLock
from todo_registry_api.app.services.registry import TodoRegistry


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=5)

    def reader() -> None:
        with lock.read_locked():
            # Both readers must be inside at the same time to pass.
            barrier.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert not barrier.broken


def test_writer_excludes_readers() -> None:
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader() -> None:
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()
    try:
        assert not entered.wait(0.2)
    finally:
        lock.release_write()
    assert entered.wait(5)
    thread.join(timeout=5)


def test_writer_waits_for_active_reader() -> None:
    lock = ReadWriteLock()
    written = threading.Event()

    def writer() -> None:
        with lock.write_locked():
            written.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()
    try:
        assert not written.wait(0.2)
    finally:
        lock.release_read()
    assert written.wait(5)
    thread.join(timeout=5)


def test_concurrent_adds_get_distinct_ids() -> None:
    registry = TodoRegistry()
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: registry.add(f"todo {i}"), range(500)))

    ids = [result.value for result in results]
    assert all(result.is_ok() for result in results)
    assert sorted(ids) == list(range(500))
    assert len(registry) == 500


def test_concurrent_reads_and_updates() -> None:
    registry = TodoRegistry()
    todo_id = registry.add("v0").value

    def work(i: int) -> None:
        if i % 2:
            registry.update(todo_id, f"v{i}")
        else:
            assert registry.read(todo_id).is_ok()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(200)))

    assert registry.read(todo_id).value.startswith("v")
    assert len(registry) == 1
