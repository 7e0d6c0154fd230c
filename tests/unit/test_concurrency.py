from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import pytest

from simrng.concurrency import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share_the_lock(self) -> None:
        lock = ReadWriteLock()
        both_inside = threading.Barrier(2, timeout=5)

        def reader() -> None:
            with lock.read():
                both_inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)
        assert not both_inside.broken

    def test_writer_waits_for_readers(self) -> None:
        lock = ReadWriteLock()
        events: list[str] = []
        writer_started = threading.Event()

        def writer() -> None:
            writer_started.set()
            with lock.write():
                events.append("write")

        with lock.read():
            t = threading.Thread(target=writer)
            t.start()
            writer_started.wait(timeout=5)
            t.join(timeout=0.1)
            events.append("read-done")
        t.join(timeout=5)

        assert events == ["read-done", "write"]

    def test_release_without_acquire(self) -> None:
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_error(self) -> None:
        lock = ReadWriteLock()
        with pytest.raises(KeyError):
            with lock.write():
                raise KeyError("boom")
        with lock.write():
            pass
