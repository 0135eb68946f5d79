"""Tests for the readers-writer lock."""

import threading

import pytest

from user_store_api.app.core.locking import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(3, timeout=2)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                # All three readers must be inside at the same time.
                barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert errors == []


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    thread = threading.Thread(target=reader)
    thread.start()
    assert not entered.wait(0.1)

    lock.release_write()
    assert entered.wait(2)
    thread.join(timeout=2)


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def writer():
        with lock.write_locked():
            entered.set()

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()
    assert not entered.wait(0.1)

    lock.release_read()
    assert entered.wait(2)
    thread.join(timeout=2)


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []
    writer_done = threading.Event()

    def writer():
        with lock.write_locked():
            order.append("writer")
        writer_done.set()

    def late_reader():
        with lock.read_locked():
            order.append("reader")

    lock.acquire_read()
    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    # Give the writer time to queue up behind the first reader.
    threading.Event().wait(0.1)
    reader_thread = threading.Thread(target=late_reader)
    reader_thread.start()
    threading.Event().wait(0.1)
    assert order == []

    lock.release_read()
    assert writer_done.wait(2)
    writer_thread.join(timeout=2)
    reader_thread.join(timeout=2)
    assert order == ["writer", "reader"]


def test_release_without_acquire_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_is_released_when_block_raises():
    lock = ReadWriteLock()
    with pytest.raises(KeyError):
        with lock.write_locked():
            raise KeyError("boom")

    # A second exclusive acquisition would deadlock if the first leaked.
    with lock.write_locked():
        pass
