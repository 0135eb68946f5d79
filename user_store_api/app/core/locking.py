"""
Readers‑writer lock for in‑memory state shared between request threads.

Any number of readers may hold the lock at the same time; a writer
holds it alone.  Once a writer is waiting, new readers queue behind it
so a steady stream of reads cannot starve mutations.  The lock is not
reentrant: a thread holding it in either mode must not acquire it again.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """A writer‑preferring readers‑writer lock built on ``threading.Condition``."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                # Readers may be parked behind this writer.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
