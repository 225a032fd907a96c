"""
Readers-writer lock guarding currency registries.

Any number of threads may hold the read side at the same time, the write side
is exclusive. Waiting writers block new readers, so a steady stream of lookups
can't starve a registration.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


class RWLock:
    """
    Readers-writer lock with writer preference.

    The read side is reentrant per thread. Upgrading a held read lock to the
    write lock, taking the read lock while holding the write lock and taking
    the write lock twice all raise RuntimeError instead of deadlocking.

    Example:
        lock = RWLock()
        with lock.read():
            ...  # shared
        with lock.write():
            ...  # exclusive
    """

    __slots__ = ("_condition", "_active_readers", "_active_writer", "_waiting_writers", "_reader_threads")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers = 0
        self._active_writer: Optional[int] = None
        self._waiting_writers = 0
        # thread ID -> reentrant read count
        self._reader_threads: Dict[int, int] = {}

    @contextmanager
    def read(self) -> Iterator[None]:
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return
            if self._active_writer == thread_id:
                raise RuntimeError("Cannot acquire read lock while holding the write lock")

            while self._active_writer is not None or self._waiting_writers > 0:
                self._condition.wait()

            self._active_readers += 1
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id not in self._reader_threads:
                raise RuntimeError("Thread does not hold the read lock")

            self._reader_threads[thread_id] -= 1
            if self._reader_threads[thread_id] == 0:
                del self._reader_threads[thread_id]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self) -> None:
        thread_id = threading.get_ident()
        with self._condition:
            if thread_id in self._reader_threads:
                raise RuntimeError("Cannot upgrade a read lock to the write lock")
            if self._active_writer == thread_id:
                raise RuntimeError("Thread already holds the write lock")

            self._waiting_writers += 1
            try:
                while self._active_readers > 0 or self._active_writer is not None:
                    self._condition.wait()
                self._active_writer = thread_id
            finally:
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._active_writer != threading.get_ident():
                raise RuntimeError("Thread does not hold the write lock")
            self._active_writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        with self._condition:
            return self._active_writer is not None
