"""Readers-writer lock guarding the phrase bank.

Translations are read far more often than phrases are loaded, so lookups
share the lock while extend/unset/clear/replace take it exclusively:
- Any number of concurrent readers (translate, snapshot, lookups)
- One exclusive writer (bank mutations)
- Writer preference: once a writer waits, new readers queue behind it
- Reentrant reads for the same thread
- Optional acquisition timeout (raises TimeoutError)

A thread holding the read lock cannot take the write lock, and a writer
cannot take either lock again; both raise RuntimeError instead of
deadlocking.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass  # shared with other readers
        >>> with lock.write(timeout=1.0):
        ...     pass  # exclusive
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        """Initialize an unlocked lock."""
        self._condition = threading.Condition(threading.Lock())
        # thread id -> reentrant read depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers: int = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock in shared mode for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 never waits.

        Raises:
            RuntimeError: If the calling thread holds the write lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock exclusively for the duration of the block.

        Args:
            timeout: Seconds to wait; None waits indefinitely, 0.0 never waits.

        Raises:
            RuntimeError: If the calling thread already holds either lock.
            TimeoutError: If the lock is not acquired in time.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    def _wait_until(
        self, ready: Callable[[], bool], timeout: float | None, mode: str
    ) -> None:
        """Wait on the condition until ready() is true. Caller holds the condition."""
        deadline = time.monotonic() + timeout if timeout is not None else None
        while not ready():
            if deadline is None:
                self._condition.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {mode} lock"
                raise TimeoutError(msg)
            self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()

        with self._condition:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)

            self._wait_until(
                lambda: self._writer is None and self._waiting_writers == 0,
                timeout,
                "read",
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()

        with self._condition:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        _check_timeout(timeout)
        me = threading.get_ident()

        with self._condition:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                self._wait_until(
                    lambda: not self._readers and self._writer is None,
                    timeout,
                    "write",
                )
                self._writer = me
            finally:
                self._waiting_writers -= 1
                # Readers blocked on writer preference must re-check, including
                # after this writer timed out.
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads holding the read lock."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._condition:
            return self._writer is not None

    @property
    def writers_waiting(self) -> int:
        """Number of threads blocked waiting for the write lock."""
        with self._condition:
            return self._waiting_writers


def _check_timeout(timeout: float | None) -> None:
    if timeout is not None and timeout < 0:
        msg = f"Timeout must be non-negative, got {timeout}"
        raise ValueError(msg)
