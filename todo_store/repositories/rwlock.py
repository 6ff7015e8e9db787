"""Reader/writer lock guarding a whole datastore.

Many readers may hold the lock at once, or exactly one writer. A writer
that is waiting blocks new readers from entering so writes are not
starved under constant read traffic.

If an exception escapes a ``write()`` block the lock is poisoned and every
later acquisition raises ``StorePoisonedError``.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .errors import StorePoisonedError

logger = logging.getLogger(__name__)


class ReadWriteLock:
    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    def _check_poisoned(self) -> None:
        if self._poisoned:
            raise StorePoisonedError("store lock is poisoned by a failed writer")

    def acquire_read(self) -> None:
        with self._cond:
            self._check_poisoned()
            while self._writer or self._waiting_writers:
                self._cond.wait()
                self._check_poisoned()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._check_poisoned()
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
                    self._check_poisoned()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self, *, poison: bool = False) -> None:
        with self._cond:
            self._writer = False
            if poison:
                self._poisoned = True
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        self.acquire_write()
        try:
            yield
        except BaseException:
            logger.error("Writer failed while holding the store lock; poisoning it")
            self.release_write(poison=True)
            raise
        self.release_write()
