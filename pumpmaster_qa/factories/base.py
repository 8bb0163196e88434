"""
Sequence and naming utilities shared by the factories.

A RunSequence is injected into every factory that needs unique values.
Its run tag combines the pytest-xdist worker id with a short random
suffix, so records created by parallel workers or by consecutive runs
against the same backend never share a name.
"""
import os
import threading
from uuid import uuid4

from faker import Faker

fake = Faker()


def generate_run_tag(worker_id: str | None = None) -> str:
    """Generate a short tag unique to this worker and run, e.g. 'gw1-3fa85f64'."""
    worker = worker_id or os.getenv("PYTEST_XDIST_WORKER", "main")
    return f"{worker}-{uuid4().hex[:8]}"


class RunSequence:
    """Thread-safe monotonically increasing counter scoped to one run tag."""

    def __init__(self, run_tag: str | None = None, start: int = 1):
        self.run_tag = run_tag or generate_run_tag()
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reset(self) -> None:
        with self._lock:
            self._next = self._start

    def unique(self, prefix: str, n: int | None = None) -> str:
        """Name unique to this run, e.g. 'Test Pump main-3fa85f64-7'."""
        if n is None:
            n = self.next()
        return f"{prefix} {self.run_tag}-{n}"
