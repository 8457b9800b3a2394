from __future__ import annotations

import logging
import queue
import threading
from typing import Optional, Protocol

from genepool.engine.barrier import GenerationBarrier
from genepool.engine.memo import MemoizedUnit
from genepool.foundation.exceptions import InvalidFactorError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class EvaluationBackend(Protocol):
    """Protocol for fitness evaluation backends."""

    def evaluate(self, units: list[MemoizedUnit]) -> list[MemoizedUnit]: ...

    def close(self) -> None:  # pragma: no cover - optional for threaded backends
        """Clean up any resources (worker threads)."""
        return None


class SerialEvaluator:
    """Synchronous in-thread evaluation."""

    def evaluate(self, units: list[MemoizedUnit]) -> list[MemoizedUnit]:
        processed: list[MemoizedUnit] = []
        while units:
            unit = units.pop()
            unit.fitness()
            processed.append(unit)
        return processed

    def close(self) -> None:
        return None

    def __enter__(self) -> "SerialEvaluator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


_CLOSED = object()


class ThreadedEvaluator:
    """
    Parallel evaluation on a fixed pool of worker threads.

    Notes:
        - Workers are started once and reused for every generation until
          ``close()``.
        - Units are handed over through a queue of capacity one, so at most
          one unit waits for a free worker while the driver blocks on the next.
        - A fitness call that never returns stalls the run; there is no timeout.
    """

    def __init__(self, n_workers: int) -> None:
        if isinstance(n_workers, bool) or int(n_workers) != n_workers or n_workers < 1:
            raise InvalidFactorError("n_workers", n_workers, "integers >= 1")
        self.n_workers = int(n_workers)
        self._queue: queue.Queue = queue.Queue(maxsize=1)
        self._processed: list[MemoizedUnit] = []
        self._processed_lock = threading.Lock()
        self._barrier = GenerationBarrier()
        self._threads: list[threading.Thread] = []

    def start(self) -> "ThreadedEvaluator":
        if self._threads:
            return self
        for i in range(self.n_workers):
            thread = threading.Thread(target=self._work, name=f"genepool-worker-{i}", daemon=True)
            thread.start()
            self._threads.append(thread)
        _logger().debug("Started %d evaluation workers", self.n_workers)
        return self

    def _work(self) -> None:
        while True:
            unit = self._queue.get()
            if unit is _CLOSED:
                return
            try:
                unit.fitness()
            except BaseException as exc:
                # SystemExit and friends too: a dead worker would never arrive.
                _logger().warning("Fitness evaluation failed on %s: %r", threading.current_thread().name, exc)
                self._barrier.arrive(error=exc, unit=unit.unit)
                continue
            with self._processed_lock:
                self._processed.append(unit)
            # Only counted once the push above is visible to the driver.
            self._barrier.arrive()

    def evaluate(self, units: list[MemoizedUnit]) -> list[MemoizedUnit]:
        if not self._threads:
            self.start()
        self._barrier.reset(len(units))
        while units:
            self._queue.put(units.pop())
        try:
            self._barrier.wait()
        finally:
            with self._processed_lock:
                processed, self._processed = self._processed, []
        return processed

    def close(self) -> None:
        for _ in self._threads:
            self._queue.put(_CLOSED)
        for thread in self._threads:
            thread.join()
        if self._threads:
            _logger().debug("Stopped %d evaluation workers", len(self._threads))
        self._threads = []

    def __enter__(self) -> "ThreadedEvaluator":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.close()


def resolve_evaluator(n_workers: Optional[int] = None) -> EvaluationBackend:
    if n_workers is None:
        return SerialEvaluator()
    return ThreadedEvaluator(n_workers)


__all__ = ["EvaluationBackend", "SerialEvaluator", "ThreadedEvaluator", "resolve_evaluator"]
