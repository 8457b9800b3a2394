from __future__ import annotations

import threading
from typing import Any

from genepool.foundation.exceptions import EvaluationError


class GenerationBarrier:
    """
    Countdown latch re-armed once per generation.

    The driver calls ``reset(n)`` before dispatching ``n`` units and then
    ``wait()``; each worker calls ``arrive()`` once the evaluated unit is
    visible to the driver. Arrivals may happen before ``wait()`` is entered.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._expected = 0
        self._arrived = 0
        self._errors: list[tuple[BaseException, Any]] = []

    def reset(self, expected: int) -> None:
        if expected < 0:
            raise ValueError("expected arrivals must be non-negative.")
        with self._cond:
            self._expected = expected
            self._arrived = 0
            self._errors = []

    def arrive(self, error: BaseException | None = None, unit: Any = None) -> None:
        with self._cond:
            self._arrived += 1
            if error is not None:
                self._errors.append((error, unit))
            if self._arrived >= self._expected:
                self._cond.notify_all()

    @property
    def pending(self) -> int:
        with self._cond:
            return max(0, self._expected - self._arrived)

    def wait(self) -> None:
        """
        Block until every expected arrival happened, then re-arm to zero.

        Raises
        ------
        EvaluationError
            If any arrival of this generation reported an error; chained from
            the first one.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._arrived >= self._expected)
            errors = self._errors
            self._expected = 0
            self._arrived = 0
            self._errors = []
        if errors:
            error, unit = errors[0]
            raise EvaluationError(
                f"{len(errors)} fitness evaluation(s) failed in this generation: {error!r}",
                unit=unit,
            ) from error


__all__ = ["GenerationBarrier"]
