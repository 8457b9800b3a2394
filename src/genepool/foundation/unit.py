from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Unit(Protocol):
    """
    A discrete set of variables tested against a fitness function.

    Any object providing these two methods can be evolved; no base class is
    needed. Units must not change their fitness after creation, since the
    engine evaluates each unit at most once.
    """

    def fitness(self) -> float:
        """
        Relative fitness of this unit, conventionally in [0, 1] where 1 is a
        perfect solution. A value of exactly 1.0 stops a run early.
        """
        ...

    def breed_with(self, other):
        """
        Create a new unit merging traits of this unit and ``other``. The
        offspring should occasionally mutate in random dimensions.
        """
        ...


__all__ = ["Unit"]
