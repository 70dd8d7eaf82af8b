"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable


class Operation(str, Enum):
    """An instruction as it is written to the output."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of the operations applied.

    An operation that cannot change anything (too few elements) does nothing
    and is not logged. Each method returns whether the operation was applied.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, operation: Operation) -> bool:
        self.operations.append(operation)
        return True

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def sa(self) -> bool:
        """Swap the first two elements of ``a``."""
        if len(self.a) < 2:
            return False
        self._swap(self.a)
        return self._log(Operation.SA)

    def sb(self) -> bool:
        """Swap the first two elements of ``b``."""
        if len(self.b) < 2:
            return False
        self._swap(self.b)
        return self._log(Operation.SB)

    def ss(self) -> bool:
        """Swap the tops of both stacks; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self._swap(self.a)
        self._swap(self.b)
        return self._log(Operation.SS)

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self.a.appendleft(self.b.popleft())
        return self._log(Operation.PA)

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.appendleft(self.a.popleft())
        return self._log(Operation.PB)

    def ra(self) -> bool:
        """Rotate ``a`` up: the first element becomes the last."""
        if len(self.a) < 2:
            return False
        self.a.rotate(-1)
        return self._log(Operation.RA)

    def rb(self) -> bool:
        """Rotate ``b`` up: the first element becomes the last."""
        if len(self.b) < 2:
            return False
        self.b.rotate(-1)
        return self._log(Operation.RB)

    def rr(self) -> bool:
        """Rotate both stacks up; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate(-1)
        self.b.rotate(-1)
        return self._log(Operation.RR)

    def rra(self) -> bool:
        """Rotate ``a`` down: the last element becomes the first."""
        if len(self.a) < 2:
            return False
        self.a.rotate(1)
        return self._log(Operation.RRA)

    def rrb(self) -> bool:
        """Rotate ``b`` down: the last element becomes the first."""
        if len(self.b) < 2:
            return False
        self.b.rotate(1)
        return self._log(Operation.RRB)

    def rrr(self) -> bool:
        """Rotate both stacks down; only when both hold two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        self.a.rotate(1)
        self.b.rotate(1)
        return self._log(Operation.RRR)