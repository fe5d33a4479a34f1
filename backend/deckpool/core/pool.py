"""Pool: draw/discard piles that hand out every token once per cycle.

Invariants:
    - active is a stack: draw() pops from its end
    - used is reshuffled into active only when a draw finds active empty
    - A drawn token cannot come back until every other registered token was drawn
    - Pool never deduplicates; callers check contains() before discard()
    - No IO, no logging, never raises

Design Decisions:
    - random.Random per pool, seeded from OS entropy: RNG state is process-lifetime
      and never persisted (ADR: unpredictable order across restarts)
    - entries() returns tuples: callers enumerate without mutating the piles
"""

import random
from typing import Generic, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """Two-pile token pool with lazy reshuffle."""

    def __init__(
        self,
        active: list[T] | None = None,
        used: list[T] | None = None,
        rng: random.Random | None = None,
    ):
        self._active: list[T] = list(active or [])
        self._used: list[T] = list(used or [])
        self._rng = rng or random.Random()

    def draw(self) -> T | None:
        """Pop the next token, reshuffling used into active when active is empty.

        Returns None when both piles are empty.
        """
        if not self._active:
            self._rng.shuffle(self._used)
            self._active.extend(self._used)
            self._used.clear()
        if not self._active:
            return None
        return self._active.pop()

    def discard(self, item: T) -> None:
        self._used.append(item)

    def contains(self, item: T) -> bool:
        return item in self._active or item in self._used

    def remove(self, item: T) -> None:
        """Delete every occurrence of item from both piles. Absent is a no-op."""
        self._active[:] = [e for e in self._active if e != item]
        self._used[:] = [e for e in self._used if e != item]

    def entries(self) -> tuple[tuple[T, ...], tuple[T, ...]]:
        """Snapshot of (active, used) in pile order."""
        return tuple(self._active), tuple(self._used)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._active) + len(self._used)

    def __repr__(self) -> str:
        return f"Pool(active={len(self._active)}, used={len(self._used)})"
