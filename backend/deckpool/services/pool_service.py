"""Pool Service: the single shared, lock-guarded pool handle used by the routes.

Invariants:
    - Every operation holds the lock for its full duration, including the save
    - Every mutating operation persists before releasing the lock
    - A failed save rolls the in-memory pool back and re-raises (memory never ahead of disk)
    - draw() re-discards the drawn token: drawing rotates, it never deletes

Design Decisions:
    - threading.Lock: routes are sync handlers run on FastAPI's thread pool
    - pool_manager as module-level singleton initialized in lifespan, exposed
      through get_pool_service() so tests can override the dependency
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from deckpool.config import Settings
from deckpool.core.errors import PoolExhaustedError, PoolNotInitializedError
from deckpool.core.pool import Pool
from deckpool.infrastructure.pool_store import PoolStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolStats:
    active: int
    used: int

    @property
    def total(self) -> int:
        return self.active + self.used


class PoolService:
    """Serializes all pool access: lock, mutate, persist, unlock."""

    def __init__(self, pool: Pool[str], store: PoolStore):
        self._pool = pool
        self._store = store
        self._lock = threading.Lock()

    @classmethod
    def from_store(cls, store: PoolStore) -> "PoolService":
        return cls(store.load(), store)

    @contextmanager
    def _mutation(self) -> Iterator[Pool[str]]:
        """Yield the pool under the lock, then persist; restore it if the save fails."""
        with self._lock:
            active, used = self._pool.entries()
            yield self._pool
            try:
                self._store.save(self._pool)
            except Exception:
                self._pool = Pool(list(active), list(used))
                raise

    def register(self, entries: list[str]) -> int:
        """Add every entry not already registered. Returns how many were added."""
        added = 0
        with self._mutation() as pool:
            for entry in entries:
                if not pool.contains(entry):
                    pool.discard(entry)
                    added += 1
        logger.info(
            f"Registered {added} of {len(entries)} entries",
            extra={"entry_count": added},
        )
        return added

    def remove(self, entries: list[str]) -> int:
        """Remove entries from both piles. Returns how many were registered."""
        removed = 0
        with self._mutation() as pool:
            for entry in entries:
                if pool.contains(entry):
                    removed += 1
                pool.remove(entry)
        logger.info(
            f"Removed {removed} of {len(entries)} entries",
            extra={"entry_count": removed},
        )
        return removed

    def registered(self) -> list[str]:
        """All registered tokens, sorted."""
        with self._lock:
            active, used = self._pool.entries()
        return sorted(active + used)

    def draw(self) -> str:
        """Draw one token and rotate it back into the used pile.

        Raises PoolExhaustedError when nothing is registered.
        """
        with self._mutation() as pool:
            item = pool.draw()
            if item is None:
                raise PoolExhaustedError()
            pool.discard(item)
        logger.debug("Drew token", extra={"item": item})
        return item

    def stats(self) -> PoolStats:
        with self._lock:
            active, used = self._pool.entries()
        return PoolStats(active=len(active), used=len(used))

    def health_check(self) -> bool:
        return self._store.health_check()


# Initialized by init_pool() during application startup
pool_manager: PoolService | None = None


def init_pool(settings: Settings) -> PoolService:
    """Load the pool from disk and install the shared handle.

    Load failures propagate: the application must not start half-initialized.
    """
    global pool_manager
    pool_manager = PoolService.from_store(PoolStore(settings.data_file))
    return pool_manager


def get_pool_service() -> PoolService:
    """FastAPI dependency for the shared pool handle."""
    if pool_manager is None:
        raise PoolNotInitializedError()
    return pool_manager
