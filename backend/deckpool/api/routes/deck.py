"""Deck Routes: register, remove, list, draw and stats over the shared pool.

Invariants:
    - Every handler goes through PoolService (lock, mutate, persist, unlock)
    - Success bodies of /register, /remove and /draw are bare JSON strings
    - Mutating bodies above max_body_bytes are rejected (413) on the bytes received,
      chunked or not, before the entries are validated

Design Decisions:
    - Sync handlers: FastAPI runs them on its thread pool, and the blocking file
      write happens under PoolService's threading.Lock
    - Unprefixed paths: existing clients call /register, /remove, /registered, /draw
"""

import logging

from fastapi import APIRouter, Depends, Request

from deckpool.config import get_settings
from deckpool.core.errors import PayloadTooLargeError
from deckpool.schemas.pool import EntriesRequest, PoolStatsResponse
from deckpool.services.pool_service import PoolService, get_pool_service

logger = logging.getLogger(__name__)


async def enforce_body_limit(request: Request) -> None:
    """Reject requests whose body exceeds max_body_bytes."""
    limit = get_settings().max_body_bytes
    size = len(await request.body())
    if size > limit:
        raise PayloadTooLargeError(size, limit)


router = APIRouter(tags=["deck"])


@router.post(
    "/register", response_model=str,
    dependencies=[Depends(enforce_body_limit)],
)
def register(
    body: EntriesRequest, pool: PoolService = Depends(get_pool_service),
):
    """Register entries not already in the pool."""
    pool.register(body.entries)
    return "Registered new entries"


@router.post(
    "/remove", response_model=str,
    dependencies=[Depends(enforce_body_limit)],
)
def remove(
    body: EntriesRequest, pool: PoolService = Depends(get_pool_service),
):
    """Remove entries from both piles."""
    pool.remove(body.entries)
    return "Removed entries"


@router.get("/registered", response_model=list[str])
def registered(pool: PoolService = Depends(get_pool_service)):
    """Every registered entry, sorted."""
    return pool.registered()


@router.post("/draw", response_model=str)
def draw(pool: PoolService = Depends(get_pool_service)):
    """Draw the next entry. 400 POOL_EXHAUSTED when nothing is registered."""
    return pool.draw()


@router.get("/stats", response_model=PoolStatsResponse)
def stats(pool: PoolService = Depends(get_pool_service)):
    """Pile sizes: active, used and their total."""
    s = pool.stats()
    return PoolStatsResponse(active=s.active, used=s.used, total=s.total)
