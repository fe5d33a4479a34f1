"""Pool Snapshot: strict serialization / deserialization for Pool.

Invariants:
    - pool_to_snapshot produces exactly {"deck": [...], "discard": [...]}
    - pool_from_snapshot rejects unknown keys, missing keys and non-string items
    - Pile order is preserved element-for-element in both directions
    - RNG state is never part of a snapshot

Design Decisions:
    - Pydantic model with extra="forbid" and strict str items: schema-validating
      parse instead of default-filling (ADR: no partially-initialized Pool)
    - "deck"/"discard" key names kept for on-disk compatibility with existing data files
"""

import random

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from deckpool.core.errors import MalformedStateError
from deckpool.core.pool import Pool


class PoolSnapshot(BaseModel):
    """On-disk record: active pile as `deck`, used pile as `discard`."""

    model_config = ConfigDict(extra="forbid")

    deck: list[StrictStr]
    discard: list[StrictStr]


def pool_to_snapshot(pool: Pool[str]) -> dict:
    """Serialize Pool to a JSON-safe dict. Pure, no IO."""
    active, used = pool.entries()
    return {"deck": list(active), "discard": list(used)}


def pool_from_snapshot(
    data: object, rng: random.Random | None = None,
) -> Pool[str]:
    """Rebuild a Pool from snapshot data with a fresh RNG.

    Raises MalformedStateError on any deviation from the record shape.
    """
    try:
        snapshot = PoolSnapshot.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise MalformedStateError(details) from e
    return Pool(active=snapshot.deck, used=snapshot.discard, rng=rng)
