"""Pool Store: JSON file persistence for the pool.

Invariants:
    - save() encodes the whole record before truncating and rewriting the file
    - load() on a missing file returns an empty Pool; nothing is created on disk
    - Every restored Pool gets a freshly seeded RNG
    - OSError mapped to PersistenceError, bad JSON / schema to MalformedStateError
    - Errors are logged and re-raised, never swallowed or retried

Design Decisions:
    - Truncate-and-rewrite over temp-file rename: crash atomicity not required
    - Snapshot conversion lives in core/pool_snapshot.py: the store only does IO
"""

import json
import logging
import os
from pathlib import Path

from deckpool.core.errors import (
    ErrorContext, MalformedStateError, PersistenceError,
)
from deckpool.core.pool import Pool
from deckpool.core.pool_snapshot import pool_from_snapshot, pool_to_snapshot

logger = logging.getLogger(__name__)


class PoolStore:
    """Reads and writes a Pool as a two-field JSON record."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def save(self, pool: Pool[str]) -> None:
        """Overwrite the data file with the pool's current piles."""
        snapshot = pool_to_snapshot(pool)
        try:
            payload = json.dumps(snapshot, ensure_ascii=False).encode("utf-8")
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(payload)
        except (OSError, TypeError, ValueError) as e:
            logger.error(
                f"Failed to save pool: {e}",
                extra={"operation": "save", "data_file": str(self.path)},
            )
            raise PersistenceError(
                str(e), "save", ErrorContext(data_file=str(self.path)),
            ) from e

    def load(self) -> Pool[str]:
        """Restore the pool, or return an empty one if no file exists."""
        if not self.path.exists():
            logger.info(
                "No pool file found, starting empty",
                extra={"data_file": str(self.path)},
            )
            return Pool()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                f"Pool file is not valid JSON: {e}",
                extra={"operation": "load", "data_file": str(self.path)},
            )
            raise MalformedStateError(
                f"invalid JSON: {e}", ErrorContext(data_file=str(self.path)),
            ) from e
        except OSError as e:
            logger.error(
                f"Failed to read pool file: {e}",
                extra={"operation": "load", "data_file": str(self.path)},
            )
            raise PersistenceError(
                str(e), "load", ErrorContext(data_file=str(self.path)),
            ) from e
        try:
            pool = pool_from_snapshot(data)
        except MalformedStateError as e:
            e.context.data_file = str(self.path)
            logger.error(
                e.message,
                extra={"error_code": e.code, "data_file": str(self.path)},
            )
            raise
        logger.info(
            "Pool restored",
            extra={"data_file": str(self.path), "entry_count": len(pool)},
        )
        return pool

    def health_check(self) -> bool:
        """True if the data file's directory exists and is writable."""
        directory = self.path.parent
        if self.path.exists() and not os.access(self.path, os.W_OK):
            return False
        return directory.is_dir() and os.access(directory, os.W_OK)
