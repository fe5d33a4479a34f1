"""Pool Schemas: request/response models for the deck endpoints.

Invariants:
    - EntriesRequest.entries is required; items must be JSON strings encodable as UTF-8
    - Extra request fields are ignored
"""

from pydantic import BaseModel, StrictStr, field_validator


class EntriesRequest(BaseModel):
    """Body of /register and /remove."""
    entries: list[StrictStr]

    @field_validator("entries")
    @classmethod
    def require_utf8_encodable(cls, v: list[str]) -> list[str]:
        """Lone surrogates ("\\ud800") parse as JSON but cannot be stored."""
        for i, entry in enumerate(v):
            try:
                entry.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError(f"entry {i} is not valid UTF-8 text")
        return v


class PoolStatsResponse(BaseModel):
    active: int
    used: int
    total: int
