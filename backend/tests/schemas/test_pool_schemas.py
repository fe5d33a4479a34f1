"""Pool schemas: request validation at the API boundary."""

import pytest
from pydantic import ValidationError

from deckpool.schemas.pool import EntriesRequest


def test_entries_request_accepts_strings():
    assert EntriesRequest(entries=["a", "b"]).entries == ["a", "b"]


def test_entries_request_accepts_empty_list():
    assert EntriesRequest(entries=[]).entries == []


def test_entries_required():
    with pytest.raises(ValidationError):
        EntriesRequest()


def test_entries_items_must_be_strings():
    with pytest.raises(ValidationError):
        EntriesRequest(entries=[1])


def test_extra_fields_ignored():
    req = EntriesRequest.model_validate({"entries": ["a"], "note": "x"})
    assert req.entries == ["a"]


def test_lone_surrogate_rejected():
    with pytest.raises(ValidationError) as exc:
        EntriesRequest(entries=["ok", "\ud800"])
    assert "entry 1" in str(exc.value)
