"""
Unit tests for the identity value objects.

Run with: pytest tests/test_value_objects.py -v
"""

from uuid import uuid4
import pytest
from adoption_api.domain.value_objects import AnimalId, ChatId, MessageId, UserId


@pytest.mark.parametrize("id_type", [AnimalId, ChatId, MessageId])
def test_generated_ids_must_be_uuids(id_type):
    raw = str(uuid4())
    assert str(id_type(raw)) == raw

    with pytest.raises(ValueError):
        id_type("not-a-uuid")
    with pytest.raises(ValueError):
        id_type("")


def test_user_id_accepts_any_non_blank_string():
    assert UserId("auth0|42").value == "auth0|42"

    with pytest.raises(ValueError):
        UserId("   ")


def test_ids_compare_by_value():
    raw = str(uuid4())
    assert MessageId(raw) == MessageId(raw)
    assert MessageId(raw) != MessageId(str(uuid4()))
