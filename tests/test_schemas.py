"""Tests for profanity masking and entity serialization"""
from datetime import datetime, timezone

import pytest

from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from models.schemas.common import clean_body
from models.schemas.user import UserCredentialsSchema


@pytest.mark.parametrize(
    "body, expected",
    [
        ("I hear Kerfuffle is free this weekend", "I hear **** is free this weekend"),
        ("This is a sharbert sample", "This is a **** sample"),
        ("FORNAX fornax Fornax", "**** **** ****"),
        ("I like Sharbert's flavour", "I like Sharbert's flavour"),
        ("what a kerfuffle!", "what a kerfuffle!"),
        ("nothing to see here", "nothing to see here"),
    ],
)
def test_clean_body(body, expected):
    assert clean_body(body) == expected


def test_clean_body_keeps_spacing():
    assert clean_body("double  space  fornax") == "double  space  ****"


class _Row:
    id = "7d2a4f7e-5c1b-4a4e-9a57-1f0f0e5a1c11"
    created_at = datetime(2026, 1, 2, 3, 4, 5)
    updated_at = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    body = "a kerfuffle indeed"
    user_id = "0b6a0d0e-2f5b-4c1c-8e83-3e0e2c6b3a77"


def test_chirp_out_schema_masks_and_marks_utc():
    data = ChirpOutSchema().dump(_Row())
    assert data["body"] == "a **** indeed"
    assert data["created_at"] == "2026-01-02T03:04:05+00:00"
    assert data["updated_at"] == "2026-01-02T03:04:05+00:00"
    assert data["user_id"] == _Row.user_id


def test_request_schemas_read_null_as_empty():
    assert ChirpCreateSchema().load({"body": None}) == {"body": ""}
    assert UserCredentialsSchema().load({"email": None, "password": None, "extra": 1}) == {
        "email": "",
        "password": "",
    }
