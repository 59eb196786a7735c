"""
Tests for output parsing and row repair.
"""
import uuid
from datetime import datetime, timezone

import pytest

from mockgen.data_generation.repair import (
    UUID_PLACEHOLDER,
    RowValidationError,
    normalize_timestamp,
    parse_generated_rows,
    repair_row,
)
from mockgen.schema_analysis.models import Column, PRIMARY_KEY


ACCOUNT_COLUMNS = (
    Column(name="id", type="uuid", nullable=False, constraint=PRIMARY_KEY),
    Column(name="owner_ref", type="uuid", nullable=True),
    Column(name="name", type="text", nullable=False),
    Column(name="created_at", type="timestamp with time zone", nullable=False),
    Column(name="closed_at", type="timestamp", nullable=True),
)


def _is_iso8601(value):
    datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value.endswith("Z")


def test_parse_plain_array():
    assert parse_generated_rows('[{"a": 1}, {"a": 2}]') == [{"a": 1}, {"a": 2}]


def test_parse_fenced_array():
    raw = '```json\n[{"a": 1}]\n```'

    assert parse_generated_rows(raw) == [{"a": 1}]


@pytest.mark.parametrize("raw", [None, "not json", '{"a": 1}', "[1, 2]"])
def test_parse_rejects_bad_output(raw):
    with pytest.raises(RowValidationError):
        parse_generated_rows(raw)


def test_uuid_primary_key_always_replaced():
    """The model's value is never kept for a uuid primary key."""
    row = repair_row({"id": "abc", "name": "x", "created_at": None}, ACCOUNT_COLUMNS)

    assert row["id"] != "abc"
    uuid.UUID(row["id"])


def test_uuid_placeholder_replaced_in_other_columns():
    row = repair_row({"owner_ref": UUID_PLACEHOLDER, "name": "x"}, ACCOUNT_COLUMNS)

    assert row["owner_ref"] != UUID_PLACEHOLDER
    uuid.UUID(row["owner_ref"])


def test_real_uuid_kept_in_non_key_column():
    existing = str(uuid.uuid4())

    row = repair_row({"owner_ref": existing, "name": "x"}, ACCOUNT_COLUMNS)

    assert row["owner_ref"] == existing


def test_unparsable_timestamp_becomes_iso8601():
    row = repair_row({"name": "x", "created_at": "last tuesday"}, ACCOUNT_COLUMNS)

    assert _is_iso8601(row["created_at"])


def test_null_timestamp_kept_for_nullable_column():
    row = repair_row({"name": "x", "created_at": "2024-01-02", "closed_at": None}, ACCOUNT_COLUMNS)

    assert row["closed_at"] is None
    assert row["created_at"] == "2024-01-02T00:00:00.000Z"


def test_unknown_keys_dropped_and_missing_columns_filled():
    """Rows end up with exactly the table's columns, in column order."""
    row = repair_row({"name": "x", "nickname": "y"}, ACCOUNT_COLUMNS)

    assert list(row) == ["id", "owner_ref", "name", "created_at", "closed_at"]
    assert "nickname" not in row
    assert row["name"] == "x"


def test_normalize_timestamp_variants():
    assert normalize_timestamp("2024-05-06T07:08:09Z") == "2024-05-06T07:08:09.000Z"
    assert normalize_timestamp("2024-05-06T09:08:09+02:00") == "2024-05-06T07:08:09.000Z"
    assert normalize_timestamp(0) == "1970-01-01T00:00:00.000Z"
    assert normalize_timestamp(
        datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    ) == "2024-01-01T12:00:00.000Z"


def test_parse_uppercase_fence():
    assert parse_generated_rows('```JSON\n[{"a": 1}]\n```') == [{"a": 1}]


def test_parse_fence_after_preamble():
    """Chatty text before the fenced block does not cost a retry."""
    raw = 'Here are the rows:\n```json\n[{"a": 1}, {"a": 2}]\n```\nLet me know!'

    assert parse_generated_rows(raw) == [{"a": 1}, {"a": 2}]


@pytest.mark.parametrize("raw, expected", [
    ("2024/01/15", "2024-01-15T00:00:00.000Z"),
    ("January 15, 2024", "2024-01-15T00:00:00.000Z"),
    ("2024-01-15 10:30:00 UTC", "2024-01-15T10:30:00.000Z"),
    ("Mon, 15 Jan 2024 10:30:00 GMT", "2024-01-15T10:30:00.000Z"),
    ("2024-01-15T10:30:00.5Z", "2024-01-15T10:30:00.500Z"),
])
def test_normalize_loosely_formatted_dates(raw, expected):
    """Readable non-ISO dates keep their value instead of becoming now."""
    assert normalize_timestamp(raw) == expected


def test_normalize_garbage_falls_back_to_now():
    before = datetime.now(timezone.utc).replace(microsecond=0)

    value = normalize_timestamp("whenever")

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed >= before
