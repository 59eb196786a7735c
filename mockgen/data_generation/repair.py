"""
Output Parsing and Row Repair
=============================

Purpose:
--------
Turns raw LLM text into rows that fit the target table exactly.

Repair Rules:
-------------
- uuid/guid columns: primary keys always get a fresh uuid4; other uuid
  columns get one when the value is the placeholder, empty or missing.
- timestamp/date columns: parsed leniently (pandas) and normalized to
  ISO-8601 (UTC, millisecond precision, trailing 'Z'). Unparsable values
  become the current instant. None is kept for nullable columns.
- Keys that are not columns of the table are dropped.
- Columns missing from a row are set to None.

No LLM usage here; this is fully deterministic apart from uuid4/now.
"""

import json
import re
import uuid
from datetime import date, datetime, timezone
from typing import Any, Sequence

import pandas as pd

from mockgen.schema_analysis.models import Column


# =============================================================================
# EXCEPTIONS
# =============================================================================

class RowValidationError(Exception):
    """Raised when generated output cannot be parsed or repaired. Retryable."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

UUID_PLACEHOLDER = "UUID_PLACEHOLDER"

UUID_TYPE_MARKERS = ("uuid", "guid")
TIMESTAMP_TYPE_MARKERS = ("timestamp", "date")


# =============================================================================
# PARSING
# =============================================================================

_FENCED_BLOCK = re.compile(r"```[a-zA-Z]*[ \t]*\n?(.*?)```", re.DOTALL)


def _strip_code_fences(raw_output: str) -> str:
    """Content of the first fenced block, ignoring any text around it."""
    match = _FENCED_BLOCK.search(raw_output)
    if match is None:
        return raw_output.strip()
    return match.group(1).strip()


def parse_generated_rows(raw_output: str | None) -> list[dict[str, Any]]:
    """
    Parse LLM output as a JSON array of row objects.

    Direct parsing is tried first; Markdown code fences are stripped as a
    fallback.

    Raises:
        RowValidationError: If there is no output, it is not JSON, it is not
            an array, or an element is not an object.
    """
    if raw_output is None:
        raise RowValidationError("No generated output to validate.")

    try:
        parsed = json.loads(raw_output)
    except json.JSONDecodeError:
        try:
            parsed = json.loads(_strip_code_fences(raw_output))
        except json.JSONDecodeError as e:
            raise RowValidationError(
                f"LLM produced invalid JSON: {e}. Raw output: {raw_output[:500]}"
            ) from e

    if not isinstance(parsed, list):
        raise RowValidationError(
            f"Expected a JSON array of rows, got {type(parsed).__name__}."
        )

    for i, row in enumerate(parsed):
        if not isinstance(row, dict):
            raise RowValidationError(f"Row {i} is not a JSON object.")

    return parsed


# =============================================================================
# REPAIR
# =============================================================================

def _is_uuid_column(column: Column) -> bool:
    col_type = column.type.lower()
    return any(marker in col_type for marker in UUID_TYPE_MARKERS)


def _is_timestamp_column(column: Column) -> bool:
    col_type = column.type.lower()
    return any(marker in col_type for marker in TIMESTAMP_TYPE_MARKERS)


def _to_iso8601(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_timestamp(value: Any) -> str:
    """Canonical ISO-8601 for ``value``, or the current instant if unparsable."""
    parsed: datetime | None = None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        # Epoch milliseconds
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            parsed = None
    elif isinstance(value, str):
        try:
            stamp = pd.to_datetime(value.strip(), utc=True)
        except (ValueError, TypeError, OverflowError):
            stamp = None
        if stamp is not None and not pd.isna(stamp):
            parsed = stamp.to_pydatetime()

    if parsed is None:
        parsed = datetime.now(timezone.utc)
    return _to_iso8601(parsed)


def repair_row(row: dict[str, Any], columns: Sequence[Column]) -> dict[str, Any]:
    """Return a copy of ``row`` with exactly the table's columns, repaired."""
    repaired: dict[str, Any] = {}

    for col in columns:
        value = row.get(col.name)

        if _is_uuid_column(col):
            if col.is_primary_key or value in (None, "", UUID_PLACEHOLDER):
                value = str(uuid.uuid4())
        elif _is_timestamp_column(col):
            if value is not None or not col.nullable:
                value = normalize_timestamp(value)

        repaired[col.name] = value

    return repaired


def repair_rows(rows: list[dict[str, Any]], columns: Sequence[Column]) -> list[dict[str, Any]]:
    return [repair_row(row, columns) for row in rows]
