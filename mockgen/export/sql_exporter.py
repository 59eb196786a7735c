"""
SQL Insert Plan Builder
=======================

Serializes the generated rows of a table into one multi-row INSERT
statement. Values are embedded as literals because the executor runs
statements without bound parameters.

Value Rules:
------------
- None            -> NULL
- str             -> single-quoted, inner quotes doubled
- dict / list     -> single-quoted JSON text, inner quotes doubled
- bool            -> true / false
- anything else   -> str(value) as-is (numbers)
"""

import json
from dataclasses import dataclass
from typing import Any, Optional


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass(frozen=True)
class InsertPlan:
    """One table's rows encoded as a single statement."""
    table: str
    statement: str
    record_count: int


# =============================================================================
# VALUE SERIALIZATION
# =============================================================================

def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _quote_string(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def serialize_value(value: Any) -> str:
    """Render a Python value as a SQL literal."""
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return _quote_string(value)
    if isinstance(value, (dict, list)):
        return _quote_string(json.dumps(value, default=str))
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def build_insert_plan(table_name: str, rows: list[dict[str, Any]]) -> Optional[InsertPlan]:
    """
    Build the INSERT statement for all rows of a table.

    Columns are taken from the first row; every row is rendered in that
    column order.

    Returns:
        InsertPlan, or None when there are no rows (the table is skipped).
    """
    if not rows:
        return None

    columns = list(rows[0].keys())
    column_list = ", ".join(_quote_identifier(col) for col in columns)
    values = ", ".join(
        "(" + ", ".join(serialize_value(row.get(col)) for col in columns) + ")"
        for row in rows
    )

    statement = f"INSERT INTO {_quote_identifier(table_name)} ({column_list}) VALUES {values};"
    return InsertPlan(table=table_name, statement=statement, record_count=len(rows))
