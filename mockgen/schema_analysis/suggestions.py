"""
Generation Suggestions
======================

Name/type heuristics shown alongside the schema analysis so a caller can
pick sensible per-table counts before generating.
"""

from datetime import date
from typing import Any, Sequence

from .models import Column, TableModel


# Table name keywords -> recommended row count. First match wins.
RECOMMENDED_COUNTS: list[tuple[tuple[str, ...], int]] = [
    (("category", "role", "status", "type"), 5),
    (("user", "customer", "account"), 50),
    (("order", "transaction", "log", "event"), 200),
    (("post", "article", "product"), 100),
    (("comment", "review", "rating"), 300),
]

DEFAULT_RECOMMENDED_COUNT = 10


def recommended_count(table_name: str) -> int:
    normalized = table_name.lower()
    for keywords, count in RECOMMENDED_COUNTS:
        if any(keyword in normalized for keyword in keywords):
            return count
    return DEFAULT_RECOMMENDED_COUNT


def _numeric_suggestion(name: str) -> dict[str, Any] | None:
    if any(k in name for k in ("price", "amount", "cost")):
        return {"min": 1, "max": 1000, "precision": 2, "description": "Price/amount field"}
    if "age" in name:
        return {"min": 18, "max": 80, "description": "Age field"}
    if "year" in name:
        return {"min": 2000, "max": date.today().year, "description": "Year field"}
    if "quantity" in name or "count" in name:
        return {"min": 1, "max": 100, "description": "Quantity/count field"}
    return None


def _text_suggestion(name: str) -> dict[str, Any] | None:
    if "email" in name:
        return {"pattern": "email", "description": "Email address field"}
    if "phone" in name:
        return {"pattern": "phone", "description": "Phone number field"}
    if "url" in name or "website" in name:
        return {"pattern": "url", "description": "URL field"}
    if "code" in name or "id" in name:
        return {"pattern": "alphanumeric", "maxLength": 20, "description": "Code/ID field"}
    return None


def _date_suggestion(name: str) -> dict[str, Any] | None:
    if "created" in name or "registered" in name:
        return {
            "startDate": "2020-01-01",
            "endDate": date.today().isoformat(),
            "description": "Creation/registration date",
        }
    if "birth" in name or "dob" in name:
        return {"startDate": "1950-01-01", "endDate": "2005-12-31", "description": "Birth date"}
    return None


def column_suggestions(columns: Sequence[Column]) -> dict[str, dict[str, Any]]:
    """Per-column value hints keyed by column name. Later categories override earlier ones."""
    suggestions: dict[str, dict[str, Any]] = {}

    for col in columns:
        name = col.name.lower()
        col_type = col.type.lower()

        candidates = []
        if any(t in col_type for t in ("int", "numeric", "decimal")):
            candidates.append(_numeric_suggestion(name))
        if any(t in col_type for t in ("varchar", "text", "char")):
            candidates.append(_text_suggestion(name))
        if "timestamp" in col_type or "date" in col_type:
            candidates.append(_date_suggestion(name))

        for suggestion in candidates:
            if suggestion:
                suggestions[col.name] = suggestion

    return suggestions


def suggest_generation_config(tables: dict[str, TableModel]) -> dict[str, dict[str, Any]]:
    """Recommended count, column hints and dependencies for each table."""
    return {
        name: {
            "recommended_count": recommended_count(name),
            "column_suggestions": column_suggestions(table.columns),
            "dependencies": [dep.model_dump() for dep in table.dependencies],
        }
        for name, table in tables.items()
    }
