"""
Prompt Construction
===================

Builds the batch generation prompt from the table schema, name-based
column hints, the sampled foreign-key context and the requested count.
The template text lives in ``prompts_mock_data.json``.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from langchain_core.prompts import PromptTemplate

from mockgen.generation_plan.fk_sampler import ForeignKeyContext
from mockgen.schema_analysis.models import Column
from .repair import UUID_PLACEHOLDER


# =============================================================================
# COLUMN HINTS
# =============================================================================

# Substring of the lowercased column name -> guidance. First match wins.
COLUMN_HINTS: list[tuple[tuple[str, ...], str]] = [
    (("status",), "realistic business statuses (e.g. active, pending, shipped, cancelled)"),
    (("email",), "unique, realistic email addresses"),
    (("phone",), "realistic phone numbers with consistent formatting"),
    (("amount", "price"), "positive decimal numbers with two decimal places"),
    (("description", "bio"), "1-2 sentences of natural prose"),
]


def column_hint(column_name: str) -> str | None:
    """Guidance for a column based on its name, or None."""
    normalized = column_name.lower()
    for patterns, hint in COLUMN_HINTS:
        if any(pattern in normalized for pattern in patterns):
            return hint
    return None


def build_hints(columns: Sequence[Column]) -> str:
    lines = []
    for col in columns:
        hint = column_hint(col.name)
        if hint:
            lines.append(f"- {col.name}: {hint}")
    return "\n".join(lines) if lines else "No special guidance."


# =============================================================================
# PROMPT TEMPLATES (EXTERNALIZED)
# =============================================================================

_PROMPTS_FILE = Path(__file__).parent / "prompts_mock_data.json"


@lru_cache(maxsize=1)
def _load_prompts() -> dict[str, str]:
    """Load prompt templates from the external JSON file."""
    if not _PROMPTS_FILE.exists():
        raise FileNotFoundError(
            f"Prompts file not found: {_PROMPTS_FILE}. "
            "Ensure prompts_mock_data.json exists in the data_generation directory."
        )
    with open(_PROMPTS_FILE, "r", encoding="utf-8") as f:
        return json.load(f)


def _get_prompt(key: str) -> PromptTemplate:
    prompts = _load_prompts()
    if key not in prompts:
        raise KeyError(f"Prompt key '{key}' not found in {_PROMPTS_FILE}")
    return PromptTemplate.from_template(prompts[key])


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def _describe_columns(columns: Sequence[Column]) -> str:
    lines = []
    for col in columns:
        parts = [col.name, col.type, "nullable" if col.nullable else "not null"]
        if col.constraint:
            parts.append(col.constraint)
        if col.foreign_table:
            parts.append(f"references {col.foreign_table}.{col.foreign_column}")
        lines.append("- " + ", ".join(parts))
    return "\n".join(lines)


def build_generation_prompt(
    table_name: str,
    columns: Sequence[Column],
    foreign_keys: ForeignKeyContext,
    count: int,
) -> str:
    """Render the batch generation prompt for one state-machine run."""
    if isinstance(foreign_keys, str):
        fk_text = foreign_keys
    else:
        fk_text = json.dumps(foreign_keys, default=str, indent=2)

    return _get_prompt("batch_generation").format(
        table_name=table_name,
        columns=_describe_columns(columns),
        hints=build_hints(columns),
        foreign_keys=fk_text,
        count=count,
        uuid_placeholder=UUID_PLACEHOLDER,
    )
