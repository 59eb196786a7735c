"""
Foreign-Key Context Sampler
===========================

Draws already-generated key values from dependency tables so that the LLM
can be told which foreign key values are valid for the next batch.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Optional, Union

from mockgen.app.config import FK_SAMPLE_SIZE
from mockgen.schema_analysis.models import TableModel

if TYPE_CHECKING:
    from mockgen.data_generation.dataset import GeneratedDataSet


# Context for a table that references nothing
NO_FOREIGN_KEYS = "No foreign keys"

ForeignKeyContext = Union[dict[str, list[Any]], str]


def sample_foreign_key_context(
    table: TableModel,
    dataset: GeneratedDataSet,
    sample_size: int = FK_SAMPLE_SIZE,
    rng: Optional[random.Random] = None,
) -> ForeignKeyContext:
    """
    Build the foreign-key context for one batch of ``table``.

    For each dependency, at most ``sample_size`` random rows of the
    referenced table are drawn and reduced to the referenced column's value.
    The result is keyed by the local foreign key column. Dependencies whose
    table has no rows yet are left out entirely.

    Returns:
        dict of fk column -> candidate values, or NO_FOREIGN_KEYS when the
        table has no dependencies at all.
    """
    if not table.dependencies:
        return NO_FOREIGN_KEYS

    rng = rng or random
    context: dict[str, list[Any]] = {}

    for dep in table.dependencies:
        rows = dataset.rows_for(dep.table)
        if not rows:
            continue

        sampled = rng.sample(rows, min(sample_size, len(rows)))
        context[dep.column] = [row.get(dep.foreign_column) for row in sampled]

    return context
