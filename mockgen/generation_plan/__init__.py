"""
Generation Plan Module
======================

Decides the order tables are generated in, what each table is asked for,
and which foreign key values each batch may use.

Public Interface:
-----------------
- topological_sort(dependencies) -> list[str]
- sample_foreign_key_context(table, dataset) -> ForeignKeyContext
- resolve_generation_config(config, template) -> dict
"""

from .dependency_resolver import (
    topological_sort,
    VisitState,
)

from .fk_sampler import (
    sample_foreign_key_context,
    ForeignKeyContext,
    NO_FOREIGN_KEYS,
)

from .templates import (
    resolve_generation_config,
    record_count_for,
    MOCK_DATA_TEMPLATES,
    UnknownTemplateError,
)

__all__ = [
    # Primary API
    "topological_sort",
    "sample_foreign_key_context",
    "resolve_generation_config",
    "record_count_for",

    # Data structures
    "VisitState",
    "ForeignKeyContext",
    "NO_FOREIGN_KEYS",
    "MOCK_DATA_TEMPLATES",

    # Exceptions
    "UnknownTemplateError",
]
