"""
Schema Analysis Module
======================

Turns a live database schema into table models with key metadata and a
foreign-key dependency graph.

Public Interface:
-----------------
- analyze_schema(raw_schema) -> SchemaAnalysis
- analyze_schema_for_generation(source) -> SchemaAnalysis
- suggest_generation_config(tables) -> dict
"""

from .analyzer import (
    analyze_schema,
    analyze_schema_for_generation,
)

from .models import (
    Column,
    Dependency,
    TableModel,
    SchemaAnalysis,
    PRIMARY_KEY,
    FOREIGN_KEY,
)

from .suggestions import (
    suggest_generation_config,
    recommended_count,
    column_suggestions,
)

__all__ = [
    # Primary API
    "analyze_schema",
    "analyze_schema_for_generation",
    "suggest_generation_config",
    "recommended_count",
    "column_suggestions",

    # Models
    "Column",
    "Dependency",
    "TableModel",
    "SchemaAnalysis",
    "PRIMARY_KEY",
    "FOREIGN_KEY",
]
