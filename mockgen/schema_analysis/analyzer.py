"""
Schema Analyzer
===============

Purpose:
--------
Converts the flat schema reported by a database (tables with annotated
columns) into TableModels carrying primary/foreign key metadata, plus the
dependency graph used to order generation.

Public Interface:
-----------------
    def analyze_schema(raw_schema: list[dict]) -> SchemaAnalysis
    def analyze_schema_for_generation(source: SchemaSource) -> SchemaAnalysis

Input Contract:
---------------
[
  {
    "name": "string",
    "columns": [
      {
        "name": "string",
        "type": "string",
        "nullable": "boolean",
        "default": "string | null",
        "constraint": "'PRIMARY KEY' | 'FOREIGN KEY' | null",
        "foreign_table": "string (FK only)",
        "foreign_column": "string (FK only)"
      }
    ]
  }
]

Rules:
------
- Primary key: first column whose constraint is PRIMARY KEY.
- Foreign keys: every column whose constraint is FOREIGN KEY.
- A dependency edge is only added when the referenced table exists in the
  schema. Foreign keys to absent tables are ignored, not reported.
"""

from typing import Any

from mockgen.app.logger import get_logger
from mockgen.database.interfaces import SchemaSource, SchemaFetchError
from .models import Column, Dependency, TableModel, SchemaAnalysis


logger = get_logger(__name__)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def analyze_schema(raw_schema: list[dict[str, Any]]) -> SchemaAnalysis:
    """
    Build the table model and dependency graph from a raw schema.

    This is a pure transform: no I/O, no mutation of the input.

    Args:
        raw_schema: List of tables as returned by a SchemaSource.

    Returns:
        SchemaAnalysis with tables keyed by name (in schema order) and a
        mapping of table name -> names of the tables it depends on.
    """
    columns_by_table: dict[str, list[Column]] = {}
    for table in raw_schema:
        columns_by_table[table["name"]] = [
            Column.model_validate(col) for col in table.get("columns") or []
        ]

    tables: dict[str, TableModel] = {}
    dependencies: dict[str, list[str]] = {}

    for table_name, columns in columns_by_table.items():
        primary_key = next((col for col in columns if col.is_primary_key), None)
        foreign_keys = [col for col in columns if col.is_foreign_key]

        resolved: list[Dependency] = []
        for fk in foreign_keys:
            # Dangling references are skipped on purpose
            if fk.foreign_table and fk.foreign_table in columns_by_table:
                resolved.append(Dependency(
                    table=fk.foreign_table,
                    column=fk.name,
                    foreign_column=fk.foreign_column,
                ))

        tables[table_name] = TableModel(
            name=table_name,
            columns=tuple(columns),
            primary_key=primary_key,
            foreign_keys=tuple(foreign_keys),
            dependencies=tuple(resolved),
        )
        dependencies[table_name] = [dep.table for dep in resolved]

    return SchemaAnalysis(tables=tables, dependencies=dependencies)


def analyze_schema_for_generation(source: SchemaSource) -> SchemaAnalysis:
    """
    Fetch the schema from a live source and analyze it.

    Raises:
        SchemaFetchError: If the schema source fails.
    """
    try:
        raw_schema = source.get_schema()
    except SchemaFetchError:
        raise
    except Exception as e:
        raise SchemaFetchError(f"Failed to fetch database schema: {e}") from e

    analysis = analyze_schema(raw_schema)
    logger.info(
        "Analyzed schema with %d tables", len(analysis.tables),
        extra={"tables": list(analysis.tables)},
    )
    return analysis
