"""
Schema Analysis Models (Pydantic)
=================================

Typed, immutable view of a database schema as seen by the generator.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


PRIMARY_KEY = "PRIMARY KEY"
FOREIGN_KEY = "FOREIGN KEY"


# =============================================================================
# COLUMNS
# =============================================================================

class Column(BaseModel):
    """A single column as reported by the schema source."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = Field(default="text", description="Declared SQL type")
    nullable: bool = True
    default: Optional[str] = None
    constraint: Optional[str] = Field(
        default=None,
        description="'PRIMARY KEY', 'FOREIGN KEY' or None"
    )
    foreign_table: Optional[str] = None
    foreign_column: Optional[str] = None

    @property
    def is_primary_key(self) -> bool:
        return self.constraint == PRIMARY_KEY

    @property
    def is_foreign_key(self) -> bool:
        return self.constraint == FOREIGN_KEY


class Dependency(BaseModel):
    """A resolved foreign-key edge from a table to a table it references."""
    model_config = ConfigDict(frozen=True)

    table: str = Field(..., description="Referenced table")
    column: str = Field(..., description="Local foreign key column")
    foreign_column: Optional[str] = Field(default=None, description="Referenced column")


# =============================================================================
# TABLES
# =============================================================================

class TableModel(BaseModel):
    """A table with its key metadata, built once per pipeline run."""
    model_config = ConfigDict(frozen=True)

    name: str
    columns: tuple[Column, ...] = ()
    primary_key: Optional[Column] = None
    foreign_keys: tuple[Column, ...] = ()
    dependencies: tuple[Dependency, ...] = ()

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]


# =============================================================================
# ROOT MODEL
# =============================================================================

class SchemaAnalysis(BaseModel):
    """Tables keyed by name (schema order) plus the dependency graph."""
    model_config = ConfigDict(frozen=True)

    tables: dict[str, TableModel] = Field(default_factory=dict)
    dependencies: dict[str, list[str]] = Field(default_factory=dict)
