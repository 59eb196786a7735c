"""
Database Interfaces
===================

Contracts for the two database capabilities the generator consumes.
Any object with matching methods can be passed to the pipeline.
"""

from typing import Any, Protocol, runtime_checkable


# =============================================================================
# EXCEPTIONS
# =============================================================================

class DatabaseError(Exception):
    """Base exception for database collaborator failures."""
    pass


class SchemaFetchError(DatabaseError):
    """Raised when the schema cannot be read. Fatal for a pipeline run."""
    pass


# =============================================================================
# PROTOCOLS
# =============================================================================

@runtime_checkable
class SchemaSource(Protocol):
    def get_schema(self) -> list[dict[str, Any]]:
        """Return tables as ``{"name": ..., "columns": [...]}`` dicts."""
        ...


@runtime_checkable
class SqlExecutor(Protocol):
    def execute(self, statement: str) -> list[dict[str, Any]]:
        """
        Run a single statement without bound parameters.

        Used for ``BEGIN;``, the insert statement, ``COMMIT;`` and
        ``ROLLBACK;``, so consecutive calls must share one connection.
        """
        ...


@runtime_checkable
class Database(SchemaSource, SqlExecutor, Protocol):
    """Both capabilities on one object, as the pipeline expects."""
    pass
