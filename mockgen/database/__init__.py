"""
Database Module
===============

Collaborator contracts for schema introspection and statement execution,
and the SQLAlchemy implementation used by the API.
"""

from .interfaces import (
    Database,
    SchemaSource,
    SqlExecutor,
    DatabaseError,
    SchemaFetchError,
)

from .sqlalchemy_database import SqlAlchemyDatabase

__all__ = [
    "Database",
    "SchemaSource",
    "SqlExecutor",
    "SqlAlchemyDatabase",
    "DatabaseError",
    "SchemaFetchError",
]
