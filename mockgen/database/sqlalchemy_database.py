from typing import Any, Optional

from sqlalchemy import create_engine, inspect, Engine, Connection

from mockgen.app.logger import get_logger
from mockgen.schema_analysis.models import PRIMARY_KEY, FOREIGN_KEY
from .interfaces import SchemaFetchError

logger = get_logger(__name__)


class SqlAlchemyDatabase:
    """
    Schema source and statement executor backed by SQLAlchemy.

    Holds a single AUTOCOMMIT connection so that literal ``BEGIN;`` /
    ``COMMIT;`` / ``ROLLBACK;`` statements control the transaction
    around the insert that runs between them.
    """

    def __init__(self, connection_string: str):
        if not connection_string:
            raise ValueError("Connection string is required.")
        self.connection_string = connection_string
        self.engine: Engine = create_engine(connection_string, pool_pre_ping=True)
        self._connection: Optional[Connection] = None

    def __enter__(self) -> "SqlAlchemyDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get_connection(self) -> Connection:
        if self._connection is None or self._connection.closed:
            self._connection = self.engine.connect().execution_options(
                isolation_level="AUTOCOMMIT"
            )
        return self._connection

    def execute(self, statement: str) -> list[dict[str, Any]]:
        result = self._get_connection().exec_driver_sql(statement)
        if result.returns_rows:
            return [dict(row._mapping) for row in result]
        return []

    def get_schema(self) -> list[dict[str, Any]]:
        try:
            inspector = inspect(self._get_connection())
            table_names = inspector.get_table_names()
        except Exception as e:
            logger.error(f"Failed to fetch table names: {e}")
            raise SchemaFetchError(f"Failed to fetch table names: {e}") from e

        schema = []
        for table_name in table_names:
            pk_columns = set(
                inspector.get_pk_constraint(table_name).get("constrained_columns") or []
            )

            fk_targets: dict[str, tuple[str, Optional[str]]] = {}
            try:
                for fk_info in inspector.get_foreign_keys(table_name):
                    referred = fk_info.get("referred_columns") or []
                    for i, local in enumerate(fk_info["constrained_columns"]):
                        fk_targets[local] = (
                            fk_info["referred_table"],
                            referred[i] if i < len(referred) else None,
                        )
            except Exception as e:
                logger.warning(f"Failed to fetch foreign keys for {table_name}: {e}")

            columns = []
            for col_info in inspector.get_columns(table_name):
                name = col_info["name"]
                column = {
                    "name": name,
                    "type": str(col_info["type"]).lower(),
                    "nullable": bool(col_info.get("nullable", True)),
                    "default": col_info.get("default"),
                    "constraint": None,
                }
                if name in pk_columns:
                    column["constraint"] = PRIMARY_KEY
                elif name in fk_targets:
                    column["constraint"] = FOREIGN_KEY
                    column["foreign_table"], column["foreign_column"] = fk_targets[name]
                columns.append(column)

            schema.append({"name": table_name, "columns": columns})

        return schema

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
        self.engine.dispose()
