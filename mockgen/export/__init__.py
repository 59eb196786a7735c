"""
Export Module
=============

Final stage of the pipeline: generated rows become INSERT statements,
executed one transaction per table.
"""

from .sql_exporter import (
    build_insert_plan,
    serialize_value,
    InsertPlan,
)

from .executor import (
    execute_insert_plans,
    build_execution_report,
    ExecutionReport,
    ExecutionSummary,
    TableSuccess,
    TableFailure,
    InsertError,
    RollbackError,
)

__all__ = [
    # SQL
    "build_insert_plan",
    "serialize_value",
    "InsertPlan",

    # Execution
    "execute_insert_plans",
    "build_execution_report",
    "ExecutionReport",
    "ExecutionSummary",
    "TableSuccess",
    "TableFailure",

    # Exceptions
    "InsertError",
    "RollbackError",
]
