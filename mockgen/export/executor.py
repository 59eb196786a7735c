"""
Transactional Executor
======================

Runs each table's insert plan in its own transaction and classifies the
overall result.

Per table:
    BEGIN; -> INSERT ... ; -> COMMIT;
On insert failure:
    ROLLBACK; (its own failure is captured separately and never replaces
    the insert error), then the table is recorded as failed.

One table's failure never aborts or touches another table's transaction.
"""

from typing import Optional

from pydantic import BaseModel, Field

from mockgen.app.logger import get_logger
from mockgen.database.interfaces import SqlExecutor
from .sql_exporter import InsertPlan

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class InsertError(Exception):
    """Raised when a table's insert transaction fails."""

    def __init__(self, table: str, cause: Exception):
        self.table = table
        self.cause = cause
        super().__init__(str(cause))


class RollbackError(Exception):
    """Raised when ROLLBACK itself fails. Always captured, never propagated."""
    pass


# =============================================================================
# RESULT MODELS
# =============================================================================

class TableSuccess(BaseModel):
    table: str
    records: int


class TableFailure(BaseModel):
    table: str
    error: str
    records: int = Field(..., description="Rows attempted, not persisted")
    rollback_error: Optional[str] = None


class ExecutionSummary(BaseModel):
    tables_processed: int = 0
    total_records: int = 0
    successful_tables: int = 0
    failed_tables: int = 0


class ExecutionReport(BaseModel):
    success: bool
    summary: Optional[ExecutionSummary] = None
    successful_tables: list[TableSuccess] = Field(default_factory=list)
    failed_tables: list[TableFailure] = Field(default_factory=list)
    message: str
    error: Optional[str] = None


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _insert(executor: SqlExecutor, plan: InsertPlan) -> None:
    try:
        executor.execute("BEGIN;")
        executor.execute(plan.statement)
        executor.execute("COMMIT;")
    except Exception as e:
        raise InsertError(plan.table, e) from e


def _rollback(executor: SqlExecutor, table: str) -> Optional[RollbackError]:
    try:
        executor.execute("ROLLBACK;")
    except Exception as e:
        logger.error(f"Rollback failed for {table}: {e}", extra={"table": table})
        return RollbackError(str(e))
    return None


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def execute_insert_plans(
    executor: SqlExecutor,
    plans: list[InsertPlan],
) -> tuple[list[TableSuccess], list[TableFailure]]:
    """
    Execute insert plans in the given (dependency) order.

    Returns:
        (successful tables, failed tables)
    """
    successes: list[TableSuccess] = []
    failures: list[TableFailure] = []

    for plan in plans:
        try:
            _insert(executor, plan)
        except InsertError as insert_error:
            rollback_error = _rollback(executor, plan.table)
            logger.error(
                f"Failed to insert data into {plan.table}: {insert_error}",
                extra={"table": plan.table, "records": plan.record_count},
            )
            failures.append(TableFailure(
                table=plan.table,
                error=str(insert_error),
                records=plan.record_count,
                rollback_error=str(rollback_error) if rollback_error else None,
            ))
            continue

        successes.append(TableSuccess(table=plan.table, records=plan.record_count))
        logger.info(
            f"Inserted {plan.record_count} rows into {plan.table}",
            extra={"table": plan.table, "records": plan.record_count},
        )

    return successes, failures


def build_execution_report(
    tables_processed: int,
    successes: list[TableSuccess],
    failures: list[TableFailure],
) -> ExecutionReport:
    """Classify the per-table outcomes into the overall report."""
    total_inserted = sum(s.records for s in successes)
    has_success = bool(successes)
    has_failures = bool(failures)

    if has_success and not has_failures:
        message = f"Successfully generated {total_inserted} records across {len(successes)} tables"
    elif has_success and has_failures:
        message = (
            f"Partially completed: {len(successes)} tables succeeded, "
            f"{len(failures)} tables failed"
        )
    else:
        message = f"Failed to generate data for all {len(failures)} tables"

    return ExecutionReport(
        success=has_success,
        summary=ExecutionSummary(
            tables_processed=tables_processed,
            total_records=total_inserted,
            successful_tables=len(successes),
            failed_tables=len(failures),
        ),
        successful_tables=successes,
        failed_tables=failures,
        message=message,
    )
