"""
Mock Data Pipeline
==================

Purpose:
--------
Entry points that wire the stages together:

    Schema Analyzer -> Dependency Resolver -> (per table, in order)
    FK Sampler -> State Machine x N batches -> Insert Plan Builder
    -> Transactional Executor -> ExecutionReport

Public Interface:
-----------------
    def generate_mock_data(database, text_generator, config=None, template=None) -> MockDataResult
    def execute_mock_data_generation(database, text_generator, config=None, template=None) -> ExecutionReport

Tables and batches are processed strictly sequentially: a table's
foreign-key context is sampled from rows of tables generated before it.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Optional

from mockgen.app.logger import get_logger
from mockgen.data_generation.dataset import GeneratedDataSet
from mockgen.data_generation.llm import TextGenerator
from mockgen.data_generation.orchestrator import generate_table_rows
from mockgen.data_generation.state_machine import BatchGenerator
from mockgen.database.interfaces import Database, SchemaSource
from mockgen.export.executor import (
    ExecutionReport,
    build_execution_report,
    execute_insert_plans,
)
from mockgen.export.sql_exporter import InsertPlan, build_insert_plan
from mockgen.generation_plan.dependency_resolver import topological_sort
from mockgen.generation_plan.templates import record_count_for, resolve_generation_config
from mockgen.schema_analysis.analyzer import analyze_schema_for_generation

logger = get_logger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class MockDataResult:
    """Everything generated in one run, before anything is inserted."""
    data: GeneratedDataSet
    plans: list[InsertPlan]
    order: list[str]
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def queries(self) -> list[str]:
        return [plan.statement for plan in self.plans]


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def generate_mock_data(
    database: SchemaSource,
    text_generator: TextGenerator,
    config: Optional[dict[str, dict[str, Any]]] = None,
    template: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> MockDataResult:
    """
    Generate rows for every table of the database without inserting them.

    Args:
        database: Schema source for the target database.
        text_generator: LLM used to produce rows.
        config: Per-table settings, e.g. ``{"users": {"count": 50}}``.
        template: Optional template name merged under ``config``.
        rng: Random source for foreign-key sampling.

    Returns:
        MockDataResult with the data set, per-table insert plans (in
        dependency order) and a summary.

    Raises:
        SchemaFetchError: If the schema cannot be read.
        UnknownTemplateError: If ``template`` is not defined.
    """
    resolved_config = resolve_generation_config(config, template)
    analysis = analyze_schema_for_generation(database)

    order = topological_sort(analysis.dependencies)
    logger.info(f"Generation order: {order}", extra={"order": order})

    dataset = GeneratedDataSet()
    batch_generator = BatchGenerator(text_generator)
    plans: list[InsertPlan] = []

    for table_name in order:
        table = analysis.tables.get(table_name)
        if table is None:
            continue

        count = record_count_for(table_name, resolved_config)
        rows = generate_table_rows(table, count, dataset, batch_generator, rng=rng)

        plan = build_insert_plan(table_name, rows)
        if plan is not None:
            plans.append(plan)

    return MockDataResult(
        data=dataset,
        plans=plans,
        order=order,
        summary={
            "tables_processed": len(order),
            "total_records": dataset.total_records(),
        },
    )


def execute_mock_data_generation(
    database: Database,
    text_generator: TextGenerator,
    config: Optional[dict[str, dict[str, Any]]] = None,
    template: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> ExecutionReport:
    """
    Generate mock data and insert it, one transaction per table.

    Never raises: failures before any table is attempted (schema fetch,
    bad template) come back as ``success=False`` with ``error`` set.
    """
    try:
        result = generate_mock_data(database, text_generator, config, template, rng=rng)
        successes, failures = execute_insert_plans(database, result.plans)
    except Exception as e:
        logger.exception(f"Mock data generation failed: {e}")
        return ExecutionReport(
            success=False,
            error=str(e),
            message="Failed to generate mock data",
            successful_tables=[],
            failed_tables=[],
        )

    report = build_execution_report(result.summary["tables_processed"], successes, failures)
    logger.info(report.message, extra={"success": report.success})
    return report
