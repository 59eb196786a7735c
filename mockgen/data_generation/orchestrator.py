"""
Batch Orchestrator
==================

Drives the state machine batch by batch until a table has the requested
number of rows, or until a batch comes back empty.

A table that ends short of its requested count is a valid outcome
(partial fulfillment), not an error.
"""

import random
from typing import Any, Optional

from mockgen.app.config import BATCH_SIZE
from mockgen.app.logger import get_logger
from mockgen.generation_plan.fk_sampler import sample_foreign_key_context
from mockgen.schema_analysis.models import TableModel
from .dataset import GeneratedDataSet
from .state_machine import BatchGenerator

logger = get_logger(__name__)


def generate_table_rows(
    table: TableModel,
    count: int,
    dataset: GeneratedDataSet,
    batch_generator: BatchGenerator,
    batch_size: int = BATCH_SIZE,
    rng: Optional[random.Random] = None,
) -> list[dict[str, Any]]:
    """
    Generate up to ``count`` rows for ``table`` and append them to ``dataset``.

    Each batch gets a freshly sampled foreign-key context. The loop stops
    early when a batch yields no rows (retries exhausted) or raises.

    Returns:
        The rows generated for this table, in order.
    """
    generated = 0

    while generated < count:
        current_batch_size = min(batch_size, count - generated)
        foreign_keys = sample_foreign_key_context(table, dataset, rng=rng)

        try:
            result = batch_generator.run(table, current_batch_size, foreign_keys)
        except Exception as exc:
            logger.error(
                f"Batch for {table.name} raised, stopping table: {exc}",
                extra={"table": table.name, "generated": generated, "requested": count},
            )
            break

        if not result.final_data:
            logger.warning(
                f"Batch for {table.name} exhausted {result.retry_count} retries "
                f"({result.error}); stopping at {generated}/{count} rows",
                extra={"table": table.name, "generated": generated, "requested": count},
            )
            break

        # Rows beyond the batch size are discarded
        rows = result.final_data[:current_batch_size]
        dataset.extend(table.name, rows)
        generated += len(rows)
        logger.info(
            f"Generated {generated}/{count} rows for {table.name}",
            extra={"table": table.name, "generated": generated, "requested": count},
        )

    return dataset.rows_for(table.name)
