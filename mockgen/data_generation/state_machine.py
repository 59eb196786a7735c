"""
Generation/Validation State Machine
===================================

One batch = one run of this graph:

    GENERATE -> VALIDATE -> END
                   |
                   +--> GENERATE   (invalid output, retries left)

Pipeline Flow:
--------------
- generate: render the prompt and call the TextGenerator. A failed call
  records the error and counts as a retry; control still moves on to
  validate, where the missing output fails naturally.
- validate: parse and repair the raw output. Any failure counts as a retry.
- next_step decides the transition and is a pure function of the state.

Retries keep the batch size and foreign-key context they started with.
"""

from typing import Any, Dict

from langgraph.graph import END, StateGraph

from mockgen.app.config import MAX_RETRIES
from mockgen.app.logger import get_logger
from mockgen.generation_plan.fk_sampler import ForeignKeyContext
from mockgen.schema_analysis.models import TableModel
from .llm import TextGenerator
from .prompts import build_generation_prompt
from .repair import parse_generated_rows, repair_rows
from .state import BatchState, GenerationStep

logger = get_logger(__name__)


def next_step(state: BatchState, max_retries: int = MAX_RETRIES) -> GenerationStep:
    """Transition taken after VALIDATE."""
    if state.is_valid:
        return GenerationStep.END
    if state.retry_count >= max_retries:
        return GenerationStep.END
    return GenerationStep.GENERATE


def build_batch_graph(generator: TextGenerator, max_retries: int = MAX_RETRIES):
    """Builds and compiles the generate/validate graph around ``generator``."""
    graph = StateGraph(BatchState)

    def generate_node(state: BatchState) -> Dict[str, Any]:
        prompt = build_generation_prompt(
            state.table_name, state.columns, state.foreign_keys, state.count
        )
        try:
            raw_output = generator.generate(prompt)
        except Exception as exc:
            logger.warning(
                f"Generation failed for {state.table_name} "
                f"(attempt {state.retry_count + 1}): {exc}"
            )
            return {
                "raw_output": None,
                "error": f"Generation failed: {exc}",
                "retry_count": state.retry_count + 1,
            }
        return {"raw_output": raw_output, "error": None}

    def validate_node(state: BatchState) -> Dict[str, Any]:
        try:
            rows = repair_rows(parse_generated_rows(state.raw_output), state.columns)
        except Exception as exc:
            logger.info(f"Validation failed for {state.table_name}: {exc}")
            return {
                "is_valid": False,
                "final_data": [],
                "error": str(exc),
                "retry_count": state.retry_count + 1,
            }
        return {"is_valid": True, "final_data": rows, "error": None}

    def route(state: BatchState) -> GenerationStep:
        return next_step(state, max_retries)

    graph.add_node(GenerationStep.GENERATE.value, generate_node)
    graph.add_node(GenerationStep.VALIDATE.value, validate_node)

    graph.set_entry_point(GenerationStep.GENERATE.value)
    graph.add_edge(GenerationStep.GENERATE.value, GenerationStep.VALIDATE.value)
    graph.add_conditional_edges(
        GenerationStep.VALIDATE.value,
        route,
        {
            GenerationStep.GENERATE: GenerationStep.GENERATE.value,
            GenerationStep.END: END,
        },
    )

    return graph.compile()


class BatchGenerator:
    """Runs the compiled state machine for one batch at a time."""

    def __init__(self, generator: TextGenerator, max_retries: int = MAX_RETRIES):
        self.max_retries = max_retries
        self.graph = build_batch_graph(generator, max_retries)

    def run(self, table: TableModel, count: int, foreign_keys: ForeignKeyContext) -> BatchState:
        initial = BatchState(
            table_name=table.name,
            columns=list(table.columns),
            count=count,
            foreign_keys=foreign_keys,
        )
        # Two nodes per attempt plus headroom
        config = {"recursion_limit": 2 * self.max_retries + 5}
        result = self.graph.invoke(initial, config=config)
        if isinstance(result, BatchState):
            return result
        return BatchState.model_validate(result)
