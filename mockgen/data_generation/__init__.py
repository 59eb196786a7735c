"""
Data Generation Module
======================

LLM-backed row generation: a bounded-retry generate/validate state machine
per batch, and the orchestrator that runs batches until a table is full.
"""

from .dataset import GeneratedDataSet

from .llm import (
    TextGenerator,
    GeminiTextGenerator,
    GenerationError,
    LLMUnavailableError,
)

from .repair import (
    parse_generated_rows,
    repair_rows,
    RowValidationError,
    UUID_PLACEHOLDER,
)

from .state import BatchState, GenerationStep

from .state_machine import (
    BatchGenerator,
    build_batch_graph,
    next_step,
)

from .orchestrator import generate_table_rows

__all__ = [
    # Primary API
    "generate_table_rows",
    "BatchGenerator",
    "build_batch_graph",
    "next_step",
    "parse_generated_rows",
    "repair_rows",

    # Data structures
    "GeneratedDataSet",
    "BatchState",
    "GenerationStep",
    "TextGenerator",
    "GeminiTextGenerator",
    "UUID_PLACEHOLDER",

    # Exceptions
    "GenerationError",
    "LLMUnavailableError",
    "RowValidationError",
]
