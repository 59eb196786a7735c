from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from mockgen.generation_plan.fk_sampler import ForeignKeyContext, NO_FOREIGN_KEYS
from mockgen.schema_analysis.models import Column


class GenerationStep(Enum):
    """States of the per-batch generate/validate machine."""
    GENERATE = "generate"
    VALIDATE = "validate"
    END = "end"


class BatchState(BaseModel):
    """State of one batch run. Created fresh per batch and discarded after."""
    model_config = ConfigDict(extra="ignore")

    table_name: str
    columns: list[Column]
    count: int = Field(..., ge=1)
    foreign_keys: ForeignKeyContext = NO_FOREIGN_KEYS
    retry_count: int = 0
    raw_output: Optional[str] = None
    final_data: list[dict[str, Any]] = Field(default_factory=list)
    is_valid: bool = False
    error: Optional[str] = None
