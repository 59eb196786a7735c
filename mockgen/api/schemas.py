"""
API Request/Response Schemas
============================

Pydantic models for API request and response validation.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from mockgen.export.executor import ExecutionSummary


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class TableConfig(BaseModel):
    """Per-table generation settings."""

    count: int = Field(..., ge=1, description="Number of rows to generate")


class MockDataRequest(BaseModel):
    """Request body for POST /mock-data endpoint."""

    connection_string: str = Field(
        ...,
        min_length=1,
        description="SQLAlchemy URL of the target database"
    )
    config: dict[str, TableConfig] = Field(
        default_factory=dict,
        description="Per-table settings, overriding the template"
    )
    template: Optional[str] = Field(
        default=None,
        description="Named template supplying default counts"
    )
    preview: bool = Field(
        default=False,
        description="Generate only, do not insert anything"
    )

    def generation_config(self) -> dict[str, dict[str, Any]]:
        return {table: cfg.model_dump() for table, cfg in self.config.items()}


class AnalysisRequest(BaseModel):
    """Request body for POST /mock-data/analysis endpoint."""

    connection_string: str = Field(..., min_length=1)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class PreviewResponse(BaseModel):
    """Response for POST /mock-data with preview=true."""

    preview: dict[str, list[dict[str, Any]]]
    queries: list[str]
    summary: ExecutionSummary
    order: list[str]


class AnalysisResponse(BaseModel):
    """Response for POST /mock-data/analysis."""

    analysis: dict[str, Any]
    suggestions: dict[str, dict[str, Any]]
    templates: list[str]


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    status: str = "ok"


class VersionResponse(BaseModel):
    """Response for GET /version endpoint."""

    version: str
    name: str = "Mock Data Generator"


class ErrorResponse(BaseModel):
    """Standard error response."""

    status: str = "error"
    message: str
    detail: Optional[str] = None
