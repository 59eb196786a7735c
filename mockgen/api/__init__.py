"""
API Module
==========

API routes and schemas.
"""

from .schemas import (
    TableConfig,
    MockDataRequest,
    AnalysisRequest,
    PreviewResponse,
    AnalysisResponse,
    HealthResponse,
    VersionResponse,
    ErrorResponse,
)

__all__ = [
    "TableConfig",
    "MockDataRequest",
    "AnalysisRequest",
    "PreviewResponse",
    "AnalysisResponse",
    "HealthResponse",
    "VersionResponse",
    "ErrorResponse",
]
