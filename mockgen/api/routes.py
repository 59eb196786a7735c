"""
API Routes
==========

Endpoint definitions for the Mock Data Generator API.

  1. POST /mock-data/analysis - Inspect a database and suggest counts
  2. POST /mock-data          - Generate (and optionally insert) mock data

This module wires requests into the pipeline without adding business logic.
"""

from typing import Callable, Union

from fastapi import APIRouter, Depends

from .schemas import (
    MockDataRequest,
    AnalysisRequest,
    PreviewResponse,
    AnalysisResponse,
    HealthResponse,
    VersionResponse,
)

from mockgen.pipeline import generate_mock_data, execute_mock_data_generation
from mockgen.data_generation.llm import TextGenerator, get_text_generator
from mockgen.database.sqlalchemy_database import SqlAlchemyDatabase
from mockgen.export.executor import ExecutionReport, ExecutionSummary
from mockgen.generation_plan.templates import MOCK_DATA_TEMPLATES
from mockgen.schema_analysis.analyzer import analyze_schema_for_generation
from mockgen.schema_analysis.suggestions import suggest_generation_config

from mockgen.app import config as app_config
from mockgen.app import exceptions as app_exceptions
from mockgen.app.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# ROUTER
# =============================================================================

router = APIRouter()


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_database_factory() -> Callable[[str], SqlAlchemyDatabase]:
    """
    Callable that opens a database from a connection string.

    The returned object is used as a context manager and closed after the
    request.
    """
    return SqlAlchemyDatabase


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/mock-data/analysis", response_model=AnalysisResponse)
def analyze_database(
    request: AnalysisRequest,
    open_database=Depends(get_database_factory),
) -> AnalysisResponse:
    """
    Read the schema of a database and suggest generation settings.
    """
    try:
        with open_database(request.connection_string) as database:
            analysis = analyze_schema_for_generation(database)
    except Exception as e:
        raise app_exceptions.get_http_exception(e)

    return AnalysisResponse(
        analysis=analysis.model_dump(),
        suggestions=suggest_generation_config(analysis.tables),
        templates=sorted(MOCK_DATA_TEMPLATES),
    )


@router.post("/mock-data", response_model=Union[PreviewResponse, ExecutionReport])
def create_mock_data(
    request: MockDataRequest,
    open_database=Depends(get_database_factory),
    text_generator: TextGenerator = Depends(get_text_generator),
) -> Union[PreviewResponse, ExecutionReport]:
    """
    Generate mock data for every table of the target database.

    With ``preview`` set, nothing is inserted: the first rows per table and
    the first INSERT statements are returned. Otherwise the rows are
    inserted table by table and the execution report is returned.
    """
    config = request.generation_config()
    logger.info(
        f"Mock data request (preview={request.preview}, template={request.template})",
        extra={"preview": request.preview, "template": request.template},
    )

    try:
        with open_database(request.connection_string) as database:
            if not request.preview:
                return execute_mock_data_generation(
                    database, text_generator, config=config, template=request.template
                )
            result = generate_mock_data(
                database, text_generator, config=config, template=request.template
            )
    except Exception as e:
        raise app_exceptions.get_http_exception(e)

    return PreviewResponse(
        preview=result.data.preview(app_config.PREVIEW_ROW_LIMIT),
        queries=result.queries[:app_config.PREVIEW_QUERY_LIMIT],
        summary=ExecutionSummary(
            tables_processed=result.summary["tables_processed"],
            total_records=result.summary["total_records"],
        ),
        order=result.order,
    )


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok")


@router.get("/version", response_model=VersionResponse)
def get_version() -> VersionResponse:
    """Get API version."""
    return VersionResponse(version=app_config.VERSION, name=app_config.APP_NAME)
