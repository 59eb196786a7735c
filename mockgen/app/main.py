"""
FastAPI Application
===================

Builds the API app: logging, CORS, error mapping and the mock data routes.

Run with:
    uvicorn mockgen.app.main:app --reload
or:
    python -m mockgen.app.main
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mockgen.api.routes import router
from mockgen.app import config as app_config
from mockgen.app.exceptions import global_exception_handler
from mockgen.app.logger import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"{app_config.APP_NAME} {app_config.VERSION} starting "
        f"(model={app_config.LLM_MODEL}, batch_size={app_config.BATCH_SIZE})"
    )
    yield


def create_app() -> FastAPI:
    """Create and wire the FastAPI application."""
    configure_logging(app_config.LOG_LEVEL, json_format=app_config.LOG_JSON)

    application = FastAPI(
        title=app_config.APP_NAME,
        description="Schema-aware mock data generation for live databases",
        version=app_config.VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.add_exception_handler(Exception, global_exception_handler)
    application.include_router(router, tags=["Mock Data"])

    @application.get("/")
    def index():
        """Service name, version and the available endpoints."""
        return {
            "name": app_config.APP_NAME,
            "version": app_config.VERSION,
            "docs": "/docs",
            "endpoints": {
                "analyze": "POST /mock-data/analysis",
                "generate": "POST /mock-data",
                "health": "GET /health",
                "version": "GET /version",
            },
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
