"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from . import __version__
from .api import router
from .config import settings

logger = logging.getLogger(__name__)


def configure_logging():
    """Set up root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging()
    logger.info(f"Query Annotations starting on {settings.host}:{settings.port}")

    yield

    # Shutdown
    logger.info("Query Annotations shutting down")


app = FastAPI(
    title="Query Annotations",
    description="Extracts tags, interests, organizations and key:value settings from search strings",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api/v1", tags=["annotations"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Query Annotations",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "/api/v1/health",
            "items": "/api/v1/items",
            "brackets": "/api/v1/brackets",
            "parameters": "/api/v1/parameters",
            "components": "/api/v1/components",
            "format_date": "/api/v1/format-date",
        },
    }


def run():
    """Run the application with uvicorn."""
    import uvicorn
    uvicorn.run(
        "query_annotations.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
