"""
ProScore - Main FastAPI Application

Deterministic resume scoring API: weighted quality score, ATS pass
probability, keyword gap analysis and an improvement roadmap.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proscore.api.routes import router
from proscore.config import get_settings
from proscore.scoring.keywords import TAXONOMY_VERSION, get_available_roles
from proscore.services.verdict import GeminiTextGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Keyword taxonomy v{TAXONOMY_VERSION} with {len(get_available_roles())} roles")

    # One text generator per process, injected into routes through app.state
    if settings.gemini_api_key:
        app.state.text_generator = GeminiTextGenerator(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        )
        logger.info(f"AI verdict enabled with model {settings.gemini_model}")
    else:
        app.state.text_generator = None
        logger.info("AI verdict disabled: no gemini_api_key configured")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## ProScore Resume Scoring API

Scores resumes with a deterministic, weighted rubric.

### Components

- **Content Quality (40%)**: quantified achievements, action verbs, skill relevance, clarity
- **ATS Compatibility (35%)**: keyword coverage, format safety, section headers, file format
- **Format & Structure (15%)**: length, section order, visual hierarchy, contact info
- **Impact & Metrics (10%)**: quantified results, scale, recognition

### Quick Start

1. Send resume text to `/api/score` with an optional `jobRole`
2. Upload a PDF to `/api/score/file`
3. Get an apply/consider/skip recommendation from `/api/job-match`
4. Check supported roles at `/api/roles`
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "proscore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
