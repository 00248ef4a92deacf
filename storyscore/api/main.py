"""
Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from storyscore import __version__
from storyscore.config.settings import settings
from storyscore.logging_setup import configure_logging
from storyscore.models.scoring_config import ScoringConfigError

from .routes import analysis


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    configure_logging(settings.log_level)
    logger.info(f"Starting StoryScore API Server - Environment: {settings.environment}")
    # Fails startup on a bad scoring config file
    analysis.get_analyzer()
    yield
    logger.info("Shutting down StoryScore API Server")


# Create FastAPI app
app = FastAPI(
    title="StoryScore - User Story Readiness Analysis",
    description="Score user stories for clarity and INVEST readiness",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(analysis.router, prefix="/api", tags=["analysis"])


@app.exception_handler(ScoringConfigError)
async def scoring_config_error_handler(request: Request, exc: ScoringConfigError):
    """Report a broken scoring configuration with the same body as other server errors."""
    logger.exception(f"[API] Scoring configuration unavailable: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error", "details": str(exc)})


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "StoryScore API",
        "version": __version__,
        "status": "operational",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
