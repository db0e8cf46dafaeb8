# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for The Ben API, the content backend of the
# artist's website. It configures the FastAPI application with middleware,
# routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    TheBenException,
    theben_exception_handler,
    validation_exception_handler,
)
from app.routers import about, health, hero, music, site_settings, tours, videos

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so there is
    nothing to open here beyond announcing the configuration.
    """
    logger.info(f"Starting The Ben API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info("API documentation available at /api-docs")

    yield

    logger.info("Shutting down The Ben API")


def _servers() -> list[dict[str, str]]:
    production = {"url": settings.API_BASE_URL, "description": "Production server"}
    if settings.is_production:
        return [production]
    development = {
        "url": f"http://localhost:{settings.API_PORT}",
        "description": "Development server",
    }
    return [development, production]


# Create FastAPI application
app = FastAPI(
    title="The Ben API",
    description=(
        "Backend API for The Ben website. Manages music albums, videos, "
        "tours, the hero video, the biography and website settings, and "
        "uploads images and videos to media storage."
    ),
    version=API_VERSION,
    docs_url="/api-docs",
    redoc_url="/api-redoc",
    lifespan=lifespan,
    servers=_servers(),
    openapi_tags=[
        {
            "name": "Music",
            "description": "Music albums management endpoints",
        },
        {
            "name": "Videos",
            "description": "Video content management endpoints",
        },
        {
            "name": "Tours",
            "description": "Tour dates and events management endpoints",
        },
        {
            "name": "Hero",
            "description": "Hero video configuration endpoints",
        },
        {
            "name": "Settings",
            "description": "Website settings management endpoints",
        },
        {
            "name": "About",
            "description": "Biography and about section management endpoints",
        },
        {
            "name": "Health",
            "description": "Health check endpoints",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - the public site and the admin UI call from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TheBenException)
async def handle_theben_exception(request: Request, exc: TheBenException):
    """Handle custom API exceptions."""
    return await theben_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong!",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Albums
app.include_router(
    music.router,
    prefix="/api/music",
    tags=["Music"]
)

# Videos
app.include_router(
    videos.router,
    prefix="/api/videos",
    tags=["Videos"]
)

# Tour dates
app.include_router(
    tours.router,
    prefix="/api/tours",
    tags=["Tours"]
)

# Hero video (singleton)
app.include_router(
    hero.router,
    prefix="/api/hero",
    tags=["Hero"]
)

# Website settings (singleton)
app.include_router(
    site_settings.router,
    prefix="/api/settings",
    tags=["Settings"]
)

# Biography (singleton)
app.include_router(
    about.router,
    prefix="/api/about",
    tags=["About"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "The Ben API",
        "version": API_VERSION,
        "docs": "/api-docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
