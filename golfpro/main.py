"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from golfpro.dependencies import get_settings
from golfpro.middleware.request_logging import RequestLoggingMiddleware
from golfpro.routers import geocoding, instructors, search, stats

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    logger.info(f"Application started: {settings.app_name}")
    logger.info(f"Debug mode: {settings.debug}")

    yield

    logger.info(f"Application shutdown: {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="""
    Golf Pro Finder API

    Backend for the golf instructor marketplace:

    * **Search**: Instructor directory with text and facet filters, ZIP code radius search and pagination
    * **Instructors**: Public instructor profiles
    * **Geocoding**: US ZIP code to coordinates
    * **Stats**: Profile view and contact click counters

    ## Error Handling

    All errors return consistent JSON responses with:
    - `detail`: Human-readable error message
    - `error_code`: Machine-readable error code

    Common HTTP status codes:
    - `200`: Success
    - `404`: Not Found
    - `422`: Validation Error
    - `500`: Internal Server Error
    - `503`: Geocoding service unavailable
    """,
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "search",
            "description": "Instructor directory search. Filter, paginate and find instructors near a ZIP code.",
        },
        {
            "name": "instructors",
            "description": "Public instructor profile pages.",
        },
        {
            "name": "geocoding",
            "description": "Geocoding operations. Convert US ZIP codes to coordinates.",
        },
        {
            "name": "stats",
            "description": "Profile view and contact click counters.",
        },
    ],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add logging middleware
app.add_middleware(RequestLoggingMiddleware)


@app.get("/")
async def root() -> dict:
    """Root endpoint returning API information."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "status": "operational",
        "docs": "/api/docs"
    }


# Include routers
app.include_router(search.router, tags=["search"])
app.include_router(instructors.router, tags=["instructors"])
app.include_router(geocoding.router, tags=["geocoding"])
app.include_router(stats.router, tags=["stats"])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app_name": settings.app_name
    }


# Global exception handlers

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by routers."""
    if exc.status_code >= 500:
        logger.error(f"HTTP error {exc.status_code}: {request.url.path} - {exc.detail}")
    else:
        logger.info(f"HTTP {exc.status_code}: {request.url.path}")

    error_code_map = {
        404: "NOT_FOUND",
        403: "FORBIDDEN",
        401: "UNAUTHORIZED",
        422: "VALIDATION_ERROR",
        400: "BAD_REQUEST",
        500: "INTERNAL_ERROR",
        503: "SERVICE_UNAVAILABLE",
    }

    error_code = error_code_map.get(exc.status_code, f"HTTP_{exc.status_code}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "error_code": error_code
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        f"Unhandled exception: {request.url.path}",
        exc_info=True,
        extra={
            "method": request.method,
            "url": str(request.url),
            "client": request.client.host if request.client else None
        }
    )

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "error_code": "INTERNAL_ERROR",
                "error_type": type(exc).__name__,
                "error_message": str(exc)
            }
        )
    else:
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "error_code": "INTERNAL_ERROR"
            }
        )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "golfpro.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
