"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipebook.config import get_settings
from recipebook.logging_config import LoggingContext, configure_logging, get_logger
from recipebook.routers import (
    ingredients_router,
    nutrition_router,
    shopping_router,
)

settings = get_settings()

REQUEST_ID_HEADER = "X-Request-ID"

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Recipebook API")
    if not settings.nutrition_enabled:
        logger.warning("USDA_API_KEY not set, nutrition estimates are disabled")

    yield

    logger.info("Shutting down Recipebook API")


app = FastAPI(
    title="Recipebook API",
    description="Ingredient parsing, nutrition estimates and shopping lists",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag log records for this request with its id and echo it back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


app.include_router(ingredients_router)
app.include_router(shopping_router)
app.include_router(nutrition_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipebook-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipebook API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
