"""FastAPI application entrypoint with Lambda handler."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from mangum import Mangum

from .config import settings
from .routes import health, skill
from .services.request_parser import MalformedRequest

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.service_name} in {settings.environment} mode")
    yield
    logger.info(f"Shutting down {settings.service_name}")


app = FastAPI(
    title="Movie Facts Service",
    description="Alexa skill backend for multi-turn movie and number facts",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


@app.exception_handler(MalformedRequest)
async def malformed_request_handler(request: Request, exc: MalformedRequest) -> JSONResponse:
    """Reject envelopes no speech response can be built for."""
    logger.warning(f"Malformed request on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": "malformed_request", "message": str(exc)},
    )


# Include routers
app.include_router(health.router)
app.include_router(skill.router)

# Lambda handler via Mangum
handler = Mangum(app, lifespan="off")
