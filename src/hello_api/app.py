"""
FastAPI application: a greeting at the root and health reporting at /health.
"""
import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from hello_api import health, openapi
from hello_api.config import get_settings
from hello_api.errors import register_error_handlers
from hello_api.logging_config import setup_logging

logger = logging.getLogger(__name__)

GREETING = "Hello World!"


class HealthCheckAck(BaseModel):
    message: str
    statusCode: int
    success: bool


class HealthReport(BaseModel):
    status: str
    timestamp: str
    uptime: float
    memory: Dict[str, int]
    version: str


def get_hello() -> str:
    return GREETING


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Hello API started")
    yield
    logger.info("Hello API shutting down")


settings = get_settings()

app = FastAPI(
    title=openapi.TITLE,
    description=openapi.DESCRIPTION,
    version=openapi.VERSION,
    docs_url=settings.docs_url,
    openapi_url=settings.openapi_url,
    lifespan=lifespan,
)
openapi.install_openapi(app, settings.server_url)
register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Fixed greeting."""
    logger.info("Hello from the root endpoint")
    return get_hello()


@app.post(
    "/health",
    response_model=HealthCheckAck,
    status_code=status.HTTP_201_CREATED,
)
async def check_health():
    """Acknowledge a health check ping."""
    return {
        "message": "Health check endpoint is working",
        "statusCode": status.HTTP_200_OK,
        "success": True,
    }


@app.get("/health", response_model=HealthReport)
async def get_health():
    """Liveness report with process metrics read at request time."""
    return health.health_report()
