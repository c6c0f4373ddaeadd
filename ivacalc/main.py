"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ivacalc.config import get_settings
from ivacalc.infrastructure.database import init_db
from ivacalc.core.logging import configure_logging
from ivacalc.core.middleware import setup_middleware
from ivacalc.core.exceptions import register_exception_handlers
from ivacalc.domain.schemas.common import HealthResponse

from ivacalc.interfaces.api.products import router as products_router
from ivacalc.interfaces.api.calculations import router as calculations_router

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting IVA calculator", env=settings.ENVIRONMENT)

    # No migrations in this project: create missing tables on boot
    init_db()
    logger.info("Database tables created/verified")

    yield

    logger.info("IVA calculator stopped")


app = FastAPI(
    title="IVA Calculator",
    description="Product catalog, IVA calculation and calculation history API",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(products_router)
app.include_router(calculations_router)


@app.get("/api/health", response_model=HealthResponse)
def health():
    return {"status": "Backend is running"}
