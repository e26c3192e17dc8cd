"""Employee Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeRegistryError → structured JSON responses
    - CORS and request logging configured from settings (not hardcoded)
    - Record store created on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, one place that
      owns the store for the process lifetime
    - Three error handler layers: EmployeeRegistryError (domain),
      RequestValidationError (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_registry import __version__
from employee_registry.api.error_handlers import register_error_handlers
from employee_registry.api.request_logging import make_request_logger
from employee_registry.api.routes import employees, health
from employee_registry.config import get_settings
from employee_registry.infrastructure.observability import setup_logging
from employee_registry.infrastructure.record_store_provider import init_record_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_record_store(app)
    logger.info("Employee Registry API started")
    yield
    logger.info("Employee Registry API shutting down")


app = FastAPI(
    title="Employee Registry API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.middleware("http")(
    make_request_logger(
        settings.request_log_format, settings.skip_code_threshold,
    ),
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
