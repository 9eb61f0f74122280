# argus/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from argus.api.dependencies import build_audit_service, build_repository
from argus.api.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from argus.api.routers import audit_logs, health
from argus.application.exceptions import ApplicationError
from argus.config.enums import load_enums
from argus.config.logging import configure_logging
from argus.config.settings import get_settings
from argus.domain.exceptions import DomainError, DomainValidationError

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Registry is fully built before the first request; a malformed config aborts startup.
    enums = load_enums(settings.enums_config_path)
    app.state.enums = enums
    repository, engine = await build_repository(settings)
    app.state.audit_service = build_audit_service(settings, enums, repository)
    logger.info("startup_complete", extra={"storage_backend": settings.storage_backend})
    try:
        yield
    finally:
        if engine is not None:
            await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> RequestLogging.
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(DomainValidationError)
async def domain_validation_error_handler(request, exc: DomainValidationError):
    return JSONResponse(status_code=400, content={"detail": exc.message, "field": exc.field})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    logger.error("application_error", extra={"error": exc.message})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.exception("unexpected_error")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /api/audit-logs
app.include_router(health.router)
app.include_router(audit_logs.router, prefix="/api/audit-logs")
