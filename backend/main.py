"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from component_naming.api.routes import applications, health, metrics
from component_naming.core.config import get_settings
from component_naming.core.errors import (ComponentNamingError,
                                          MappingDecodeError)
from component_naming.core.logging_config import LoggingConfig
from component_naming.core.middleware import LoggingContextMiddleware
from component_naming.core.tracing import configure_tracing, shutdown_tracing

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    configure_tracing(app)

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    shutdown_tracing()


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description="Component name randomization for OAM applications",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(LoggingContextMiddleware)


@app.exception_handler(ComponentNamingError)
async def component_naming_exception_handler(request: Request, exc: ComponentNamingError):
    """Report rename pass failures; the posted application must not be persisted"""
    logger.error(
        "Component naming failed",
        extra={
            "error": exc.message,
            "error_type": type(exc).__name__,
            "path": request.url.path,
        }
    )
    status_code = 422 if isinstance(exc, MappingDecodeError) else 500
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


app.include_router(health.router)
app.include_router(metrics.router)
app.include_router(applications.router)
