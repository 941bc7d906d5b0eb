from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from libs.common import AppSettings, configure_logging, get_settings
from libs.common.constants import API_PREFIX
from libs.common.logging import set_correlation_id

from .exception_handlers import request_validation_error_handler, unhandled_error_handler
from .routes import router as api_router
from .services.topup import AllowListRegistry, build_default_registry, make_reference_id_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "%s started: env=%s, registered_numbers=%d",
        app.title,
        app.state.settings.app_env,
        len(app.state.registry),
    )
    yield
    logger.info("%s stopped", app.title)


def create_app(
    settings: AppSettings | None = None,
    registry: AllowListRegistry | None = None,
) -> FastAPI:
    if settings is None:
        try:
            settings = get_settings()
        except Exception as e:
            # Configure basic logging before settings are available
            logging.basicConfig(
                level=logging.ERROR,
                format="%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            logger.error(f"Failed to load settings: {e}", exc_info=True)
            raise

    configure_logging(settings.log_level)
    app = FastAPI(title=settings.service_name, version=settings.service_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.registry = registry if registry is not None else build_default_registry()
    app.state.reference_id_factory = make_reference_id_factory(settings.gopay_ref_prefix)

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router)

    @app.middleware("http")
    async def tracing_middleware(request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-Id", str(uuid.uuid4()))
        set_correlation_id(correlation_id)
        request.state.correlation_id = correlation_id
        response: Response = await call_next(request)
        response.headers["X-Correlation-Id"] = correlation_id
        return response

    @app.get("/", tags=["system"])
    async def root():
        return {
            "name": settings.service_name,
            "version": settings.service_version,
            "status": "running",
            "endpoints": {
                "topup": f"{API_PREFIX}/topup",
                "health": f"{API_PREFIX}/health",
                "docs": "/docs",
                "openapi": "/openapi.json",
            },
        }

    return app


app = create_app()


def run():
    import uvicorn

    settings = get_settings()
    reload = settings.app_env == "local"
    # Import string format is required for reload mode
    uvicorn.run("apps.gopay_service.main:app", host="0.0.0.0", port=settings.port, reload=reload)


if __name__ == "__main__":
    run()
