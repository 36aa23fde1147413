"""Application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from hello_api.api.routers import health, hello
from hello_api.config import get_settings
from hello_api.logging import configure_logging, get_logger
from hello_api.middleware import RequestLoggingMiddleware

_logger = get_logger("lifecycle")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events."""
    settings = get_settings()
    _logger.info("startup service=%s environment=%s", settings.app_name, settings.environment)
    yield
    _logger.info("shutdown service=%s", settings.app_name)


def create_application() -> FastAPI:
    """Build and configure a FastAPI instance."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(health.router)
    app.include_router(hello.router)
    return app


app = create_application()
