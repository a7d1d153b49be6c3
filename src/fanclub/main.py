from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from fanclub.api.middleware.error_handler import (
    handle_fanclub_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from fanclub.api.middleware.logging import RequestLoggingMiddleware, configure_logging
from fanclub.api.v1 import router as v1_router
from fanclub.api.v1.health import router as health_router
from fanclub.config import settings
from fanclub.core.exceptions import FanClubError
from fanclub.services.football import football_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging(settings.log_level)
    await football_client.start()
    yield
    # Shutdown
    await football_client.stop()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Fan Club API",
        description="Leagues, fixtures and match reminders for football fans",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (most specific first)
    app.add_exception_handler(FanClubError, handle_fanclub_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
