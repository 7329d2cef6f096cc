from fastapi import FastAPI

from libcalhours.api.routes.hours import router
from libcalhours.core.observability import configure_logging
from libcalhours.core.observability import init_sentry
from libcalhours.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with logging and Sentry configured."""

    settings = Settings()
    configure_logging(settings)
    init_sentry(settings)

    app = FastAPI(title="libcalhours")
    app.include_router(router)
    return app


app = create_app()
