"""Demo Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DemoApiError → structured JSON responses
    - Catalog seeded on startup via lifespan context manager, before any request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() wraps uvicorn Config/Server so the console script honours Settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from uvicorn import Config, Server

from demo_api import __version__
from demo_api.api.error_handlers import register_error_handlers
from demo_api.api.routes import health, products, users
from demo_api.config import get_settings
from demo_api.infrastructure.observability import setup_logging
from demo_api.services.catalog import init_catalog, reset_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_catalog()
    logger.info("Demo API started")
    yield
    reset_catalog()
    logger.info("Demo API shutting down")


app = FastAPI(title="Demo API", version=__version__, lifespan=lifespan)

register_error_handlers(app)

# Routes: explicit registration, no convention-over-config
app.include_router(health.router)
app.include_router(products.router)
app.include_router(users.router)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    config = Config(
        app=app, host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    run()
