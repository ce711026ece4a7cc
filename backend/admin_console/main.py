"""FastAPI entrypoint exposing the record engine to the console front-end."""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .console import build_console
from .routers import customers, orders, products
from .services.notifications import Scheduler

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(settings: Optional[Settings] = None, scheduler: Optional[Scheduler] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.console = build_console(settings, scheduler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "environment": settings.environment}

    app.include_router(orders.router)
    app.include_router(products.router)
    app.include_router(customers.router)

    logger.info("%s ready (%s)", settings.app_name, settings.environment)
    return app


app = create_app()
