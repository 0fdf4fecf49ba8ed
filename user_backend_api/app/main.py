"""
Main entrypoint for the User Backend API.

``create_app`` builds and configures the FastAPI application: logging,
CORS, error envelopes and the route table.  The store is created here
and attached to ``app.state``; handlers reach it through a dependency,
never through a module global.  An application instance is created at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn user_backend_api.app.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.routing import APIRoute

from .api.router import router
from .core.config import settings
from .core.cors import install_cors
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_store import UserStore, seed_demo_users

logger = logging.getLogger(__name__)


def build_store(seed: bool = True) -> UserStore:
    """Create the process‑wide store, optionally with the demo users."""
    store = UserStore()
    if seed:
        seed_demo_users(store)
    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("User backend started, %d users loaded", len(app.state.user_store.list_all()))
    for route in app.routes:
        if isinstance(route, APIRoute):
            logger.info("  %-7s %s", ",".join(sorted(route.methods)), route.path)
    yield
    logger.info("User backend shutting down")


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve.  When omitted a new one is built, seeded with
        the demo users unless ``SEED_DEMO_USERS`` is disabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.user_store = store if store is not None else build_store(settings.seed_demo_users)

    register_exception_handlers(app)
    install_cors(app)
    app.include_router(router)
    return app


app = create_app()
