"""
Main entrypoint for the User Store API.

This module assembles the FastAPI application: it sets up logging,
builds (or accepts) the user store, registers the plain text error
handlers and includes the routers.  ``create_app`` is called once at
import time so the app can be served directly, e.g.::

    uvicorn user_store_api.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .api.router import router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .schemas.user import User
from .services.user_store import UserStore


DEMO_USERS = (User(id=1, name="Test User1"),)


def build_store(app_settings: Settings) -> UserStore:
    """Create the process‑wide store, seeded with the demo user if enabled."""
    if app_settings.seed_demo_user:
        return UserStore(DEMO_USERS)
    return UserStore()


def create_app(app_settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Settings, optional
        Configuration to use.  Defaults to the module level ``settings``.
    store : UserStore, optional
        Store to serve.  When omitted a new one is built from the
        settings.  Tests pass a fresh store to stay isolated.

    Returns
    -------
    FastAPI
        A configured application with the store on ``app.state.store``.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    # Only exact routes answer: no trailing-slash redirects, no docs pages.
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else build_store(app_settings)

    register_error_handlers(app)
    app.include_router(router)

    logging.getLogger(__name__).debug("Application created with %d user(s)", len(app.state.store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
