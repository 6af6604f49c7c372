"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application: it sets up logging,
installs the request middleware, includes the routers, registers the
exception handlers that turn service errors into plain-text responses
and serves the public directory.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn user_directory_api.app.main:app --reload

Each application owns its own ``UserStore``; pass one in to share or
pre-seed state, otherwise a store with the default users is created.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import Settings, settings
from .core.logging_config import quiet_server_access_log, setup_logging
from .core.middleware import audit_request, log_access
from .core.security import authenticate_request
from .core.store import UserStore
from .services.user_service import InvalidUserError, UserNotFoundError, UserService

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor."


def create_app(app_settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment
        at import time.
    store : Optional[UserStore]
        Store backing the user service.  A fresh store seeded with the
        default users is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = app_settings or settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(config.log_level, config.log_file)

    app = FastAPI(title=config.project_name, version=config.api_version)
    app.state.settings = config
    app.state.user_service = UserService(store if store is not None else UserStore())

    # Middleware added last runs first: access log, then audit, then
    # authentication, then the routes.
    app.middleware("http")(authenticate_request)
    app.middleware("http")(audit_request)
    if config.is_development:
        app.middleware("http")(log_access)
        quiet_server_access_log()
        logger.debug("Access logging enabled")

    app.include_router(router)

    @app.exception_handler(UserNotFoundError)
    async def handle_not_found(_: Request, exc: UserNotFoundError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(InvalidUserError)
    async def handle_invalid_user(_: Request, exc: InvalidUserError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    # Static files are mounted last so that explicit routes win.
    public_dir = Path(config.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")
    else:
        logger.debug("Public directory %s not found; static files disabled", public_dir)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Aplicación: %s", config.project_name)
        logger.info("Entorno: %s", config.environment)
        logger.info("Escuchando en el puerto %s.", config.port)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
