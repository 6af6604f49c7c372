"""Entry point for the User Directory API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``user_directory_api.app.core.config``
for the remaining settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from user_directory_api.app.core.config import settings
from user_directory_api.app.main import app


def build_server() -> Server:
    """Create a Uvicorn server bound to the configured host and port."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def main() -> None:
    server = build_server()
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
