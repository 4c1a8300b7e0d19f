"""Entry point for the Farm Manager API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the storage backend and the hosted record store
credentials is read from environment variables; see
``farm_manager_api/app/core/config.py`` for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from farm_manager_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables ``API_HOST`` and
    ``API_PORT``.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    try:
        await server.serve()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
