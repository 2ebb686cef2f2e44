"""Entry point for the Todo API server.

This script launches the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as TODO_STORAGE, MONGODB_URI, HOST and PORT should
be placed in environment variables or a `.env` file in the same
directory.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.main import app


async def main() -> None:
    """Serve the API on ``settings.host``:``settings.port``.

    Defaults are `0.0.0.0` and `5000`.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
