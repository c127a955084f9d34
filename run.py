"""Entry point for the Task Manager API server.

Starts the FastAPI application with Uvicorn.  Host, port, storage
backend and the other options are read from environment variables
(see ``task_manager_api.app.core.config``); the command line flags
below override host and port.

Usage:
    python run.py [--host 0.0.0.0] [--port 3000]
"""
import argparse
import asyncio

from uvicorn import Config, Server

from task_manager_api.app.core.config import settings
from task_manager_api.app.main import app


async def serve(host: str, port: int) -> None:
    """Run the API until interrupted."""
    # Uvicorn logs through the handlers set up by setup_logging.
    config = Config(app=app, host=host, port=port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Task Manager API server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    args = parser.parse_args()
    asyncio.run(serve(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
