"""Entry point for the User Backend API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``8080``) and may be overridden on the command line.  Uvicorn
handles SIGINT and SIGTERM and shuts the server down gracefully.

Usage:
    python run.py
    python run.py --host 127.0.0.1 --port 9000
"""
import argparse
import asyncio
import logging
from typing import List, Optional

from uvicorn import Config, Server

from user_backend_api.app.core.config import settings
from user_backend_api.app.core.logging_config import normalize_level
from user_backend_api.app.main import app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the User Backend API.")
    ap.add_argument("--host", default=settings.host, help="Bind address (default: %(default)s)")
    ap.add_argument("--port", type=int, default=settings.port, help="Listening port (default: %(default)s)")
    return ap.parse_args(argv)


def build_server(host: str, port: int) -> Server:
    # Logging is configured by create_app; uvicorn only sets its logger levels.
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_config=None,
        log_level=normalize_level(settings.log_level),
    )
    return Server(config)


async def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.getLogger(__name__).info("Listening on http://%s:%s", args.host, args.port)
    await build_server(args.host, args.port).serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
