"""Start the catalog REST API, the hello-world demo, or both.

Hosts and ports come from ``app.config.settings`` (``API_HOST``,
``API_PORT``, ``HELLO_PORT``).

Usage:
    python run.py [rest|hello|both]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from app.config import settings
from app.logging_config import setup_logging

logger = logging.getLogger("run")


def _server(app_path: str, port: int) -> Server:
    config = Config(app=app_path, host=settings.api_host, port=port, reload=False,
                    log_level=settings.log_level.lower())
    return Server(config)


async def main(which: str) -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    servers = []
    if which in ("rest", "both"):
        servers.append(_server("app.main:app", settings.api_port))
        logger.info("REST API on http://localhost:%d (try /api/health)", settings.api_port)
    if which in ("hello", "both"):
        servers.append(_server("app.hello:app", settings.hello_port))
        logger.info("Hello World server on http://localhost:%d", settings.hello_port)
    await asyncio.gather(*(s.serve() for s in servers))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the demo services")
    parser.add_argument("which", nargs="?", choices=["rest", "hello", "both"], default="both")
    args = parser.parse_args()
    try:
        asyncio.run(main(args.which))
    except (KeyboardInterrupt, SystemExit):
        pass
