"""Command‑line entry point: ``python -m signup_server``.

Host, port and log level come from the environment (see
``signup_server.app.core.config``).  The default is port 3000.
"""

import asyncio
import logging

from uvicorn import Config, Server

from signup_server.app.core.config import settings
from signup_server.app.core.logging_config import setup_logging
from signup_server.app.main import app

logger = logging.getLogger(__name__)


class AnnouncingServer(Server):
    """Uvicorn server that logs its address once the socket is bound."""

    def __init__(self, config: Config, base_url: str) -> None:
        super().__init__(config)
        self.base_url = base_url

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # A failed bind exits inside ``startup``; ``started`` stays False
        # when lifespan startup fails.
        if self.started:
            logger.info("Server running at %s", self.base_url)


async def serve() -> None:
    """Start the application using Uvicorn and run until stopped."""
    level = setup_logging(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=level,
    )
    server = AnnouncingServer(config, settings.base_url)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
