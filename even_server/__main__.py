"""Module entrypoint for the even server.

Starts the FastAPI app under uvicorn and serves until the process is stopped.
Settings come from EVEN_* environment variables (see even_server.config).
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from .config import ServerSettings
from .errors import ConfigError
from .server import create_app


log = logging.getLogger("even_server")


class EvenServer(uvicorn.Server):
    """uvicorn server that announces readiness once the socket is bound."""

    def __init__(self, config: uvicorn.Config, settings: ServerSettings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None) -> None:
        # A port that is already bound makes uvicorn log the error and exit
        # non-zero inside super().startup(); nothing below runs in that case.
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            log.info("Running %s server on %s:%d", self.settings.identity, self.settings.host, self.settings.port)


def main() -> None:
    try:
        settings = ServerSettings.from_env()
    except ConfigError as exc:
        logging.basicConfig(level=logging.ERROR)
        log.error("invalid configuration: %s", exc)
        sys.exit(2)

    logging.basicConfig(
        level="DEBUG" if settings.log_level == "trace" else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
    EvenServer(config, settings).run()


if __name__ == "__main__":
    main()
