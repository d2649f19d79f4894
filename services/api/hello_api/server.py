"""uvicorn runner.

Differences from a plain ``uvicorn.run``:
- every log handler writes to standard output;
- ``Server is running on port <port>`` is logged once the socket is bound.

A bind failure is left to uvicorn, which logs it and exits with status 1.
"""

import copy
import logging
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from hello_api.settings import get_settings

logger = logging.getLogger("uvicorn.error")


def build_log_config() -> dict[str, Any]:
    """uvicorn's default logging config with all handlers on stdout."""
    config = copy.deepcopy(LOGGING_CONFIG)
    for handler in config["handlers"].values():
        handler["stream"] = "ext://sys.stdout"
    return config


class BootstrapServer(uvicorn.Server):
    """uvicorn server that announces the bound port."""

    async def startup(self, sockets: list[Any] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server is running on port %s", self.config.port)


def run() -> None:
    """Serve the application on the configured host and port."""
    settings = get_settings()
    config = uvicorn.Config(
        "hello_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=build_log_config(),
    )
    BootstrapServer(config).run()
