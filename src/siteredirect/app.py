"""Redirect service application.

Built once at startup from an explicit table and config. Immutable for
the life of the process: there is nothing to register after creation.
"""

import logging
from collections.abc import Mapping

from siteredirect._internal.asgi import Receive, Scope, Send
from siteredirect.config import ServiceConfig
from siteredirect.routing.router import RedirectRouter
from siteredirect.server.handler import handle_request
from siteredirect.table import RedirectTable, table_from_environ

logger = logging.getLogger("siteredirect.app")


class RedirectApp:
    """The redirect service as an ASGI 3.0 application.

    Usage::

        table = build_table({"SITE1": "https://example.com"}.get)
        app = RedirectApp(table, ServiceConfig(port=10000))
        app.run()

    The table is shared read-only by every request, so concurrent
    workers need no coordination.
    """

    __slots__ = ("_router", "config")

    def __init__(self, table: RedirectTable, config: ServiceConfig | None = None) -> None:
        self.config: ServiceConfig = config or ServiceConfig()
        self._router = RedirectRouter(table)

    @property
    def table(self) -> RedirectTable:
        return self._router.table

    @property
    def router(self) -> RedirectRouter:
        return self._router

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from siteredirect.server.launcher import run_server

        run_server(
            self,
            host=host or self.config.host,
            port=port or self.config.port,
            workers=self.config.workers,
            reload=self.config.reload,
            log_level=self.config.log_level,
            log_format=self.config.log_format,
        )

    def log_startup(self) -> None:
        """Log the bound port and the resolved redirect table."""
        logger.info("Redirect service running on port %d", self.config.port)
        logger.info("Available redirects:")
        for entry in self.table.entries:
            logger.info("  %s -> %s", entry.path, entry.target)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline. Other scope types are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        await handle_request(scope, receive, send, router=self._router)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self.log_startup()
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return


def create_app(environ: Mapping[str, str] | None = None) -> RedirectApp:
    """Build the app from environment variables.

    Reads ``PORT``/``HOST``/``WORKERS``/``LOG_*`` into the config and
    ``SITE1``, ``SITE2``, ... into the table, once.

    Raises:
        ConfigurationError: If a listener setting is malformed.
    """
    config = ServiceConfig.from_env(environ)
    table = table_from_environ(environ)
    return RedirectApp(table, config)
