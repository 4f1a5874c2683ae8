"""Server launcher.

Starts a pounce ASGI server with the live RedirectApp object. pounce is
imported lazily so the app, router, and test client work without it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from siteredirect.app import RedirectApp


def run_server(
    app: RedirectApp,
    host: str = "0.0.0.0",
    port: int = 3000,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
    log_format: str = "text",
) -> None:
    """Run the redirect service under pounce.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but we already hold a live ``RedirectApp``. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: The RedirectApp instance.
        host: Bind address (default: 0.0.0.0 for all interfaces).
        port: Bind port (default: 3000).
        workers: Worker count (0 = auto-detect from CPU count).
        reload: Restart on source changes (development only).
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Log format ("json" or "text").
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
        log_level=log_level,
        log_format=log_format,
        # The app answers /health itself
        health_check_path=None,
    )
    server = Server(config, app)
    server.run()
