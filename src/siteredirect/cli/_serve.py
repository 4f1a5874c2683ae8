"""``siteredirect serve`` — start the redirect server.

Builds the app from the environment, lets CLI flags override the
listener settings, and hands it to pounce.
"""

import argparse
from dataclasses import replace

from siteredirect.cli._load import configure_logging, load_app


def run_serve(args: argparse.Namespace) -> None:
    """Start the server with env config, overridden by ``--host``/``--port``/``--workers``."""
    app = load_app()

    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.reload:
        overrides["reload"] = True
    if overrides:
        app.config = replace(app.config, **overrides)

    configure_logging(app.config.log_level)
    app.run()
