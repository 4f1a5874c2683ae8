"""siteredirect CLI — run the service or inspect its redirect table.

Entry point registered as ``siteredirect`` in ``pyproject.toml``::

    [project.scripts]
    siteredirect = "siteredirect.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``siteredirect`` command."""
    parser = argparse.ArgumentParser(
        prog="siteredirect",
        description="Permanent redirects for SITE1..SITEN path prefixes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- siteredirect serve -----------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Start the redirect server")
    serve_parser.add_argument("--host", default=None, help="Bind host address (default: $HOST)")
    serve_parser.add_argument(
        "--port", type=int, default=None, help="Bind port number (default: $PORT or 3000)"
    )
    serve_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count (0=auto-detect, default: $WORKERS or 1)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on source changes (development only)",
    )

    # -- siteredirect routes ----------------------------------------------
    subparsers.add_parser("routes", help="List the configured redirects")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from siteredirect.cli._serve import run_serve

        run_serve(args)
    elif args.command == "routes":
        from siteredirect.cli._routes import run_routes

        run_routes(args)
