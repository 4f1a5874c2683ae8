"""Environment loading shared by ``siteredirect serve`` and ``siteredirect routes``."""

import logging
import sys

from siteredirect.app import RedirectApp, create_app
from siteredirect.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_app() -> RedirectApp:
    """Build the app from ``os.environ``, exiting with status 1 on bad config."""
    try:
        return create_app()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def configure_logging(level: str) -> None:
    """Install a root stream handler at *level* (no-op if one is already set)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
