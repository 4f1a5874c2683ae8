"""Views for each routing outcome.

Views return plain values (dicts, ``Redirect``, ``(value, status)``
tuples); the server pipeline negotiates them into responses.
"""

import logging
from typing import Any

from siteredirect.http.response import Redirect
from siteredirect.routing.route import RouteKind, RouteMatch
from siteredirect.table import RedirectTable

logger = logging.getLogger("siteredirect.router")

USAGE = "Visit /{site1|site2|...} to redirect"


def health(table: RedirectTable) -> dict[str, Any]:
    return {"status": "healthy", "sites": len(table)}


def discovery(table: RedirectTable) -> dict[str, Any]:
    """List every configured redirect in table order."""
    return {
        "message": "Redirect Service",
        "availableSites": [{"path": entry.path, "target": entry.target} for entry in table.entries],
        "usage": USAGE,
    }


def not_found(table: RedirectTable) -> tuple[dict[str, Any], int]:
    return {"error": "Route not found", "availableSites": list(table)}, 404


def redirect(match: RouteMatch, query_string: str = "") -> Redirect:
    """Build the permanent redirect for an exact or prefixed match.

    Exact matches send the client to the target as configured and drop
    any query string. Prefixed matches append the remainder and the
    query string verbatim, with no re-encoding.

    The returned URL is header text: the target's UTF-8 bytes followed by
    the request bytes, one latin-1 character per byte.
    """
    entry = match.entry
    if entry is None or not match.is_redirect:
        msg = f"Cannot redirect a {match.kind.value} match"
        raise ValueError(msg)

    url = entry.target.encode("utf-8", errors="surrogateescape").decode("latin-1")
    if match.kind is RouteKind.PREFIX:
        url = f"{url}{match.remainder}"
        if query_string:
            url = f"{url}?{query_string}"

    logger.info("Redirecting %s%s to %s", entry.key, match.remainder, _readable(url))
    return Redirect(url=url, status=301)


def _readable(header_value: str) -> str:
    return header_value.encode("latin-1").decode("utf-8", errors="replace")
