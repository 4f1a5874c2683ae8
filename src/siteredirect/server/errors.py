"""Error handling pipeline for siteredirect requests.

Maps HTTPError exceptions and unexpected failures to JSON Response
objects. Only the 404 carries routing data (the configured keys).
"""

import logging

from siteredirect.errors import HTTPError, NotFound
from siteredirect.http.request import Request
from siteredirect.http.response import Response
from siteredirect.routing import views
from siteredirect.server.negotiation import json_response, negotiate
from siteredirect.table import RedirectTable

logger = logging.getLogger("siteredirect.server")


def handle_http_error(exc: HTTPError, request: Request, table: RedirectTable) -> Response:
    """Map an HTTPError to a JSON Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    if isinstance(exc, NotFound):
        return negotiate(views.not_found(table))
    return json_response({"error": exc.detail or f"Error {exc.status}"}, exc.status)


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)
    return json_response({"error": "Internal Server Error"}, 500)
