"""Content negotiation — maps view return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json as json_module
from typing import Any

from siteredirect.errors import ConfigurationError
from siteredirect.http.response import Redirect, Response

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def json_response(value: Any, status: int = 200) -> Response:
    """Serialize *value* as compact JSON."""
    return Response(
        body=json_module.dumps(value, separators=(",", ":"), default=str),
        status=status,
        content_type=JSON_CONTENT_TYPE,
    )


def negotiate(value: Any) -> Response:
    """Convert a view's return value to a Response.

    Dispatch order:

    1. ``Response``         -> pass through
    2. ``Redirect``         -> empty body with Location header
    3. ``dict`` / ``list``  -> 200, application/json
    4. ``(value, int)``     -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case Redirect(url=url, status=status):
            return Response(status=status, headers=(("Location", url),))
        case dict() | list():
            return json_response(value)
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"View returned {type(value).__name__}, expected "
                f"Response, Redirect, dict, list, or a (value, status) tuple."
            )
            raise ConfigurationError(msg)
