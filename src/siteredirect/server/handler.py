"""ASGI handler — translates ASGI scope/messages to siteredirect types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through the router and views, and
sends the Response back through ASGI send().
"""

from typing import Any

from siteredirect._internal.asgi import Receive, Scope, Send
from siteredirect.errors import HTTPError
from siteredirect.http.request import Request
from siteredirect.routing import views
from siteredirect.routing.route import RouteKind, RouteMatch
from siteredirect.routing.router import RedirectRouter
from siteredirect.server.errors import handle_http_error, handle_internal_error
from siteredirect.server.negotiation import negotiate
from siteredirect.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001
    send: Send,
    *,
    router: RedirectRouter,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        matched = router.match(request.method, request.path)
        response = negotiate(_dispatch(matched, request, router))
    except HTTPError as exc:
        response = handle_http_error(exc, request, router.table)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, include_body=request.method != "HEAD")


def _dispatch(matched: RouteMatch, request: Request, router: RedirectRouter) -> Any:
    """Call the view for a matched route."""
    match matched.kind:
        case RouteKind.HEALTH:
            return views.health(router.table)
        case RouteKind.DISCOVERY:
            return views.discovery(router.table)
        case _:
            return views.redirect(matched, request.query_string)
