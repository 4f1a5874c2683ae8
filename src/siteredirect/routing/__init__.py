"""Routing — one generic lookup against the redirect table.

The table is compiled at startup; every request is matched against it
without per-key route registration.
"""

from siteredirect.routing.route import RouteKind, RouteMatch
from siteredirect.routing.router import ROUTED_METHODS, RedirectRouter

__all__ = ["ROUTED_METHODS", "RedirectRouter", "RouteKind", "RouteMatch"]
