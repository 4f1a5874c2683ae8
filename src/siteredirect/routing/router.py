"""Redirect router — matches request paths against the redirect table.

Precedence is fixed: ``/health``, ``/``, exact ``/<key>``, then prefixed
``/<key>/<rest>``. Anything else, including any method other than GET
or HEAD, is a 404.
"""

from siteredirect.errors import NotFound
from siteredirect.routing.route import RouteKind, RouteMatch
from siteredirect.table import RedirectTable

ROUTED_METHODS = frozenset({"GET", "HEAD"})

HEALTH_PATH = "/health"
DISCOVERY_PATH = "/"


class RedirectRouter:
    """Read-only router over a ``RedirectTable``.

    Usage::

        router = RedirectRouter(table_from_environ())
        match = router.match("GET", "/site1/docs")
        assert match.kind is RouteKind.PREFIX
        assert match.remainder == "/docs"

    Keys are whole path segments, so ``/site10`` never matches ``site1``.
    """

    __slots__ = ("_table",)

    def __init__(self, table: RedirectTable) -> None:
        self._table = table

    @property
    def table(self) -> RedirectTable:
        return self._table

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request method and path.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if the method is not GET/HEAD or no route
        matches the path.
        """
        result = self._match_path(path) if method in ROUTED_METHODS else None
        if result is None:
            raise NotFound(f"No route matches {method} {path!r}")
        return result

    def _match_path(self, path: str) -> RouteMatch | None:
        if path == HEALTH_PATH:
            return RouteMatch(RouteKind.HEALTH)
        if path == DISCOVERY_PATH:
            return RouteMatch(RouteKind.DISCOVERY)
        if not path.startswith("/"):
            return None

        key, sep, rest = path[1:].partition("/")
        entry = self._table.get(key)
        if entry is None:
            return None
        if not sep:
            return RouteMatch(RouteKind.EXACT, entry)
        return RouteMatch(RouteKind.PREFIX, entry, remainder=f"/{rest}")
