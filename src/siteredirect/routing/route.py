"""RouteKind enum and RouteMatch frozen dataclass."""

from dataclasses import dataclass
from enum import Enum

from siteredirect.table import RedirectEntry


class RouteKind(Enum):
    """Which of the fixed outcomes a path resolved to."""

    HEALTH = "health"
    DISCOVERY = "discovery"
    EXACT = "exact"  # /<key>
    PREFIX = "prefix"  # /<key>/<rest>


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``entry`` is set for ``EXACT`` and ``PREFIX`` matches. ``remainder`` is
    the path after the key, including its leading ``/``, and is only
    non-empty for ``PREFIX``.
    """

    kind: RouteKind
    entry: RedirectEntry | None = None
    remainder: str = ""

    @property
    def is_redirect(self) -> bool:
        return self.kind in (RouteKind.EXACT, RouteKind.PREFIX)
