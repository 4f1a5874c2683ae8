"""siteredirect exception hierarchy.

Shared across the router, the request pipeline, and the CLI so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class SiteRedirectError(Exception):
    """Base for all siteredirect-specific errors."""


class ConfigurationError(SiteRedirectError):
    """Raised when service configuration is invalid.

    Only listener settings (``PORT``, ``WORKERS``, logging) can be invalid.
    Gaps in the ``SITE<N>`` numbering are never errors.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(SiteRedirectError):
    """An error that maps directly to an HTTP status code.

    Raised by the router. The ASGI handler catches these and turns them
    into JSON error responses.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no redirect, health, or discovery route matched the request."""

    def __init__(self, detail: str = "Route not found") -> None:
        super().__init__(status=404, detail=detail)
