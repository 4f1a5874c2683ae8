"""Immutable HTTP request.

Redirects never read a body, so the request is only what routing needs:
the method, the path, and the query, frozen at creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from siteredirect._internal.asgi import HTTPScope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the undecoded request target (without the query string)
    so sub-paths can be forwarded byte-for-byte. ``query_string`` is the
    raw query without the leading ``?``. Both are latin-1 text, one
    character per byte received.
    """

    method: str
    path: str
    query_string: str

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        parsed = HTTPScope.from_scope(scope)
        return cls(
            method=parsed.method.upper(),
            path=parsed.target_path,
            query_string=parsed.query_string.decode("latin-1"),
        )
