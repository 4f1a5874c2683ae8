"""Typed ASGI definitions.

Replaces the standard Scope = MutableMapping[str, Any] with a typed
dataclass for internal use. Users never see these.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """The parts of an ASGI HTTP scope that routing reads.

    Internal only -- users interact with Request, not this.
    """

    method: str
    path: str
    raw_path: bytes
    query_string: bytes

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        """Parse raw ASGI scope into typed object."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            raw_path=scope.get("raw_path") or b"",
            query_string=scope.get("query_string", b""),
        )

    @property
    def target_path(self) -> str:
        """The request path exactly as the client sent it.

        Prefers ``raw_path`` (still percent-encoded) and falls back to the
        decoded ``path`` for servers that do not provide it.
        """
        if self.raw_path:
            # Some servers leave the query on raw_path; it never belongs to the path.
            return self.raw_path.split(b"?", 1)[0].decode("latin-1")
        return self.path
