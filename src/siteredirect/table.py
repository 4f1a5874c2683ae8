"""Redirect table — numbered ``SITE<N>`` variables compiled into an immutable mapping.

The table is built once at startup and handed to the router. Nothing
adds, removes, or replaces entries afterwards.
"""

import os
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RedirectEntry:
    """One configured redirect: ``/<key>`` sends clients to ``target``.

    ``target`` is taken verbatim from configuration and never validated.
    """

    key: str
    target: str

    @property
    def path(self) -> str:
        """The request path that selects this entry."""
        return f"/{self.key}"


class RedirectTable(Mapping[str, RedirectEntry]):
    """Immutable mapping from route key (``site1``, ``site2``, ...) to entry.

    Iteration follows insertion order, which is the numeric order of the
    ``SITE<N>`` variables.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: tuple[RedirectEntry, ...] = ()) -> None:
        object.__setattr__(self, "_entries", {entry.key: entry for entry in entries})

    def __setattr__(self, name: str, value: object) -> None:
        msg = "RedirectTable is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> RedirectEntry:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        items = ", ".join(f"{e.key!r}: {e.target!r}" for e in self._entries.values())
        return f"RedirectTable({{{items}}})"

    @property
    def entries(self) -> tuple[RedirectEntry, ...]:
        """All entries in table order."""
        return tuple(self._entries.values())


def build_table(lookup: Callable[[str], str | None]) -> RedirectTable:
    """Scan ``SITE1``, ``SITE2``, ... through *lookup* until the first gap.

    An absent or empty variable ends the scan, so ``SITE3`` is ignored
    when ``SITE2`` is unset. Zero entries is a valid result.
    """
    entries: list[RedirectEntry] = []
    n = 1
    while value := lookup(f"SITE{n}"):
        entries.append(RedirectEntry(key=f"site{n}", target=value))
        n += 1
    return RedirectTable(tuple(entries))


def table_from_environ(environ: Mapping[str, str] | None = None) -> RedirectTable:
    """Build the table from *environ*, defaulting to ``os.environ``."""
    env = os.environ if environ is None else environ
    return build_table(env.get)
