"""``siteredirect routes`` — list configured redirects.

Reads ``SITE1``, ``SITE2``, ... exactly as the server would and prints
a table of PATH and TARGET.
"""

import argparse

from siteredirect.cli._load import load_app


def run_routes(args: argparse.Namespace) -> None:  # noqa: ARG001
    """Print the resolved redirect table."""
    app = load_app()
    entries = app.table.entries
    if not entries:
        print("No redirects configured.")
        return

    max_path = max(4, *(len(e.path) for e in entries))  # "PATH" header

    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "TARGET"))
    sep_len = max_path + 2 + max(len(e.target) for e in entries)
    print("-" * min(sep_len, 80))
    for entry in entries:
        print(fmt.format(entry.path, entry.target))
