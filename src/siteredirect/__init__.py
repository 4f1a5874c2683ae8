"""siteredirect — permanent redirects for numbered site prefixes.

Maps ``/site1``, ``/site2``, ... to target URLs configured through
``SITE1``, ``SITE2``, ... environment variables. Sub-paths and query
strings carry over to the target.

Basic usage::

    from siteredirect import create_app

    app = create_app()  # reads SITE1..SITEN, PORT, ...
    app.run()

``create_app`` is also an ASGI app factory for any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Redirect",
    "RedirectApp",
    "RedirectEntry",
    "RedirectRouter",
    "RedirectTable",
    "Request",
    "Response",
    "ServiceConfig",
    "SiteRedirectError",
    "build_table",
    "create_app",
    "table_from_environ",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import siteredirect`` fast while providing a clean top-level API.
    """
    if name in ("RedirectApp", "create_app"):
        from siteredirect import app as _app

        return getattr(_app, name)

    if name == "ServiceConfig":
        from siteredirect.config import ServiceConfig

        return ServiceConfig

    if name == "Request":
        from siteredirect.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from siteredirect.http import response as _resp

        return getattr(_resp, name)

    if name == "RedirectRouter":
        from siteredirect.routing.router import RedirectRouter

        return RedirectRouter

    if name in ("RedirectEntry", "RedirectTable", "build_table", "table_from_environ"):
        from siteredirect import table as _table

        return getattr(_table, name)

    if name in (
        "SiteRedirectError",
        "ConfigurationError",
        "HTTPError",
        "NotFound",
    ):
        from siteredirect import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
