"""Test utilities for siteredirect applications.

Provides an in-process test client and redirect assertions::

    from siteredirect.testing import TestClient, assert_redirect
"""

from siteredirect.testing.assertions import assert_json, assert_not_found, assert_redirect
from siteredirect.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_json",
    "assert_not_found",
    "assert_redirect",
]
