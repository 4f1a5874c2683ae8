"""Assertion helpers for redirect responses.

Each assertion produces a clear error message on failure.
"""

from typing import Any

from siteredirect.http.response import Response


def assert_redirect(response: Response, location: str, *, status: int = 301) -> None:
    """Assert the response redirects to exactly *location*."""
    assert response.status == status, (
        f"Expected status {status}, got {response.status}"
    )
    actual = response.location
    assert actual is not None, "Response has no Location header"
    assert actual == location, (
        f"Expected Location {location!r}, got {actual!r}"
    )


def assert_json(response: Response, *, status: int = 200) -> Any:
    """Assert the response is JSON with *status* and return the parsed body."""
    assert response.status == status, (
        f"Expected status {status}, got {response.status}.\n"
        f"Response body: {response.text[:500]}"
    )
    assert response.content_type.startswith("application/json"), (
        f"Expected a JSON response, got content type {response.content_type!r}"
    )
    return response.json()


def assert_not_found(response: Response, available_sites: list[str]) -> None:
    """Assert the response is the 404 body listing *available_sites*."""
    data = assert_json(response, status=404)
    assert data == {"error": "Route not found", "availableSites": available_sites}, (
        f"Unexpected 404 body: {data!r}"
    )
