import pytest
from exercisedb.app import env_loader  # noqa: F401


class AccidentalNetworkAccessError(Exception):
    """Raised when a unit test accidentally tries to reach the real CDN."""

    pass


def _raise_network_access_error(*args, **kwargs):
    """Raise an error when outbound HTTP is attempted in unit tests."""
    raise AccidentalNetworkAccessError(
        "Unit test attempted a real outbound HTTP request! "
        "Either patch httpx.AsyncClient, use a fake tier, "
        "or mark this test as @pytest.mark.integration if it needs the CDN."
    )


@pytest.fixture(autouse=True)
def prevent_network_access_in_unit_tests(request, monkeypatch):
    """Prevent accidental outbound HTTP in unit tests.

    Applies to every test not marked `integration`. FastAPI's TestClient talks
    to the app in-process and is unaffected.
    """
    markers = [marker.name for marker in request.node.iter_markers()]
    if "integration" in markers:
        yield
        return

    monkeypatch.setattr("httpx.AsyncClient.send", _raise_network_access_error)
    yield
