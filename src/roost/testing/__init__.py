"""Testing utilities for roost applications.

Provides an async test client that drives the ASGI app in-process::

    from roost.testing import TestClient

    async with TestClient(app) as client:
        response = await client.get("/")
        assert response.status == 200
"""

from roost.testing.client import TestClient

__all__ = ["TestClient"]
