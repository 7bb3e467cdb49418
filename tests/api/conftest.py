"""API test fixtures — FastAPI app over an in-process httpx client.

Invariants:
    - No server is bound; requests go through ASGITransport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from gcd_app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
