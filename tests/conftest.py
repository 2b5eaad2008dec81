import pytest
from fastapi.testclient import TestClient

from ping_server.main import app, create_app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def crashing_client():
    crashing_app = create_app()

    @crashing_app.get("/boom")
    async def boom():
        raise RuntimeError("handler blew up")

    with TestClient(crashing_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def anyio_backend():
    return "asyncio"
