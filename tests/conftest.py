"""
Shared fixtures: a server app on a temporary data directory, and a client wired to it in-process.
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.config import Settings
from backend.core import RecordStore
from frontend.api import LumaAPI
from frontend.app import LumaApp
from frontend.session import LocalStorage, SessionStore


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def settings(data_dir):
    return Settings(DATA_DIR=data_dir)


@pytest.fixture
def store(data_dir):
    store = RecordStore(data_dir)
    store.initialize()
    return store


@pytest.fixture
def server_app(settings, store):
    return create_app(settings, store)


@pytest.fixture
def client(server_app):
    return TestClient(server_app)


@pytest.fixture
async def api(server_app):
    transport = httpx.ASGITransport(app=server_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver/api") as http:
        yield LumaAPI(client=http)


@pytest.fixture
def session(tmp_path):
    return SessionStore(LocalStorage(tmp_path / "local_storage.json"))


@pytest.fixture
async def luma(api, session):
    app = LumaApp(api, session)
    await app.load()
    return app
