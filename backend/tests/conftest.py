import pytest
from fastapi.testclient import TestClient

from foodtruck.config import Settings
from foodtruck.main import create_app
from helpers import login, register


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SESSION_PURGE_INTERVAL_SECONDS=0,
        LOCKS_DIR=str(tmp_path),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the context runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    s = app.state.db.session()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def owner(client):
    user = register(client, "Olga", "olga@foodtrucks.io", role="truckOwner", truckName="Taco Tank")
    return {"user": user, "token": login(client, "olga@foodtrucks.io")}


@pytest.fixture
def other_owner(client):
    user = register(client, "Omar", "omar@foodtrucks.io", role="truckOwner")
    return {"user": user, "token": login(client, "omar@foodtrucks.io")}


@pytest.fixture
def customer(client):
    user = register(client, "Cara", "cara@foodtrucks.io")
    return {"user": user, "token": login(client, "cara@foodtrucks.io")}


@pytest.fixture
def other_customer(client):
    user = register(client, "Cole", "cole@foodtrucks.io")
    return {"user": user, "token": login(client, "cole@foodtrucks.io")}
