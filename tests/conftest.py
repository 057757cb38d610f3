import pytest
from fastapi.testclient import TestClient

from app.db.models import City, PointOfInterest
from app.db.seed import build_seeded_store
from app.db.store import CityStore
from app.main import create_app


class RecordingMailService:
    def __init__(self):
        self.sent: list[tuple[str, str]] = []

    def send(self, subject: str, message: str) -> None:
        self.sent.append((subject, message))


@pytest.fixture
def store():
    return build_seeded_store()


@pytest.fixture
def small_store():
    # Город 1 -> {1, 2}, город 2 -> {3}
    return CityStore([
        City(id=1, name="Alpha", description="First", points_of_interest=[
            PointOfInterest(id=1, name="A1", description="a1 desc"),
            PointOfInterest(id=2, name="A2", description="a2 desc"),
        ]),
        City(id=2, name="Beta", description="Second", points_of_interest=[
            PointOfInterest(id=3, name="B1", description="b1 desc"),
        ]),
    ])


@pytest.fixture
def mail():
    return RecordingMailService()


@pytest.fixture
def app(store, mail):
    return create_app(store=store, mail_service=mail)


@pytest.fixture
def client(app):
    return TestClient(app)
