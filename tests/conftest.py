import pytest
from fastapi.testclient import TestClient

from main import app, get_dispatcher
from settings import Settings, get_settings


class FakeDispatcher:
    """Records every send; raises `error` instead when it is set."""

    def __init__(self):
        self.calls = []
        self.error = None

    def send(self, from_address, to, subject, html):
        self.calls.append({"from_address": from_address, "to": to, "subject": subject, "html": html})
        if self.error is not None:
            raise self.error


@pytest.fixture
def test_settings():
    return Settings(
        email_user="school@example.com",
        email_pass="app-password",
        admin_email="admin@example.com",
    )


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def client(dispatcher, test_settings):
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
