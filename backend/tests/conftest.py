import pytest

from app import create_app

from .fakes import FakeTodoApi


@pytest.fixture()
def fake_api() -> FakeTodoApi:
    return FakeTodoApi()


@pytest.fixture()
def flask_app(fake_api):
    """App wired to the in-memory remote service; nothing leaves the process."""
    app = create_app({"TESTING": True, "SECRET_KEY": "test-secret"})
    app.extensions["todo_api"] = fake_api
    return app


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def logged_in(client):
    def _login(username="alice"):
        with client.session_transaction() as sess:
            sess["todoUsername"] = username
        return client
    return _login
