import os
import tempfile

# Point the app at a throwaway sqlite file before app.py reads its config.
_db_fd, _db_path = tempfile.mkstemp(suffix=".sqlite")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from werkzeug.security import generate_password_hash

from app import app, db, seed_data, User


def pytest_sessionfinish(session, exitstatus):
    os.close(_db_fd)
    os.unlink(_db_path)


@pytest.fixture(scope="session")
def app_instance():
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def db_session(app_instance):
    with app_instance.app_context():
        db.session.remove()
        db.drop_all()
        seed_data()
    yield db
    with app_instance.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app_instance, db_session):
    return app_instance.test_client()


@pytest.fixture
def user_id(app_instance, db_session):
    with app_instance.app_context():
        user = User(
            username="player",
            email="player@example.com",
            password_hash=generate_password_hash("pw"),
        )
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture
def logged_in(client, user_id):
    client.post("/login", data={"username": "player", "password": "pw"})
    return client
