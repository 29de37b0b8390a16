import pytest

from app import create_app
from app.extensions import db
from app.models import ROLE_ADMIN, ROLE_VIEWER
from app.services import create_player, create_user
from config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


ADMIN_EMAIL = 'admin@example.com'
VIEWER_EMAIL = 'viewer@example.com'
PASSWORD = 'secret123'


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_user(app):
    return create_user(ADMIN_EMAIL, 'admin', PASSWORD, ROLE_ADMIN)


@pytest.fixture()
def viewer_user(app):
    return create_user(VIEWER_EMAIL, 'viewer', PASSWORD, ROLE_VIEWER)


def _login(client, email):
    resp = client.post('/login', data={'email': email, 'password': PASSWORD})
    assert resp.status_code == 302
    return client


@pytest.fixture()
def admin_client(client, admin_user):
    return _login(client, ADMIN_EMAIL)


@pytest.fixture()
def viewer_client(client, viewer_user):
    return _login(client, VIEWER_EMAIL)


@pytest.fixture()
def make_player(app):
    def _make(first_name='Joe', last_name='Smith', **extra):
        data = {'first_name': first_name, 'last_name': last_name}
        data.update(extra)
        return create_player(data)
    return _make
