import pytest

from bighits import create_app
from bighits.config import TestConfig
from bighits.extensions import db
from bighits.models import User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def sign_in(client, email, password):
    return client.post('/auth/signin', data={'email': email, 'password': password})


@pytest.fixture()
def admin_client(app):
    client = app.test_client()
    r = sign_in(client, TestConfig.ADMIN_EMAIL, TestConfig.ADMIN_PASSWORD)
    assert r.status_code == 302
    return client


@pytest.fixture()
def user_client(app):
    with app.app_context():
        user = User(name='Regular User', email='user@example.com', role='user')
        user.set_password('userpass')
        db.session.add(user)
        db.session.commit()

    client = app.test_client()
    r = sign_in(client, 'user@example.com', 'userpass')
    assert r.status_code == 302
    return client
