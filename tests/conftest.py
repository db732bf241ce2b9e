import pytest
from blogcms import create_app
from blogcms.extensions import db


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register_user(client, username="admin", email="admin@example.com", password="secret123"):
    return client.post("/auth/register", json={
        "username": username,
        "email": email,
        "password": password,
        "confirmPassword": password,
    })


def get_token(client, username="admin", password="secret123"):
    r = client.post("/auth/login", json={"username": username, "password": password})
    return r.get_json()["token"]


@pytest.fixture()
def headers(client):
    register_user(client)
    return {"Authorization": f"Bearer {get_token(client)}"}


@pytest.fixture()
def make_tag(client, headers):
    def _make(name, color=None):
        r = client.post("/tags", headers=headers, json={"name": name, "color": color})
        assert r.status_code == 201, r.data
        return r.get_json()
    return _make


@pytest.fixture()
def make_article(client, headers):
    def _make(title="Hello World", content="Body text", **extra):
        r = client.post("/articles", headers=headers, json={"title": title, "content": content, **extra})
        assert r.status_code == 201, r.data
        return r.get_json()
    return _make
