import datetime as dt
import jwt
import pytest
from conftest import register_user, get_token
from blogcms.models.user import User
from blogcms.extensions import db
from blogcms.services import auth_service
from blogcms.utils.errors import ConflictError


def test_register_returns_user_without_password(client):
    r = register_user(client)
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["username"] == "admin"
    assert data["email"] == "admin@example.com"
    assert "password" not in data


def test_register_stores_hash_not_plain_password(client, app):
    register_user(client, password="plaintext1")
    user = User.query.filter_by(username="admin").first()
    assert user.password != "plaintext1"


def test_register_password_mismatch(client):
    r = client.post("/auth/register", json={
        "username": "admin",
        "email": "admin@example.com",
        "password": "secret123",
        "confirmPassword": "other123",
    })
    assert r.status_code == 400
    assert r.get_json()["code"] == "VALIDATION_ERROR"


def test_register_invalid_payload(client):
    r = client.post("/auth/register", json={"username": "ab", "email": "nope", "password": "123"})
    assert r.status_code == 400
    details = r.get_json()["details"]
    assert "email" in details
    assert "password" in details
    assert "confirmPassword" in details


def test_register_duplicate_username_and_email(client):
    register_user(client)

    r = register_user(client, email="other@example.com")
    assert r.status_code == 409
    assert "Username" in r.get_json()["message"]

    r = register_user(client, username="someone")
    assert r.status_code == 409
    assert "Email" in r.get_json()["message"]


def test_login_success(client):
    register_user(client)
    r = client.post("/auth/login", json={"username": "admin", "password": "secret123"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["token"]
    assert data["user"]["username"] == "admin"
    assert "password" not in data["user"]


def test_login_failures_share_message(client):
    register_user(client)
    wrong_pw = client.post("/auth/login", json={"username": "admin", "password": "wrong-pass"})
    no_user = client.post("/auth/login", json={"username": "ghost", "password": "secret123"})
    assert wrong_pw.status_code == 401
    assert no_user.status_code == 401
    assert wrong_pw.get_json()["message"] == no_user.get_json()["message"]


def test_login_requires_fields(client):
    r = client.post("/auth/login", json={})
    assert r.status_code == 400


def test_validate_user(client, app):
    register_user(client)
    assert auth_service.validate_user("admin", "secret123")["username"] == "admin"
    assert "password" not in auth_service.validate_user("admin", "secret123")
    assert auth_service.validate_user("admin", "bad") is None
    assert auth_service.validate_user("ghost", "secret123") is None


def test_token_carries_subject_and_username(client, app):
    register_user(client)
    token = get_token(client)
    payload = jwt.decode(token, app.config["SECRET_KEY"], algorithms=["HS256"])
    user = User.query.filter_by(username="admin").first()
    assert payload["sub"] == str(user.id)
    assert payload["username"] == "admin"
    assert payload["exp"] > payload["iat"]


def test_logout(client):
    r = client.post("/auth/logout")
    assert r.status_code == 200
    assert r.get_json()["message"]


def test_guard_rejects_missing_and_invalid_tokens(client):
    body = {"name": "Python"}
    assert client.post("/tags", json=body).status_code == 401
    assert client.post("/tags", json=body, headers={"Authorization": "Token abc"}).status_code == 401
    r = client.post("/tags", json=body, headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.get_json()["code"] == "UNAUTHORIZED"


def test_guard_rejects_expired_and_foreign_tokens(client, app):
    past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(hours=2)
    expired = jwt.encode(
        {"sub": "1", "username": "admin", "iat": int(past.timestamp()), "exp": int(past.timestamp()) + 60},
        app.config["SECRET_KEY"],
        algorithm="HS256",
    )
    r = client.get("/stats/overview", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401
    assert r.get_json()["message"] == "Token expired"

    foreign = jwt.encode({"sub": "1", "username": "admin"}, "another-secret", algorithm="HS256")
    r = client.get("/stats/overview", headers={"Authorization": f"Bearer {foreign}"})
    assert r.status_code == 401


def test_guard_accepts_valid_token(client, headers):
    assert client.get("/stats/overview", headers=headers).status_code == 200


def test_username_length_checked_after_trimming(client, app):
    r = register_user(client, username="  ab")
    assert r.status_code == 400
    assert "username" in r.get_json()["details"]
    assert User.query.count() == 0

    r = register_user(client, username="  alice ")
    assert r.status_code == 201
    assert r.get_json()["username"] == "alice"


def test_registration_race_reports_conflict(app):
    # pending row stands in for a concurrent registration
    db.session.add(User(username="admin", email="other@example.com", password="x"))
    with db.session.no_autoflush:
        with pytest.raises(ConflictError):
            auth_service.register("admin", "admin@example.com", "secret123", "secret123")
    assert User.query.count() == 0
