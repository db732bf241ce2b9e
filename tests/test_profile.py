from blogcms.models import Profile, PROFILE_ID


def test_first_read_creates_default_profile(client, app):
    assert Profile.query.count() == 0

    r = client.get("/profile")
    assert r.status_code == 200
    data = r.get_json()
    assert data["id"] == PROFILE_ID
    assert data["title"] == "My Blog"
    assert data["bio"] == "Welcome to my blog"
    assert data["email"] == ""

    client.get("/profile")
    assert Profile.query.count() == 1


def test_create_profile_conflicts_when_present(client, headers):
    r = client.post("/profile", headers=headers, json={"title": "Mine", "github": "me"})
    assert r.status_code == 201
    assert r.get_json()["github"] == "me"

    r = client.post("/profile", headers=headers, json={"title": "Again"})
    assert r.status_code == 409


def test_patch_creates_then_updates(client, headers, app):
    r = client.patch("/profile", headers=headers, json={"title": "Fresh", "location": "Berlin"})
    assert r.status_code == 200
    assert r.get_json()["title"] == "Fresh"

    r = client.patch("/profile", headers=headers, json={"bio": "Hi"})
    data = r.get_json()
    assert data["bio"] == "Hi"
    assert data["title"] == "Fresh"
    assert data["location"] == "Berlin"
    assert Profile.query.count() == 1


def test_patch_requires_auth_and_valid_email(client, headers):
    assert client.patch("/profile", json={"title": "x"}).status_code == 401

    r = client.patch("/profile", headers=headers, json={"email": "broken"})
    assert r.status_code == 400

    r = client.patch("/profile", headers=headers, json={"email": ""})
    assert r.status_code == 200
    assert r.get_json()["email"] == ""


def test_list_update_and_delete_by_id(client, headers):
    assert client.get("/profile/all", headers=headers).get_json() == []

    client.get("/profile")
    profiles = client.get("/profile/all", headers=headers).get_json()
    assert [p["id"] for p in profiles] == [PROFILE_ID]

    r = client.patch(f"/profile/{PROFILE_ID}", headers=headers, json={"twitter": "@me"})
    assert r.get_json()["twitter"] == "@me"
    assert client.patch("/profile/2", headers=headers, json={"twitter": "@x"}).status_code == 404
    assert client.delete("/profile/2", headers=headers).status_code == 404

    assert client.delete(f"/profile/{PROFILE_ID}", headers=headers).status_code == 200
    assert client.get("/profile/all", headers=headers).get_json() == []

    # deleted profile comes back with defaults on next read
    assert client.get("/profile").get_json()["title"] == "My Blog"
