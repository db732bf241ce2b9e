import pytest
from blogcms.extensions import db
from blogcms.models import ArticleTag, Tag
from blogcms.services import tag_service
from blogcms.utils.errors import ConflictError


def test_create_and_get_tag(client, make_tag):
    tag = make_tag("Python", "#3776ab")
    assert tag["name"] == "Python"
    assert tag["color"] == "#3776ab"

    r = client.get(f"/tags/{tag['id']}")
    assert r.status_code == 200
    assert r.get_json()["articleCount"] == 0


def test_color_defaults_to_empty_string(make_tag):
    assert make_tag("Plain")["color"] == ""


def test_create_requires_auth(client):
    assert client.post("/tags", json={"name": "x"}).status_code == 401


def test_create_validation(client, headers):
    r = client.post("/tags", headers=headers, json={})
    assert r.status_code == 400
    assert "name" in r.get_json()["details"]

    r = client.post("/tags", headers=headers, json={"name": "x" * 51})
    assert r.status_code == 400


def test_duplicate_name_conflicts(client, headers, make_tag):
    make_tag("Python")
    r = client.post("/tags", headers=headers, json={"name": "Python"})
    assert r.status_code == 409
    assert r.get_json()["code"] == "CONFLICT"


def test_rename(client, headers, make_tag):
    python = make_tag("Python")
    make_tag("Flask")

    r = client.patch(f"/tags/{python['id']}", headers=headers, json={"name": "Flask"})
    assert r.status_code == 409

    r = client.patch(f"/tags/{python['id']}", headers=headers, json={"name": "Python"})
    assert r.status_code == 200

    r = client.patch(f"/tags/{python['id']}", headers=headers, json={"name": "Py3", "color": "red"})
    assert r.status_code == 200
    assert r.get_json()["name"] == "Py3"
    assert r.get_json()["color"] == "red"

    assert client.patch("/tags/999", headers=headers, json={"name": "z"}).status_code == 404


def test_list_includes_article_counts(client, make_tag, make_article):
    python = make_tag("Python")
    flask = make_tag("Flask")
    make_tag("Unused")
    make_article("One", tagIds=[python["id"], flask["id"]])
    make_article("Two", tagIds=[python["id"]])

    counts = {t["name"]: t["articleCount"] for t in client.get("/tags").get_json()}
    assert counts == {"Python": 2, "Flask": 1, "Unused": 0}


def test_popular_tags_most_used_first(client, make_tag, make_article):
    a = make_tag("A")
    b = make_tag("B")
    c = make_tag("C")
    make_article("One", tagIds=[b["id"], c["id"]])
    make_article("Two", tagIds=[c["id"]])
    make_article("Three", tagIds=[c["id"], b["id"]])

    popular = client.get("/tags/popular").get_json()
    assert [t["name"] for t in popular] == ["C", "B", "A"]
    assert [t["articleCount"] for t in popular] == [3, 2, 0]

    assert len(client.get("/tags/popular?limit=1").get_json()) == 1


def test_delete_tag_unlinks_articles(client, headers, make_tag, make_article, app):
    tag = make_tag("Gone")
    article = make_article(tagIds=[tag["id"]])

    r = client.delete(f"/tags/{tag['id']}", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["name"] == "Gone"

    assert ArticleTag.query.count() == 0
    assert client.get(f"/articles/{article['id']}").get_json()["tags"] == []
    assert client.get(f"/tags/{tag['id']}").status_code == 404
    assert client.delete(f"/tags/{tag['id']}", headers=headers).status_code == 404


def test_name_taken_between_check_and_commit_conflicts(app):
    # the pending row is invisible to the existence check until commit
    db.session.add(Tag(name="Race"))
    with db.session.no_autoflush:
        with pytest.raises(ConflictError):
            tag_service.create_tag({"name": "Race"})
    assert Tag.query.count() == 0


def test_rename_taken_between_check_and_commit_conflicts(app):
    tag = tag_service.create_tag({"name": "Mine"})
    db.session.add(Tag(name="Theirs"))
    with db.session.no_autoflush:
        with pytest.raises(ConflictError):
            tag_service.update_tag(tag["id"], {"name": "Theirs"})
    assert [t.name for t in Tag.query.all()] == ["Mine"]


def test_missing_color_is_empty_string_everywhere(client, headers, make_tag):
    make_tag("Plain")
    assert client.get("/tags").get_json()[0]["color"] == ""
    assert client.get("/stats/tags", headers=headers).get_json()[0]["color"] == ""
