import pytest
from blogcms.models import Comment


@pytest.fixture()
def article(make_article):
    return make_article("Commented")


@pytest.fixture()
def post_comment(client, article):
    def _post(content="Nice post", author="Ann", email="ann@example.com", article_id=None, **extra):
        return client.post("/comments", headers={"User-Agent": "pytest-agent"}, json={
            "articleId": article_id if article_id is not None else article["id"],
            "content": content,
            "author": author,
            "email": email,
            **extra,
        })
    return _post


def test_create_comment_is_pending(post_comment, article):
    r = post_comment(website="https://ann.dev")
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["status"] == "PENDING"
    assert data["articleId"] == article["id"]
    assert data["article"]["slug"] == article["slug"]
    assert data["website"] == "https://ann.dev"
    assert data["userAgent"] == "pytest-agent"
    assert data["ip"]


def test_create_comment_for_missing_article(post_comment, app):
    r = post_comment(article_id=9999)
    assert r.status_code == 404
    assert r.get_json()["message"] == "Article not found"
    assert Comment.query.count() == 0


def test_create_comment_validation(client, post_comment):
    r = post_comment(email="not-an-email")
    assert r.status_code == 400
    assert "email" in r.get_json()["details"]

    r = client.post("/comments", json={"content": "x"})
    assert r.status_code == 400
    details = r.get_json()["details"]
    assert {"articleId", "author", "email"} <= set(details)


def test_approve_and_reject(client, headers, post_comment):
    comment = post_comment().get_json()

    assert client.patch(f"/comments/{comment['id']}/approve").status_code == 401

    r = client.patch(f"/comments/{comment['id']}/approve", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["status"] == "APPROVED"

    # approving twice is harmless
    r = client.patch(f"/comments/{comment['id']}/approve", headers=headers)
    assert r.get_json()["status"] == "APPROVED"

    r = client.patch(f"/comments/{comment['id']}/reject", headers=headers)
    assert r.get_json()["status"] == "REJECTED"

    assert client.patch("/comments/999/approve", headers=headers).status_code == 404


def test_update_comment(client, headers, post_comment):
    comment = post_comment().get_json()

    r = client.patch(f"/comments/{comment['id']}", headers=headers, json={"content": "Edited", "status": "APPROVED"})
    assert r.status_code == 200
    assert r.get_json()["content"] == "Edited"
    assert r.get_json()["status"] == "APPROVED"

    r = client.patch(f"/comments/{comment['id']}", headers=headers, json={"status": "SPAM"})
    assert r.status_code == 400


def test_list_filters(client, headers, post_comment, make_article):
    other = make_article("Other")
    first = post_comment(content="hello world").get_json()
    post_comment(content="second one", author="Bob", email="bob@example.com")
    post_comment(content="elsewhere", article_id=other["id"])
    client.patch(f"/comments/{first['id']}/approve", headers=headers)

    body = client.get("/comments").get_json()
    assert body["pagination"]["total"] == 3
    assert body["data"][0]["content"] == "elsewhere"

    by_article = client.get(f"/comments?articleId={other['id']}").get_json()
    assert [c["content"] for c in by_article["data"]] == ["elsewhere"]

    by_keyword = client.get("/comments?keyword=bob").get_json()
    assert [c["author"] for c in by_keyword["data"]] == ["Bob"]

    approved = client.get("/comments/approved").get_json()
    assert [c["id"] for c in approved["data"]] == [first["id"]]

    assert client.get("/comments/pending").status_code == 401
    pending = client.get("/comments/pending", headers=headers).get_json()
    assert pending["pagination"]["total"] == 2
    assert all(c["status"] == "PENDING" for c in pending["data"])

    assert client.get("/comments?status=BOGUS").status_code == 400


def test_comment_stats(client, headers, post_comment, make_article):
    other = make_article("Other")
    a = post_comment().get_json()
    b = post_comment().get_json()
    post_comment()
    post_comment(article_id=other["id"])
    client.patch(f"/comments/{a['id']}/approve", headers=headers)
    client.patch(f"/comments/{b['id']}/reject", headers=headers)

    assert client.get("/comments/stats").status_code == 401

    stats = client.get("/comments/stats", headers=headers).get_json()
    assert stats == {"total": 4, "pending": 2, "approved": 1, "rejected": 1}

    stats = client.get(f"/comments/stats?articleId={other['id']}", headers=headers).get_json()
    assert stats == {"total": 1, "pending": 1, "approved": 0, "rejected": 0}


def test_get_and_delete_comment(client, headers, post_comment):
    comment = post_comment().get_json()
    assert client.get(f"/comments/{comment['id']}").get_json()["content"] == "Nice post"

    assert client.delete(f"/comments/{comment['id']}").status_code == 401
    r = client.delete(f"/comments/{comment['id']}", headers=headers)
    assert r.status_code == 200
    assert client.get(f"/comments/{comment['id']}").status_code == 404
    assert client.delete(f"/comments/{comment['id']}", headers=headers).status_code == 404


@pytest.mark.parametrize("field", ["author", "content"])
def test_blank_author_or_content_rejected(post_comment, field, app):
    r = post_comment(**{field: "   "})
    assert r.status_code == 400
    assert r.get_json()["code"] == "VALIDATION_ERROR"
    assert Comment.query.count() == 0


def test_update_to_blank_content_rejected(client, headers, post_comment):
    comment = post_comment().get_json()
    r = client.patch(f"/comments/{comment['id']}", headers=headers, json={"content": "  "})
    assert r.status_code == 400
    assert client.get(f"/comments/{comment['id']}").get_json()["content"] == "Nice post"


def test_keyword_wildcards_match_literally(client, post_comment):
    post_comment(content="100% agree")
    post_comment(content="plain text")

    found = client.get("/comments?keyword=%25").get_json()
    assert [c["content"] for c in found["data"]] == ["100% agree"]
    assert client.get("/comments?keyword=_").get_json()["data"] == []
