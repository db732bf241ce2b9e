import pytest


@pytest.fixture()
def make_project(client, headers):
    def _make(title="Portfolio", description="A project", **extra):
        r = client.post("/projects", headers=headers, json={"title": title, "description": description, **extra})
        assert r.status_code == 201, r.data
        return r.get_json()
    return _make


def test_create_project(make_project):
    project = make_project(
        techStack="Flask, React",
        githubUrl="https://github.com/me/portfolio",
        imageUrl="https://img.example.com/p.png",
    )
    assert project["featured"] is False
    assert project["techStack"] == "Flask, React"
    assert project["githubUrl"] == "https://github.com/me/portfolio"
    assert project["projectUrl"] is None


def test_create_requires_auth_and_fields(client, headers):
    assert client.post("/projects", json={"title": "x", "description": "y"}).status_code == 401

    r = client.post("/projects", headers=headers, json={"title": "Only title"})
    assert r.status_code == 400
    assert "description" in r.get_json()["details"]


def test_featured_projects_come_first(client, make_project):
    make_project("Old featured", featured=True)
    make_project("Plain")
    make_project("New featured", featured=True)

    titles = [p["title"] for p in client.get("/projects").get_json()]
    assert titles == ["New featured", "Old featured", "Plain"]

    featured = client.get("/projects/featured").get_json()
    assert [p["title"] for p in featured] == ["New featured", "Old featured"]

    plain = client.get("/projects?featured=false").get_json()
    assert [p["title"] for p in plain] == ["Plain"]


def test_update_and_delete_project(client, headers, make_project):
    project = make_project()

    r = client.patch(f"/projects/{project['id']}", headers=headers, json={"featured": True, "title": "Renamed"})
    assert r.status_code == 200
    assert r.get_json()["featured"] is True
    assert r.get_json()["title"] == "Renamed"
    assert r.get_json()["description"] == "A project"

    r = client.patch(f"/projects/{project['id']}", headers=headers, json={"title": "   "})
    assert r.status_code == 400

    assert client.delete(f"/projects/{project['id']}", headers=headers).status_code == 200
    assert client.get(f"/projects/{project['id']}").status_code == 404
    assert client.patch(f"/projects/{project['id']}", headers=headers, json={}).status_code == 404


def test_project_stats(client, headers, make_project):
    make_project("A", featured=True)
    make_project("B")
    make_project("C")

    assert client.get("/projects/stats").status_code == 401
    assert client.get("/projects/stats", headers=headers).get_json() == {"total": 3, "featured": 1}
