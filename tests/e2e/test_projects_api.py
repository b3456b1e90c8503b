"""End-to-end tests for project and comment endpoints.

These focus on the HTTP layer. Business rules are covered by unit tests.
"""

import pytest
from fastapi.testclient import TestClient

from projectlink.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.seed import save_projects, save_users
from tests.factories import auth_headers, make_project, make_user


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def author(client, container):
    user = make_user("Ada Author")
    save_users(client, container, user)
    return user


@pytest.fixture
def fan(client, container):
    user = make_user("Fred Fan")
    save_users(client, container, user)
    return user


def _create(client, author, **body):
    payload = {"title": "Campus Map", "description": "Indoor navigation", **body}
    response = client.post("/projects", json=payload, headers=auth_headers(author.id))
    assert response.status_code == 201
    return response.json()


class TestProjectCrud:
    def test_create_accepts_camel_case_and_answers_snake_case(self, client, author):
        project = _create(
            client,
            author,
            longDescription="Floor plans for every building",
            githubUrl="https://github.com/example/campus-map",
            tags=["Maps", "maps", "Mobile"],
            progress=100,
        )

        assert project["long_description"] == "Floor plans for every building"
        assert project["github_url"] == "https://github.com/example/campus-map"
        assert project["tags"] == ["maps", "mobile"]
        assert project["status"] == "completed"
        assert project["author"]["name"] == "Ada Author"
        assert project["views"] == 0
        assert project["like_count"] == 0

    def test_get_list_and_filter(self, client, author, fan):
        _create(client, author, title="Rover", tags=["robotics"])
        _create(client, fan, title="Herbarium", tags=["ml"])

        assert client.get(f"/projects?author={fan.id}").json()[0]["title"] == "Herbarium"
        assert [p["title"] for p in client.get("/projects?tags=robotics,art").json()] == [
            "Rover"
        ]
        assert [p["title"] for p in client.get("/projects?search=HERB").json()] == [
            "Herbarium"
        ]
        assert len(client.get("/projects").json()) == 2

    def test_invalid_author_filter(self, client):
        response = client.get("/projects?author=someone")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid author ID"}

    def test_update_by_author_only(self, client, author, fan):
        project = _create(client, author)

        forbidden = client.put(
            f"/projects/{project['id']}",
            json={"title": "Mine now"},
            headers=auth_headers(fan.id),
        )
        updated = client.put(
            f"/projects/{project['id']}",
            json={"title": "Campus Map 2", "demoUrl": "https://demo.example.edu"},
            headers=auth_headers(author.id),
        )

        assert forbidden.status_code == 403
        assert updated.status_code == 200
        assert updated.json()["title"] == "Campus Map 2"
        assert updated.json()["demo_url"] == "https://demo.example.edu"
        assert updated.json()["description"] == "Indoor navigation"

    def test_set_status(self, client, author):
        project = _create(client, author)

        response = client.patch(
            f"/projects/{project['id']}/status",
            json={"status": "on-hold"},
            headers=auth_headers(author.id),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "on-hold"

    def test_delete(self, client, author):
        project = _create(client, author)

        response = client.delete(
            f"/projects/{project['id']}", headers=auth_headers(author.id)
        )

        assert response.status_code == 200
        assert client.get(f"/projects/{project['id']}").status_code == 404


class TestEngagement:
    def test_like_twice_then_unlike(self, client, author, fan):
        project = _create(client, author)
        url = f"/projects/{project['id']}"

        first = client.post(f"{url}/like", headers=auth_headers(fan.id))
        second = client.post(f"{url}/like", headers=auth_headers(fan.id))
        unlike = client.post(f"{url}/unlike", headers=auth_headers(fan.id))

        assert first.json() == {"likes": 1}
        assert second.status_code == 400
        assert unlike.json() == {"likes": 0}

    def test_bookmark_toggles(self, client, author, fan):
        project = _create(client, author)
        url = f"/projects/{project['id']}/bookmark"

        assert client.post(url, headers=auth_headers(fan.id)).json() == {
            "bookmarked": True
        }
        assert client.post(url, headers=auth_headers(fan.id)).json() == {
            "bookmarked": False
        }

    def test_views_are_deduplicated_per_viewer(self, client, author, fan):
        project = _create(client, author)
        url = f"/projects/{project['id']}/view"

        anonymous = client.post(url)
        anonymous_again = client.post(url)
        signed_in = client.post(url, headers=auth_headers(fan.id))
        forwarded = client.post(url, headers={"X-Forwarded-For": "198.51.100.4, 10.0.0.1"})

        assert anonymous.json() == {"views": 1}
        assert anonymous_again.json() == {"views": 1}
        assert signed_in.json() == {"views": 2}
        assert forwarded.json() == {"views": 3}

    def test_collaborators(self, client, author, fan):
        project = _create(client, author)

        response = client.post(
            f"/projects/{project['id']}/collaborators",
            json={"userId": str(fan.id), "action": "add"},
            headers=auth_headers(author.id),
        )

        assert response.status_code == 200
        assert [c["name"] for c in response.json()["collaborators"]] == ["Fred Fan"]

    def test_cannot_add_self_as_collaborator(self, client, author):
        project = _create(client, author)

        response = client.post(
            f"/projects/{project['id']}/collaborators",
            json={"userId": str(author.id), "action": "add"},
            headers=auth_headers(author.id),
        )

        assert response.status_code == 400


class TestComments:
    def test_comment_flow(self, client, container, author, fan):
        project = make_project(author.id, title="Rover")
        save_projects(client, container, project)
        url = f"/projects/{project.id}/comments"

        created = client.post(
            url, json={"text": "<b>Love</b> it"}, headers=auth_headers(fan.id)
        )
        listed = client.get(url)

        assert created.status_code == 201
        assert created.json()["text"] == "Love it"
        assert created.json()["user"]["name"] == "Fred Fan"
        assert [c["id"] for c in listed.json()] == [created.json()["id"]]

        deleted = client.delete(
            f"{url}/{created.json()['id']}", headers=auth_headers(author.id)
        )
        assert deleted.status_code == 200
        assert client.get(url).json() == []

    def test_empty_comment_rejected(self, client, container, author):
        project = make_project(author.id)
        save_projects(client, container, project)

        response = client.post(
            f"/projects/{project.id}/comments",
            json={"text": "<script>x()</script>"},
            headers=auth_headers(author.id),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Comment text is required"}

    def test_stranger_cannot_delete(self, client, container, author, fan):
        project = make_project(author.id)
        save_projects(client, container, project)
        created = client.post(
            f"/projects/{project.id}/comments",
            json={"text": "hello"},
            headers=auth_headers(author.id),
        ).json()

        response = client.delete(
            f"/projects/{project.id}/comments/{created['id']}",
            headers=auth_headers(fan.id),
        )

        assert response.status_code == 403
