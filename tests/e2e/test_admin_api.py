"""End-to-end tests for admin endpoints."""

import pytest
from fastapi.testclient import TestClient

from projectlink.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.seed import save_projects, save_users
from tests.factories import (
    auth_headers,
    follow_edge,
    like,
    make_comment,
    make_project,
    make_user,
)


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def admin(client, container):
    user = make_user("Root", is_admin=True)
    save_users(client, container, user)
    return user


@pytest.fixture
def member(client, container):
    user = make_user("Member")
    save_users(client, container, user)
    return user


class TestAdminAccess:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/admin/stats"),
            ("get", "/admin/users"),
            ("get", "/admin/projects"),
            ("post", "/admin/reconcile-follows"),
        ],
    )
    def test_members_are_forbidden(self, client, member, method, path):
        response = client.request(method, path, headers=auth_headers(member.id))

        assert response.status_code == 403
        assert "message" in response.json()

    def test_token_claim_alone_is_not_enough(self, client, member):
        """The stored flag decides, not the is_admin claim in the token."""
        response = client.get(
            "/admin/stats", headers=auth_headers(member.id, is_admin=True)
        )

        assert response.status_code == 403

    def test_requires_token(self, client):
        assert client.get("/admin/stats").status_code == 401


class TestAdminOperations:
    def test_stats(self, client, container, admin, member):
        save_projects(
            client,
            container,
            make_project(
                member.id,
                likes=[like(admin.id)],
                comments=[make_comment(admin.id), make_comment(member.id)],
            ),
        )

        stats = client.get("/admin/stats", headers=auth_headers(admin.id)).json()

        assert stats["total_users"] == 2
        assert stats["total_projects"] == 1
        assert stats["total_likes"] == 1
        assert stats["total_comments"] == 2

    def test_delete_user_cascades(self, client, container, admin, member):
        project = make_project(member.id)
        other = make_project(admin.id, likes=[like(member.id)])
        save_projects(client, container, project, other)

        response = client.delete(
            f"/admin/users/{member.id}", headers=auth_headers(admin.id)
        )

        assert response.status_code == 200
        assert client.get(f"/projects/{project.id}").status_code == 404
        assert client.get(f"/projects/{other.id}").json()["like_count"] == 0
        users = client.get("/admin/users", headers=auth_headers(admin.id)).json()
        assert [u["name"] for u in users] == ["Root"]

    def test_role_and_ban(self, client, admin, member):
        promoted = client.patch(
            f"/admin/users/{member.id}/role",
            json={"isAdmin": True},
            headers=auth_headers(admin.id),
        )
        banned = client.patch(
            f"/admin/users/{member.id}/ban",
            json={"banned": True},
            headers=auth_headers(admin.id),
        )

        assert promoted.json()["user"]["is_admin"] is True
        assert banned.json()["user"]["banned"] is True
        # Promotion takes effect immediately
        assert (
            client.get("/admin/stats", headers=auth_headers(member.id)).status_code
            == 200
        )

    def test_reconcile_follows(self, client, container, admin):
        lonely = make_user("Lonely", following=[follow_edge(admin.id)])
        save_users(client, container, lonely)

        first = client.post("/admin/reconcile-follows", headers=auth_headers(admin.id))
        second = client.post("/admin/reconcile-follows", headers=auth_headers(admin.id))

        assert first.json() == {"repaired": 1}
        assert second.json() == {"repaired": 0}
        profile = client.get(f"/users/{admin.id}", headers=auth_headers(admin.id))
        assert [f["name"] for f in profile.json()["followers"]] == ["Lonely"]
