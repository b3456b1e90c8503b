"""Helpers for putting data into a running test app's repositories."""

from dishka import AsyncContainer
from fastapi.testclient import TestClient

from projectlink.domain.model import Project, User
from projectlink.domain.repository import ProjectRepository, UserRepository


def save_users(client: TestClient, container: AsyncContainer, *users: User) -> None:
    """Store users through the app's event loop."""
    repo = client.portal.call(container.get, UserRepository)
    for user in users:
        client.portal.call(repo.save, user)


def save_projects(
    client: TestClient, container: AsyncContainer, *projects: Project
) -> None:
    """Store projects through the app's event loop."""
    repo = client.portal.call(container.get, ProjectRepository)
    for project in projects:
        client.portal.call(repo.save, project)
