"""
Fixtures for API tests: the real app and providers over in-memory repositories.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from app.core.security import create_jwt_token
from app.di.base_container import BaseContainer
from app.di.providers import AuthProvider, PostProvider
from app.domain.repositories import PostRepository, UserRepository


@pytest.fixture
def container(mock_settings, user_repo, post_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(PostRepository, post_repo)
    AuthProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """TestClient over the full app; the MongoDB ping and index build are stubbed out."""
    from app.main import app

    with patch("app.main.ping_database", new=AsyncMock()), patch(
        "app.main.ensure_indexes", new=AsyncMock()
    ), patch("app.main.close_connection"), patch(
        "app.api.v1.auth_controller.get_container", return_value=container
    ), patch("app.api.v1.post_controller.get_container", return_value=container), patch(
        "app.api.v1.dependencies.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers(mock_settings):
    """Build an Authorization header for a given user id."""

    def build(user_id: str = "U", username: str = "alice") -> dict:
        token = create_jwt_token({"_id": user_id, "username": username})
        return {"Authorization": f"Bearer {token}"}

    return build
