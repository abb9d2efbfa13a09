"""
Shared pytest fixtures for social-backend tests.
"""
import os
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from app.domain.models import Comment, LikeSet, Post, User, WriteResult
from app.domain.repositories import PostRepository, UserRepository


TEST_JWT_SECRET = "test_jwt_secret_key_for_unit_tests_only_0123456789"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_social_db",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.port = 4549
    mock.cors_origins = ["http://localhost:5173", "http://localhost:5174"]
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = TEST_JWT_SECRET
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4
    mock.comment_requires_auth = False
    mock.delete_requires_auth = False
    mock.post_owner_field = ""

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ), patch("app.api.v1.dependencies.get_settings", return_value=mock), patch(
        "app.di.providers.post_provider.get_settings", return_value=mock
    ), patch("app.main.get_settings", return_value=mock):
        yield mock


class InMemoryUserRepository(UserRepository):
    """UserRepository over a list, with the same first-match semantics as the store"""

    def __init__(self) -> None:
        self.users: List[User] = []

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in self.users:
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        user.id = str(ObjectId())
        self.users.append(user)
        return user

    async def update_password_by_email(self, email: str, hashed_password: str) -> int:
        for user in self.users:
            if user.email == email:
                if user.hashed_password == hashed_password:
                    return 0
                user.hashed_password = hashed_password
                return 1
        return 0


class InMemoryPostRepository(PostRepository):
    """
    PostRepository over plain dicts keyed by id, in insertion order.

    Likes and comments go through Post.toggle_like and Post.add_comment.
    """

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}

    async def list_all(self) -> List[Dict[str, Any]]:
        return [dict(document) for document in self.documents.values()]

    async def insert(self, document: Dict[str, Any]) -> Optional[str]:
        post_id = str(ObjectId())
        self.documents[post_id] = {"_id": post_id, **document}
        return post_id

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        document = self.documents.get(post_id)
        if document is None:
            return None
        known = {"_id", "content", "likes", "likedBy", "liked", "comments"}
        return Post(
            id=post_id,
            content=document.get("content"),
            likes=document.get("likes", 0),
            liked_by=LikeSet(document.get("likedBy") or []),
            comments=[
                Comment(id=c["_id"], info={k: v for k, v in c.items() if k != "_id"})
                for c in document.get("comments") or []
            ],
            liked=document.get("liked"),
            extra={k: v for k, v in document.items() if k not in known},
        )

    async def toggle_like(self, post_id: str, user_id: str) -> WriteResult:
        post = await self.find_by_id(post_id)
        if post is None:
            return WriteResult()
        post.toggle_like(user_id)
        document = self.documents[post_id]
        document["liked"] = post.liked
        document["likedBy"] = post.liked_by.to_list()
        document["likes"] = post.likes
        return WriteResult(matched=1, modified=1)

    async def push_comment(self, post_id: str, comment: Comment) -> int:
        post = await self.find_by_id(post_id)
        if post is None:
            return 0
        comment.id = str(ObjectId())
        post.add_comment(comment)
        self.documents[post_id].setdefault("comments", []).append({**comment.info, "_id": comment.id})
        return 1

    async def set_content(self, post_id: str, content: Any) -> int:
        document = self.documents.get(post_id)
        if document is None or document.get("content") == content:
            return 0
        document["content"] = content
        return 1

    async def delete(self, post_id: str) -> int:
        return 1 if self.documents.pop(post_id, None) is not None else 0


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def mock_collection():
    """Motor collection double; each test sets the return values it needs."""
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection
