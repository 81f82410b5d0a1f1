"""
Shared pytest fixtures for user backend tests.
"""
import dataclasses
import os
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from user_backend.di.base_container import BaseContainer
from user_backend.di.providers.user_provider import UserProvider
from user_backend.domain.constants import UserFields
from user_backend.domain.exceptions import ConflictError, NotFoundError
from user_backend.domain.models.user import User
from user_backend.domain.repositories.user_repository import UserRepository


_FIELD_TO_ATTRIBUTE = {
    UserFields.NAME: "name",
    UserFields.AGE: "age",
    UserFields.DATE_OF_BIRTH: "date_of_birth",
    UserFields.PASSWORD: "hashed_password",
    UserFields.GENDER: "gender",
    UserFields.ABOUT: "about",
}


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository that enforces the unique identity triple like the Mongo index."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    def _identity_taken(self, user: User, ignore_id: Optional[str] = None) -> bool:
        return any(
            (other.name, other.age, other.date_of_birth) == (user.name, user.age, user.date_of_birth)
            for other_id, other in self.users.items()
            if other_id != ignore_id
        )

    async def list_all(self) -> List[User]:
        return list(self.users.values())

    async def find_by_identity(self, name, age, date_of_birth) -> Optional[User]:
        for user in self.users.values():
            if (user.name, user.age, user.date_of_birth) == (name, age, date_of_birth):
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def insert(self, user: User) -> User:
        if self._identity_taken(user):
            raise ConflictError("User already exists")
        saved = dataclasses.replace(user, id=str(ObjectId()))
        self.users[saved.id] = saved
        return saved

    async def update_by_id(self, user_id: str, changes: Dict[str, Any]) -> User:
        if user_id not in self.users:
            raise NotFoundError("User not found")
        updated = dataclasses.replace(
            self.users[user_id],
            **{_FIELD_TO_ATTRIBUTE[field]: value for field, value in changes.items()},
        )
        if self._identity_taken(updated, ignore_id=user_id):
            raise ConflictError("User already exists")
        self.users[user_id] = updated
        return updated

    async def delete_by_id(self, user_id: str) -> None:
        if self.users.pop(user_id, None) is None:
            raise NotFoundError("User not found")

    async def ensure_indexes(self) -> None:
        return None


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "USERS_COLLECTION": "people",
        "PORT": "9090",
        "CORS_ORIGINS": "http://localhost:3000, http://localhost:5173",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.users_collection_name = "users"
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_backend.core.config.get_settings", return_value=mock), patch(
        "user_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def container(user_repository):
    """Container wired like production, with the in-memory repository in place of MongoDB."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    UserProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Test client over a fresh app that never opens a MongoDB connection."""
    from user_backend.main import create_application

    with TestClient(create_application(container=container)) as c:
        yield c


@pytest.fixture
def alice_payload():
    return {
        "name": "Alice",
        "age": 30,
        "dateOfBirth": "1994-01-01",
        "gender": "Female",
        "password": "abc1234567",
        "about": "",
    }
