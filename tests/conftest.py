"""
pytest configuration and shared fakes for the Users API test suite
Hand-written stand-ins for the repository, logger adapter and database pool.
"""

import pytest
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

from users_api.models.user import User
from users_api.repositories.user_repository import UserRepository


class FakeUserRepository(UserRepository):
    """In-memory user store; set ``error`` to make every call raise it"""

    def __init__(self, users: Optional[List[User]] = None):
        self.users: Dict[UUID, User] = {user.id: user for user in users or []}
        self.error: Optional[Exception] = None
        self.create_result: Optional[bool] = None
        self.created: List[User] = []

    def _raise_if_failing(self):
        if self.error is not None:
            raise self.error

    async def get_all(self) -> List[User]:
        self._raise_if_failing()
        return list(self.users.values())

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        self._raise_if_failing()
        return self.users.get(user_id)

    async def create(self, user: User) -> bool:
        self._raise_if_failing()
        self.created.append(user)
        if self.create_result is not None:
            return self.create_result
        if user.id in self.users:
            return False
        self.users[user.id] = user
        return True

    async def delete_by_id(self, user_id: UUID) -> bool:
        self._raise_if_failing()
        return self.users.pop(user_id, None) is not None


class FakeLoggerAdapter:
    """Records every call made through the logger adapter interface"""

    def __init__(self):
        self.information: List[Tuple[str, Tuple[Any, ...]]] = []
        self.errors: List[Tuple[BaseException, str, Tuple[Any, ...]]] = []

    def log_information(self, template: str, *args: Any) -> None:
        self.information.append((template, args))

    def log_error(self, exception: BaseException, template: str, *args: Any) -> None:
        self.errors.append((exception, template, args))

    def templates(self) -> List[str]:
        return [template for template, _ in self.information]


class FakeConnection:
    """asyncpg connection stand-in with programmable coroutine methods"""

    def __init__(self):
        self.fetch = AsyncMock(return_value=[])
        self.fetchrow = AsyncMock(return_value=None)
        self.fetchval = AsyncMock(return_value=1)
        self.execute = AsyncMock(return_value="")


class _Acquire:

    def __init__(self, conn: FakeConnection, error: Optional[BaseException] = None):
        self.conn = conn
        self.error = error

    async def __aenter__(self) -> FakeConnection:
        if self.error is not None:
            raise self.error
        return self.conn

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class FakePool:
    """asyncpg pool stand-in handing out a single FakeConnection

    Set ``acquire_error`` to make opening a connection fail.
    """

    def __init__(self, conn: Optional[FakeConnection] = None):
        self.conn = conn or FakeConnection()
        self.close = AsyncMock()
        self.acquire_error: Optional[BaseException] = None

    def acquire(self) -> _Acquire:
        return _Acquire(self.conn, self.acquire_error)


@pytest.fixture
def nick_chapsas() -> User:
    return User(id=uuid4(), full_name="Nick Chapsas")


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def logger_adapter() -> FakeLoggerAdapter:
    return FakeLoggerAdapter()


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()
