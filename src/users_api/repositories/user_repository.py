"""
User repository - persistence boundary for User records
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import List, Optional
from uuid import UUID

import asyncpg

from users_api.database.connection import get_db_pool
from users_api.database.errors import DataAccessError
from users_api.models.user import User

logger = logging.getLogger(__name__)

# Command timeouts and failed connects come from asyncio and the socket layer, not asyncpg
DATABASE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError)


class UserRepository(ABC):
    """Contract every user store implements"""

    @abstractmethod
    async def get_all(self) -> List[User]:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> bool:
        ...


class PostgresUserRepository(UserRepository):
    """User repository backed by the shared asyncpg pool"""

    def __init__(self, pool: Optional[asyncpg.Pool] = None):
        self._pool = pool

    def _get_pool(self):
        pool = self._pool or get_db_pool()
        if pool is None:
            raise DataAccessError("Database pool is not initialized", code=503)
        return pool

    @asynccontextmanager
    async def _connection(self):
        """Acquire a pooled connection; any database-layer failure surfaces as DataAccessError"""
        pool = self._get_pool()
        try:
            async with pool.acquire() as conn:
                yield conn
        except DATABASE_ERRORS as e:
            raise _as_data_access_error(e) from e

    async def get_all(self) -> List[User]:
        async with self._connection() as conn:
            rows = await conn.fetch("SELECT id, full_name FROM users ORDER BY full_name, id")
        return [_row_to_user(row) for row in rows]

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        async with self._connection() as conn:
            row = await conn.fetchrow("SELECT id, full_name FROM users WHERE id = $1", user_id)
        return _row_to_user(row) if row else None

    async def create(self, user: User) -> bool:
        """
        Insert a user

        Returns:
            False when the row violates a table constraint (duplicate id, empty name)
        """
        async with self._connection() as conn:
            try:
                status = await conn.execute(
                    "INSERT INTO users (id, full_name) VALUES ($1, $2)",
                    user.id, user.full_name
                )
            except asyncpg.IntegrityConstraintViolationError as e:
                logger.warning(f"Rejected insert for user {user.id}: {e}")
                return False
        return _affected_rows(status) > 0

    async def delete_by_id(self, user_id: UUID) -> bool:
        async with self._connection() as conn:
            status = await conn.execute("DELETE FROM users WHERE id = $1", user_id)
        return _affected_rows(status) > 0


def _row_to_user(row) -> User:
    return User(id=row["id"], full_name=row["full_name"])


def _affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. "INSERT 0 1" or "DELETE 3"
    try:
        return int(status.split()[-1])
    except (AttributeError, IndexError, ValueError):
        return 0


def _as_data_access_error(error: Exception) -> DataAccessError:
    message = str(error) or type(error).__name__
    return DataAccessError(message, code=500, sqlstate=getattr(error, "sqlstate", None))


_user_repository = None

def get_user_repository() -> UserRepository:
    """Get the global user repository instance"""
    global _user_repository
    if _user_repository is None:
        _user_repository = PostgresUserRepository()
    return _user_repository
