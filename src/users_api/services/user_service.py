"""
User service - timing and error logging around the user repository
"""

import time
from typing import List, Optional
from uuid import UUID

from users_api.models.user import User
from users_api.repositories.user_repository import UserRepository, get_user_repository
from users_api.utils.logger_adapter import LoggerAdapter


class UserService:
    """
    Service for user operations

    Every call is a single pass-through to the repository. Repository
    exceptions are logged once and re-raised unchanged.
    """

    def __init__(self, user_repository: UserRepository, logger: LoggerAdapter):
        self.user_repository = user_repository
        self.logger = logger

    async def get_all(self) -> List[User]:
        self.logger.log_information("Retrieving all users")
        started = time.perf_counter()
        try:
            users = await self.user_repository.get_all()
        except Exception as e:
            self.logger.log_error(e, "Something went wrong while retrieving all users")
            raise
        self.logger.log_information("All users retrieved in {0}ms", _elapsed_ms(started))
        return users

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        self.logger.log_information("Retrieving user with id: {0}", user_id)
        started = time.perf_counter()
        try:
            user = await self.user_repository.get_by_id(user_id)
        except Exception as e:
            self.logger.log_error(e, "Something went wrong while retrieving user with id {0}", user_id)
            raise
        self.logger.log_information("User with id {0} retrieved in {1}ms", user_id, _elapsed_ms(started))
        return user

    async def create(self, user: User) -> bool:
        self.logger.log_information("Creating user with id {0} and name: {1}", user.id, user.full_name)
        started = time.perf_counter()
        try:
            created = await self.user_repository.create(user)
        except Exception as e:
            self.logger.log_error(e, "Something went wrong while creating a user")
            raise
        self.logger.log_information("User with id {0} created in {1}ms", user.id, _elapsed_ms(started))
        return created

    async def delete_by_id(self, user_id: UUID) -> bool:
        self.logger.log_information("Deleting user with id: {0}", user_id)
        started = time.perf_counter()
        try:
            deleted = await self.user_repository.delete_by_id(user_id)
        except Exception as e:
            self.logger.log_error(e, "Something went wrong while deleting user with id {0}", user_id)
            raise
        self.logger.log_information("User with id {0} deleted in {1}ms", user_id, _elapsed_ms(started))
        return deleted


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


_user_service = None

def get_user_service() -> UserService:
    """Get the global user service instance"""
    global _user_service
    if _user_service is None:
        _user_service = UserService(get_user_repository(), LoggerAdapter(UserService))
    return _user_service
