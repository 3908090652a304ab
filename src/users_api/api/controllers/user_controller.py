"""
User controller - translates service outcomes into HTTP responses

This is the only layer that decides between success, not-found and
bad-request. Exceptions raised by the service are not caught here; the
centralized error handlers turn them into a 500 at the transport boundary.
"""

import logging
from uuid import UUID, uuid4

from fastapi import Response, status
from fastapi.responses import JSONResponse

from users_api.models.user import CreateUserRequest, User, to_user_response
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


class UserController:

    def __init__(self, user_service: UserService, location_prefix: str = "/users"):
        self.user_service = user_service
        self.location_prefix = location_prefix.rstrip("/")

    async def get_by_id(self, user_id: UUID) -> Response:
        user = await self.user_service.get_by_id(user_id)
        if user is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(status_code=status.HTTP_200_OK, content=_to_body(user))

    async def get_all(self) -> Response:
        users = await self.user_service.get_all()
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=[_to_body(user) for user in users]
        )

    async def create(self, request: CreateUserRequest) -> Response:
        """Create a user with a freshly assigned id"""
        user = User(id=uuid4(), full_name=request.full_name)

        created = await self.user_service.create(user)
        if not created:
            logger.info(f"User {user.id} was rejected by the repository")
            return Response(status_code=status.HTTP_400_BAD_REQUEST)

        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_to_body(user),
            headers={"Location": f"{self.location_prefix}/{user.id}"}
        )

    async def delete_by_id(self, user_id: UUID) -> Response:
        deleted = await self.user_service.delete_by_id(user_id)
        if not deleted:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=status.HTTP_200_OK)


def _to_body(user: User) -> dict:
    return to_user_response(user).model_dump(mode="json", by_alias=True)
