"""
User-related Pydantic models and mappers
"""

from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Domain entity persisted by the user repository"""
    model_config = ConfigDict(frozen=True)

    id: UUID
    full_name: str = ""


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName")


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    full_name: str = Field(alias="fullName")


def to_user_response(user: User) -> UserResponse:
    """Map a domain user onto its transport shape"""
    return UserResponse(id=user.id, full_name=user.full_name)
