"""
User API routes
All data access goes through UserController -> UserService -> UserRepository.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, Response

from users_api.api.controllers.user_controller import UserController
from users_api.models.user import CreateUserRequest, UserResponse
from users_api.services.user_service import get_user_service

router = APIRouter()

def get_user_controller() -> UserController:
    """FastAPI dependency resolving the controller for a request"""
    return UserController(get_user_service())

@router.get("", response_model=list[UserResponse])
async def get_all_users(controller: UserController = Depends(get_user_controller)) -> Response:
    """List all users"""
    return await controller.get_all()

@router.get("/{user_id}", response_model=UserResponse, responses={404: {"description": "User not found"}})
async def get_user_by_id(user_id: UUID, controller: UserController = Depends(get_user_controller)) -> Response:
    """Get a single user"""
    return await controller.get_by_id(user_id)

@router.post("", status_code=201, response_model=UserResponse, responses={400: {"description": "User rejected"}})
async def create_user(request: CreateUserRequest, controller: UserController = Depends(get_user_controller)) -> Response:
    """Create a new user"""
    return await controller.create(request)

@router.delete("/{user_id}", responses={404: {"description": "User not found"}})
async def delete_user_by_id(user_id: UUID, controller: UserController = Depends(get_user_controller)) -> Response:
    """Delete a user"""
    return await controller.delete_by_id(user_id)
