from typing import List

from fastapi import APIRouter, Depends, Response

from subscriptions_api.dependencies import get_user_service
from subscriptions_api.schemas import UserCreate, UserResponse, UserUpdate
from subscriptions_api.services.user_service import UserService

router = APIRouter()


@router.post("/users", response_model=UserResponse, status_code=201)
def create_user(user_data: UserCreate, service: UserService = Depends(get_user_service)):
    """Create a new user"""
    return service.create_user(user_data.name, user_data.email)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get a user by ID"""
    return service.get_user_by_id(user_id)


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user_data: UserUpdate, service: UserService = Depends(get_user_service)):
    """Replace a user's name and email"""
    return service.update_user(user_id, user_data.name, user_data.email)


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user and its subscriptions"""
    service.delete_user(user_id)
    return Response(status_code=204)


@router.get("/users", response_model=List[UserResponse])
def list_users(service: UserService = Depends(get_user_service)):
    """List all users"""
    return service.list_users()
