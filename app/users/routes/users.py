from fastapi import APIRouter, Depends, status

from app.core.schemas import ApiResponse, list_response, message_response, success_response
from app.core.validators import parse_email_param
from app.db.store import Store, get_store
from app.users.schemas.user import UserCreate, UserResponse, UserUpdate
from app.users.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(store: Store = Depends(get_store)) -> ApiResponse[list[UserResponse]]:
    """List every registered user, newest first."""
    return list_response(UserService.list_users(store))


@router.get("/email/{email}", response_model=ApiResponse[UserResponse])
async def get_user_by_email(
    email: str, store: Store = Depends(get_store)
) -> ApiResponse[UserResponse]:
    return success_response(UserService.get_user_by_email(store, parse_email_param(email)))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: int, store: Store = Depends(get_store)) -> ApiResponse[UserResponse]:
    return success_response(UserService.get_user(store, user_id))


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserCreate, store: Store = Depends(get_store)
) -> ApiResponse[UserResponse]:
    """Register a new user. 409 when the email is already taken."""
    user = UserService.create_user(store, payload)
    return success_response(user, message="Usuario creado exitosamente")


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: int, payload: UserUpdate, store: Store = Depends(get_store)
) -> ApiResponse[UserResponse]:
    """Update name and age. The email cannot be changed."""
    user = UserService.update_user(store, user_id, payload)
    return success_response(user, message="Usuario actualizado exitosamente")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(user_id: int, store: Store = Depends(get_store)) -> ApiResponse[None]:
    """Delete a user and every activity, progress entry and achievement it owns."""
    UserService.delete_user(store, user_id)
    return message_response("Usuario eliminado exitosamente")
