# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.user_dto import (
    MessageResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserListResponse,
    UserUpdateRequest,
    UserUpdatedResponse,
)
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["users"])


@router.get("/", response_model=UserListResponse)
async def list_users(container: BaseContainer = Depends(get_container)) -> UserListResponse:
    """
    List every stored user
    
    Returns:
        UserListResponse with all users
    """
    list_users_use_case = container.get(ListUsersUseCase)
    
    users = await list_users_use_case.execute()
    return UserListResponse(data=users)


@router.post("/create", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    container: BaseContainer = Depends(get_container),
) -> UserCreatedResponse:
    """
    Create a new user
    
    Args:
        request: User creation request
        
    Returns:
        UserCreatedResponse with the created user and its assigned ID
    """
    create_user_use_case = container.get(CreateUserUseCase)
    
    user = await create_user_use_case.execute(request)
    return UserCreatedResponse(message="User saved successfully", data=user)


@router.put("/update/{user_id}", response_model=UserUpdatedResponse)
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    container: BaseContainer = Depends(get_container),
) -> UserUpdatedResponse:
    """
    Update fields of an existing user
    
    Args:
        user_id: ID of the user
        request: Fields to change
        
    Returns:
        UserUpdatedResponse with the updated user
    """
    update_user_use_case = container.get(UpdateUserUseCase)
    
    user = await update_user_use_case.execute(user_id, request)
    return UserUpdatedResponse(message="User updated successfully", user=user)


@router.delete("/delete/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Delete a user by ID
    
    Args:
        user_id: ID of the user
    """
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    await delete_user_use_case.execute(user_id)
    return MessageResponse(success=True, message="User deleted successfully")


@router.get("/health")
async def health() -> dict:
    """Liveness probe; does not touch the database"""
    return {"success": True, "status": "ok"}
