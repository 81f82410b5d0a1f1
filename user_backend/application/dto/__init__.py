from .user_dto import (
    MessageResponse,
    UserCreateRequest,
    UserCreatedResponse,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
    UserUpdatedResponse,
    to_user_response,
)

__all__ = [
    "MessageResponse",
    "UserCreateRequest",
    "UserCreatedResponse",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
    "UserUpdatedResponse",
    "to_user_response",
]
