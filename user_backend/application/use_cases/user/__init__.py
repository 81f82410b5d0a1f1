from .list_users import ListUsersUseCase
from .create_user import CreateUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase

__all__ = ["ListUsersUseCase", "CreateUserUseCase", "UpdateUserUseCase", "DeleteUserUseCase"]
