from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.uniqueness_guard import UniquenessGuard
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers the guard and all user use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories; they only need a
        UserRepository to already be registered.
        """
        container.register_factory(
            UniquenessGuard,
            lambda: UniquenessGuard(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository),
                uniqueness_guard=container.get(UniquenessGuard),
            )
        )
        
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
