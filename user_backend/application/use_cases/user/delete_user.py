# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> None:
        """
        Raises:
            NotFoundError: If no user has this ID
        """
        logger.info(f"Attempting to delete user with _id: {user_id}")
        await self.user_repository.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")
