# Standard library imports
import logging
from datetime import datetime

# Local application imports
from ...domain.exceptions import ConflictError
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UniquenessGuard:
    """
    Early check that no stored user shares name, age and dateOfBirth.
    
    The check and the following insert are not atomic; the unique index on
    the collection is what finally rejects a concurrent duplicate.
    """
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def ensure_unique(self, name: str, age: int, date_of_birth: datetime) -> None:
        """
        Raises:
            ConflictError: If a user with the same identity triple exists
        """
        existing_user = await self.user_repository.find_by_identity(name, age, date_of_birth)
        if existing_user is not None:
            logger.info(f"User '{name}' already exists with ID {existing_user.id}")
            raise ConflictError("User already exists")
