# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.security import hash_password
from ....domain.constants import UserFields
from ....domain.exceptions import NotFoundError
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse, UserUpdateRequest, to_user_response

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for applying a partial update to a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Update the supplied schema fields of a user
        
        Args:
            user_id: ID of the user to update
            request: Validated fields present in the request body
            
        Returns:
            UserResponse with the updated record
            
        Raises:
            NotFoundError: If no user has this ID
        """
        changes = request.model_dump(by_alias=True, exclude_unset=True)
        
        if changes.pop(UserFields.USER_ID, None) is not None:
            logger.warning(
                f"Ignoring '{UserFields.USER_ID}' in update for user {user_id}: "
                f"not a user record field"
            )
        
        if changes.get(UserFields.PASSWORD) is not None:
            changes[UserFields.PASSWORD] = await asyncio.to_thread(
                hash_password, changes[UserFields.PASSWORD]
            )
        
        if changes:
            updated_user = await self.user_repository.update_by_id(user_id, changes)
        else:
            updated_user = await self.user_repository.find_by_id(user_id)
            if updated_user is None:
                raise NotFoundError("User not found")
        
        logger.info(f"Updated user {user_id} ({', '.join(sorted(changes)) or 'no changes'})")
        return to_user_response(updated_user)
