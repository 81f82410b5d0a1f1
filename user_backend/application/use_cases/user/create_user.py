# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.security import hash_password
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserCreateRequest, UserResponse, to_user_response
from ...services.uniqueness_guard import UniquenessGuard

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user record"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        uniqueness_guard: UniquenessGuard,
    ) -> None:
        self.user_repository = user_repository
        self.uniqueness_guard = uniqueness_guard
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Check uniqueness and insert a user
        
        Args:
            request: Validated creation payload
            
        Returns:
            UserResponse with the assigned ID
            
        Raises:
            ConflictError: If name, age and dateOfBirth are already taken
        """
        await self.uniqueness_guard.ensure_unique(
            request.name,
            request.age,
            request.date_of_birth,
        )
        
        # bcrypt is CPU bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            age=request.age,
            date_of_birth=request.date_of_birth,
            hashed_password=hashed_password,
            gender=request.gender,
            about=request.about,
        )
        
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Created user {saved_user.id}")
        
        return to_user_response(saved_user)
