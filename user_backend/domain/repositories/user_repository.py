from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every stored user in the store's natural order"""
        pass
    
    @abstractmethod
    async def find_by_identity(self, name: str, age: int, date_of_birth: datetime) -> Optional[User]:
        """Find the user matching name, age and date of birth exactly"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Persist a new user and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, changes: Dict[str, Any]) -> User:
        """Apply document field changes to a user; raises NotFoundError if absent"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> None:
        """Remove a user; raises NotFoundError if absent"""
        pass
    
    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the indexes the store relies on (unique identity triple)"""
        pass
