# Standard library imports
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, NotFoundError, RepositoryError
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ...utils.datetime_utils import ensure_utc

logger = logging.getLogger(__name__)

IDENTITY_INDEX_NAME = "name_age_dateOfBirth_unique"

USER_ALREADY_EXISTS = "User already exists"
USER_NOT_FOUND = "User not found"


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    """Parse a 24-hex user ID; None when it cannot be an ObjectId"""
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def list_all(self) -> List[User]:
        """
        Return every user in the collection's natural order
        
        Returns:
            List of User domain models
        """
        try:
            users = []
            async for document in self.user_collection.find({}):
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
    
    async def find_by_identity(self, name: str, age: int, date_of_birth: datetime) -> Optional[User]:
        """
        Find the user whose name, age and date of birth all match
        
        Args:
            name: Exact name
            age: Exact age
            date_of_birth: Exact date of birth (UTC)
            
        Returns:
            User domain model if found, None otherwise
        """
        try:
            document = await self.user_collection.find_one({
                UserFields.NAME: name,
                UserFields.AGE: age,
                UserFields.DATE_OF_BIRTH: date_of_birth,
            })
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Saved User domain model with ID set
            
        Raises:
            ConflictError: If the unique identity index rejects the document
        """
        user_dict = self._user_to_dict(user)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            logger.info(f"Insert rejected by unique index for user '{user.name}'")
            raise ConflictError(USER_ALREADY_EXISTS) from e
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        
        return User(
            id=str(result.inserted_id),
            name=user.name,
            age=user.age,
            date_of_birth=user.date_of_birth,
            hashed_password=user.hashed_password,
            gender=user.gender,
            about=user.about,
        )
    
    async def update_by_id(self, user_id: str, changes: Dict[str, Any]) -> User:
        """
        Apply field changes to an existing user
        
        Args:
            user_id: ID of the user to update
            changes: Document fields to set; an about of None unsets it
            
        Returns:
            Updated User domain model
            
        Raises:
            NotFoundError: If no user has this ID
            ConflictError: If the change collides with another user's identity
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            raise NotFoundError(USER_NOT_FOUND)
        
        to_set = {k: v for k, v in changes.items() if v is not None}
        to_unset = {k: "" for k, v in changes.items() if v is None}
        update: Dict[str, Any] = {}
        if to_set:
            update["$set"] = to_set
        if to_unset:
            update["$unset"] = to_unset
        
        try:
            if update:
                document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    update,
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except DuplicateKeyError as e:
            raise ConflictError(USER_ALREADY_EXISTS) from e
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        
        if document is None:
            raise NotFoundError(USER_NOT_FOUND)
        return self._document_to_user(document)
    
    async def delete_by_id(self, user_id: str) -> None:
        """
        Delete a user by ID
        
        Raises:
            NotFoundError: If no user has this ID
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            raise NotFoundError(USER_NOT_FOUND)
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        
        if result.deleted_count == 0:
            raise NotFoundError(USER_NOT_FOUND)
    
    async def ensure_indexes(self) -> None:
        """Create the unique compound index on name, age and dateOfBirth"""
        try:
            await self.user_collection.create_index(
                [
                    (UserFields.NAME, ASCENDING),
                    (UserFields.AGE, ASCENDING),
                    (UserFields.DATE_OF_BIRTH, ASCENDING),
                ],
                unique=True,
                name=IDENTITY_INDEX_NAME,
            )
        except PyMongoError as e:
            raise RepositoryError(str(e)) from e
        logger.info(f"Ensured index '{IDENTITY_INDEX_NAME}' on users collection")
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            age=document.get(UserFields.AGE, 0),
            date_of_birth=ensure_utc(document.get(UserFields.DATE_OF_BIRTH)),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            gender=document.get(UserFields.GENDER, ""),
            about=document.get(UserFields.ABOUT),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict: Dict[str, Any] = {
            UserFields.NAME: user.name,
            UserFields.AGE: user.age,
            UserFields.DATE_OF_BIRTH: user.date_of_birth,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.GENDER: user.gender,
        }
        if user.about is not None:
            user_dict[UserFields.ABOUT] = user.about
        
        object_id = _to_object_id(user.id) if user.id else None
        if object_id is not None:
            user_dict[UserFields.MONGO_ID] = object_id
        
        return user_dict
