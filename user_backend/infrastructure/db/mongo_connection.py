# Standard library imports
import logging
from typing import TYPE_CHECKING

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

if TYPE_CHECKING:
    from ...core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns one Motor client and the database it points at.
    
    Built once at application startup and handed to the DI container; there is
    no module-level client, so tests and workers can run their own instances.
    """
    
    def __init__(self, uri: str, database_name: str, users_collection_name: str = "users") -> None:
        self.client: AsyncIOMotorClient = AsyncIOMotorClient(uri)
        self.database: AsyncIOMotorDatabase = self.client[database_name]
        self.users_collection_name = users_collection_name
        logger.info(f"MongoDB client created for database '{database_name}'")
    
    @classmethod
    def from_settings(cls, settings: "Settings") -> "MongoConnection":
        """Build a connection from application settings"""
        return cls(
            uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            users_collection_name=settings.users_collection_name,
        )
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.database[self.users_collection_name]
    
    def close(self) -> None:
        """Close the underlying client"""
        self.client.close()
        logger.info("MongoDB client closed")
