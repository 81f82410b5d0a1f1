from .mongo_connection import MongoConnection
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoConnection",
    "MongoUserRepository",
]
