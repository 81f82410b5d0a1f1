from .user import Gender, User

__all__ = ["Gender", "User"]
