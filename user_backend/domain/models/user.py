# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


@dataclass
class User:
    """
    Pure domain model for a stored user record.
    
    Field rules live in domain.validation; instances are only built from
    validated input or from documents already in the store.
    """
    id: Optional[str]
    name: str
    age: int
    date_of_birth: datetime
    hashed_password: str
    gender: str
    about: Optional[str] = None
