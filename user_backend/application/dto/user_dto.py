# Standard library imports
from datetime import datetime
from typing import List, Optional, Union

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.user import Gender, User
from ...domain.validation import About, Age, DateOfBirth, Name, Password


class UserCreateRequest(BaseModel):
    """
    DTO for user creation request.
    
    Field order is the order rules are checked in; the API reports only the
    first failure.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
    
    name: Name
    age: Age
    date_of_birth: DateOfBirth = Field(alias="dateOfBirth")
    password: Password
    gender: Gender
    about: Optional[About] = None


class UserUpdateRequest(BaseModel):
    """DTO for partial user update; only fields present in the body are applied"""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
    
    name: Optional[Name] = None
    age: Optional[Age] = None
    date_of_birth: Optional[DateOfBirth] = Field(default=None, alias="dateOfBirth")
    password: Optional[Password] = None
    gender: Optional[Gender] = None
    about: Optional[About] = None
    user_id: Optional[Union[str, int]] = None
    
    @field_validator("name", "age", "date_of_birth", "password", "gender", mode="before")
    @classmethod
    def required_fields_not_null(cls, value):
        # Only about may be cleared
        if value is None:
            raise ValueError("Field required")
        return value


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    model_config = ConfigDict(populate_by_name=True)
    
    id: str = Field(alias="_id")
    name: str
    age: int
    date_of_birth: datetime = Field(alias="dateOfBirth")
    gender: str
    about: Optional[str] = None


class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserResponse]


class UserCreatedResponse(BaseModel):
    success: bool = True
    message: str
    data: UserResponse


class UserUpdatedResponse(BaseModel):
    success: bool = True
    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Envelope for confirmations and every error"""
    success: bool
    message: str


def to_user_response(user: User) -> UserResponse:
    """Build the public view of a stored user"""
    return UserResponse(
        id=user.id or "",
        name=user.name,
        age=user.age,
        date_of_birth=user.date_of_birth,
        gender=user.gender,
        about=user.about,
    )
