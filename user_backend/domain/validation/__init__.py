from .user_validator import (
    About,
    Age,
    DateOfBirth,
    Name,
    Password,
    first_validation_error,
)

__all__ = [
    "About",
    "Age",
    "DateOfBirth",
    "Name",
    "Password",
    "first_validation_error",
]
