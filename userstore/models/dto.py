"""Data Transfer Objects - input validation and output contracts."""

from pydantic import BaseModel, Field, ConfigDict
from typing import List


class UserDTO(BaseModel):
    """User data for display."""
    id: int
    name: str
    age: int

    model_config = ConfigDict(from_attributes=True)


class UserCreateRequest(BaseModel):
    """Request to create (or match) a user."""
    id: int
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)


class UserUpdateRequest(BaseModel):
    """Request to replace the fields of an existing user."""
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=150)


class UserListResponse(BaseModel):
    """Response with list of users."""
    users: List[UserDTO]
    total: int
