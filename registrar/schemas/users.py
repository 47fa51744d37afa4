"""User schemas for API requests and responses"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, StrictStr


class SignupForm(BaseModel):
    """Raw signup body; field rules are applied afterwards by the validator"""
    email: Optional[StrictStr] = None
    password: Optional[StrictStr] = None


class UserInDB(BaseModel):
    email: str
    password: str


class UserCreatedResponse(BaseModel):
    id: int


class UserResponse(BaseModel):
    id: int
    email: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UsersIndexResponse(BaseModel):
    users: List[UserResponse]
