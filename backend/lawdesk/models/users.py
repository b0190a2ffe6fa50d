# backend/lawdesk/models/users.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from lawdesk.db.enums import UserRole
from lawdesk.models.common import ORMRead, PartialUpdate


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.assistant


class ProfileUpdate(PartialUpdate):
    """Fields a user may change on their own account."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    password: Optional[str] = Field(None, min_length=6)


class RoleUpdate(PartialUpdate):
    not_nullable = ("role",)

    role: Optional[UserRole] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserRead(ORMRead):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: Optional[UserRole] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
