# src/auth/schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, StrictBool

from auth.models import User
from database import Schema


class UserCreate(Schema):
    """Schema for user creation."""
    username: str
    password: str
    email: EmailStr
    role: str = "user"
    is_active: bool = True
    permissions: List[str] = []


class UserUpdate(Schema):
    """Schema for partial user update. Only the fields sent are applied."""
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[EmailStr] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None
    permissions: Optional[List[str]] = None


class UserPermissionsUpdate(Schema):
    permissions: List[str]


class UserStatusUpdate(Schema):
    is_active: StrictBool


class UserResponse(Schema):
    """Schema for user response. The password never leaves the server."""
    id: str
    username: str
    email: str
    role: str
    is_active: bool
    permissions: List[str]
    last_login: Optional[datetime] = None
    login_count: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, user: User) -> "UserResponse":
        return cls(**user.model_dump(exclude={"password"}))


class UserLogin(Schema):
    """Schema for user login."""
    username: str
    password: str


class LoginUser(Schema):
    id: str
    username: str
    email: str
    role: str
    permissions: List[str]


class LoginResponse(Schema):
    """Schema for a successful login."""
    success: bool = True
    message: str = "Login successful"
    user: LoginUser
    access_token: str
    token_type: str = "bearer"


class LoginHistoryCreate(Schema):
    user_id: str
    username: str
    ip_address: str
    user_agent: str


class ActivityCreate(Schema):
    type: str
    action: str
    title: str
