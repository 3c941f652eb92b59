# src/auth/models.py
from datetime import datetime
from typing import List, Optional

from database import Base


class User(Base):
    """Represents an admin panel user."""
    id: str
    username: str
    password: str  # stored as entered, compared verbatim on login
    email: str
    role: str = "user"
    is_active: bool = True
    permissions: List[str] = []
    last_login: Optional[datetime] = None
    login_count: str = "0"
    created_at: datetime
    updated_at: datetime


class LoginHistory(Base):
    """Represents a single successful login."""
    id: str
    user_id: str
    username: str
    ip_address: str
    user_agent: str
    login_time: datetime


class Activity(Base):
    """Represents an entry of the admin activity feed."""
    id: str
    type: str  # user, blog, video, contact, enquiry
    action: str  # created, updated, deleted
    title: str
    created_at: datetime
