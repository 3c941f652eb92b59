# src/content/models.py
from datetime import datetime

from database import Base


class Blog(Base):
    """Represents a blog post."""
    id: str
    title: str
    content: str
    category: str
    created_at: datetime
    updated_at: datetime


class Video(Base):
    """Represents a video entry. Updates leave created_at as the only timestamp."""
    id: str
    title: str
    description: str
    created_at: datetime
