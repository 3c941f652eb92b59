# src/content/schemas.py
from typing import Optional

from database import Schema


class BlogCreate(Schema):
    """Schema for creating a blog."""
    title: str
    content: str
    category: str


class BlogUpdate(Schema):
    """Schema for partial blog update."""
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None


class VideoCreate(Schema):
    """Schema for creating a video."""
    title: str
    description: str


class VideoUpdate(Schema):
    """Schema for partial video update."""
    title: Optional[str] = None
    description: Optional[str] = None
