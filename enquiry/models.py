# src/enquiry/models.py
from datetime import datetime
from typing import List, Optional

from database import Base


class Contact(Base):
    """Represents a message sent through the public contact form."""
    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    subject: str
    message: str
    created_at: datetime


class EnquiryForm(Base):
    """Represents a service enquiry card linking to an external Google Form."""
    id: str
    title: str
    description: str
    icon: str
    image: str
    google_form_url: str
    features: List[str] = []
    is_active: bool = True
    created_at: datetime
