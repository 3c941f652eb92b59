# src/enquiry/schemas.py
from typing import List, Optional

from pydantic import EmailStr, StrictBool

from database import Schema


class ContactCreate(Schema):
    """Schema for an incoming contact message."""
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    subject: str
    message: str


class EnquiryFormCreate(Schema):
    """Schema for creating an enquiry form."""
    title: str
    description: str
    icon: str
    image: str
    google_form_url: str
    features: List[str] = []
    is_active: bool = True


class EnquiryFormUpdate(Schema):
    """Schema for partial enquiry form update."""
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    google_form_url: Optional[str] = None
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None


class EnquiryFormStatusUpdate(Schema):
    is_active: StrictBool
