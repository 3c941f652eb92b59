# src/storage/seed.py
from datetime import datetime
from typing import List
from uuid import uuid4

from auth.models import User
from config import settings
from enquiry.models import EnquiryForm


def admin_user(now: datetime) -> User:
    """The administrator account present in every fresh storage."""
    return User(
        id=str(uuid4()),
        username=settings.ADMIN_USERNAME,
        password=settings.ADMIN_PASSWORD,
        email=settings.ADMIN_EMAIL,
        role="admin",
        is_active=True,
        permissions=list(settings.ADMIN_PERMISSIONS),
        last_login=None,
        login_count="0",
        created_at=now,
        updated_at=now,
    )


def default_enquiry_forms(now: datetime) -> List[EnquiryForm]:
    return [
        EnquiryForm(
            id=str(uuid4()),
            title="Business Registration",
            description="Complete business registration and incorporation services with expert guidance throughout the process.",
            icon="💼",
            image="https://images.unsplash.com/photo-1560472354-b33ff0c44a43?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
            google_form_url="https://forms.gle/eBrRUfpQHTu4A3Jk9",
            features=["Company Registration", "Tax ID Application", "Legal Documentation"],
            is_active=True,
            created_at=now,
        ),
        EnquiryForm(
            id=str(uuid4()),
            title="Tax Consultation",
            description="Personalized tax planning and consultation services to optimize your tax strategy and compliance.",
            icon="📊",
            image="https://images.unsplash.com/photo-1554224155-8d04cb21cd6c?ixlib=rb-4.0.3&auto=format&fit=crop&w=600&h=300",
            google_form_url="https://forms.gle/uepyC8iEHpUJcwsX6",
            features=["Tax Planning Strategy", "Compliance Review", "Deduction Optimization"],
            is_active=True,
            created_at=now,
        ),
    ]
