# src/export/services.py
import csv
import io
from datetime import datetime
from typing import Iterable, List, Optional

from enquiry.models import Contact, EnquiryForm

CONTACT_HEADER = "First Name,Last Name,Email,Phone,Subject,Message,Date"
ENQUIRY_FORM_HEADER = "Title,Description,Google Form URL,Features,Status,Created Date"


def _iso(value: Optional[datetime]) -> str:
    """ISO-8601 with millisecond precision and a Z suffix, e.g. 2024-05-01T10:00:00.000Z."""
    if value is None:
        return ""
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExportService:
    @staticmethod
    def to_csv(header: str, rows: Iterable[List[str]]) -> str:
        """Header line followed by one fully quoted line per row."""
        buffer = io.StringIO()
        buffer.write(header + "\n")
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerows(rows)
        return buffer.getvalue()

    @staticmethod
    def contacts_csv(contacts: Iterable[Contact]) -> str:
        rows = (
            [
                contact.first_name,
                contact.last_name,
                contact.email,
                contact.phone or "",
                contact.subject,
                contact.message,
                _iso(contact.created_at),
            ]
            for contact in contacts
        )
        return ExportService.to_csv(CONTACT_HEADER, rows)

    @staticmethod
    def enquiry_forms_csv(forms: Iterable[EnquiryForm]) -> str:
        rows = (
            [
                form.title,
                form.description,
                form.google_form_url,
                "; ".join(form.features or []),
                "Active" if form.is_active else "Inactive",
                _iso(form.created_at),
            ]
            for form in forms
        )
        return ExportService.to_csv(ENQUIRY_FORM_HEADER, rows)
