from datetime import datetime, timezone

from enquiry.models import Contact, EnquiryForm
from export.services import CONTACT_HEADER, ENQUIRY_FORM_HEADER, ExportService

CREATED = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_contacts_csv_empty():
    assert ExportService.contacts_csv([]) == CONTACT_HEADER + "\n"


def test_contacts_csv_rows():
    contact = Contact(
        id="1", first_name="Ada", last_name="Lovelace", email="ada@example.com",
        subject="Hi", message="Hello", created_at=CREATED,
    )
    lines = ExportService.contacts_csv([contact]).splitlines()
    assert lines == [
        CONTACT_HEADER,
        '"Ada","Lovelace","ada@example.com","","Hi","Hello","2024-05-01T10:00:00.000Z"',
    ]


def test_contacts_csv_escapes_quotes_and_commas():
    contact = Contact(
        id="1", first_name="Ada", last_name="Lovelace", email="ada@example.com", phone="555",
        subject='Say "hi"', message="one, two", created_at=CREATED,
    )
    row = ExportService.contacts_csv([contact]).splitlines()[1]
    assert row == '"Ada","Lovelace","ada@example.com","555","Say ""hi""","one, two","2024-05-01T10:00:00.000Z"'


def test_enquiry_forms_csv_rows():
    form = EnquiryForm(
        id="1", title="Audit", description="Annual audit", icon="📁", image="img",
        google_form_url="https://forms.gle/audit", features=["Review", "Report"],
        is_active=True, created_at=CREATED,
    )
    lines = ExportService.enquiry_forms_csv([form]).splitlines()
    assert lines == [
        ENQUIRY_FORM_HEADER,
        '"Audit","Annual audit","https://forms.gle/audit","Review; Report","Active","2024-05-01T10:00:00.000Z"',
    ]


def test_export_contacts_route_empty(client):
    response = client.get("/api/export/contacts")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == 'attachment; filename="contacts.csv"'
    assert response.text == CONTACT_HEADER + "\n"


def test_export_enquiries_route_lists_active_forms(client):
    response = client.get("/api/export/enquiries")
    assert response.headers["content-disposition"] == 'attachment; filename="enquiry-forms.csv"'
    lines = response.text.splitlines()
    assert lines[0] == ENQUIRY_FORM_HEADER
    assert len(lines) == 3
    assert lines[1].startswith('"Business Registration",')
    assert all(line.split('","')[4] == "Active" for line in lines[1:])
