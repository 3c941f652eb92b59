from auth.schemas import ActivityCreate
from content.schemas import BlogCreate
from enquiry.schemas import ContactCreate, EnquiryFormCreate, EnquiryFormUpdate
from storage.memory import MemStorage


def new_form(title="Audit", **fields):
    data = {
        "title": title,
        "description": "Annual audit",
        "icon": "📁",
        "image": "https://example.com/audit.png",
        "google_form_url": "https://forms.gle/audit",
        "features": ["Review", "Report"],
    }
    data.update(fields)
    return EnquiryFormCreate(**data)


async def test_seeded_enquiry_forms(storage):
    forms = await storage.get_all_enquiry_forms()
    assert [f.title for f in forms] == ["Business Registration", "Tax Consultation"]
    assert all(f.is_active for f in forms)
    assert forms[0].features == ["Company Registration", "Tax ID Application", "Legal Documentation"]


async def test_list_enquiry_forms_filters_inactive(storage):
    hidden = await storage.create_enquiry_form(new_form("Hidden", is_active=False))
    titles = [f.title for f in await storage.get_all_enquiry_forms()]
    assert "Hidden" not in titles
    assert await storage.get_enquiry_form(hidden.id) == hidden


async def test_update_enquiry_form(storage):
    form = await storage.create_enquiry_form(new_form())
    updated = await storage.update_enquiry_form(form.id, EnquiryFormUpdate(features=["Only"]))
    assert updated.features == ["Only"]
    assert updated.title == "Audit"
    assert updated.created_at == form.created_at
    activity = (await storage.get_all_activities())[0]
    assert (activity.type, activity.title) == ("enquiry", 'Enquiry form "Audit" was updated')


async def test_update_enquiry_form_status(storage):
    form = await storage.create_enquiry_form(new_form())
    hidden = await storage.update_enquiry_form_status(form.id, False)
    assert hidden.is_active is False
    assert form.id not in [f.id for f in await storage.get_all_enquiry_forms()]
    assert (await storage.get_all_activities())[0].title == 'Enquiry form "Audit" was deactivated'
    assert await storage.update_enquiry_form_status("missing", True) is None


async def test_delete_enquiry_form(storage):
    form = await storage.create_enquiry_form(new_form())
    assert await storage.delete_enquiry_form(form.id) is True
    assert await storage.get_enquiry_form(form.id) is None
    assert await storage.delete_enquiry_form(form.id) is False
    assert (await storage.get_all_activities())[0].action == "deleted"


async def test_create_contact(storage):
    contact = await storage.create_contact(ContactCreate(
        first_name="Ada", last_name="Lovelace", email="ada@example.com",
        subject="Hello", message="Question about taxes",
    ))
    assert contact.phone is None
    assert await storage.get_all_contacts() == [contact]
    activity = (await storage.get_all_activities())[0]
    assert (activity.type, activity.action) == ("contact", "created")
    assert activity.title == "New contact message from Ada Lovelace"


async def test_activity_feed_keeps_latest_ten(storage):
    blogs = [
        await storage.create_blog(BlogCreate(title=f"Post {i}", content="c", category="news"))
        for i in range(25)
    ]
    activities = await storage.get_all_activities()
    assert len(activities) == 10
    assert [a.title for a in activities] == [f'New blog "{b.title}" was created' for b in reversed(blogs[-10:])]
    assert all(a.created_at > b.created_at for a, b in zip(activities, activities[1:]))
    assert len(storage.activities) == 25


async def test_activity_limit_is_configurable():
    storage = MemStorage(activity_limit=3)
    for i in range(5):
        await storage.create_activity(ActivityCreate(type="blog", action="created", title=str(i)))
    assert [a.title for a in await storage.get_all_activities()] == ["4", "3", "2"]
