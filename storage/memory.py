# src/storage/memory.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, TypeVar
from uuid import uuid4

from auth.models import Activity, LoginHistory, User
from auth.schemas import ActivityCreate, LoginHistoryCreate, UserCreate, UserUpdate
from config import settings
from content.models import Blog, Video
from content.schemas import BlogCreate, BlogUpdate, VideoCreate, VideoUpdate
from enquiry.models import Contact, EnquiryForm
from enquiry.schemas import ContactCreate, EnquiryFormCreate, EnquiryFormUpdate
from storage.base import Storage
from storage.seed import admin_user, default_enquiry_forms

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _matches(query: str, *fields: str) -> bool:
    return any(query in field.lower() for field in fields)


def _newest_first(records: Iterable[T], attr: str = "created_at") -> List[T]:
    return sorted(records, key=lambda record: getattr(record, attr), reverse=True)


class MemStorage(Storage):
    """Keeps every collection in a dict keyed by record id, for the life of the process."""

    def __init__(self, activity_limit: int = settings.ACTIVITY_FEED_LIMIT):
        self.activity_limit = activity_limit
        self._last_timestamp: Optional[datetime] = None

        self.users: Dict[str, User] = {}
        self.login_history: Dict[str, LoginHistory] = {}
        self.blogs: Dict[str, Blog] = {}
        self.videos: Dict[str, Video] = {}
        self.contacts: Dict[str, Contact] = {}
        self.enquiry_forms: Dict[str, EnquiryForm] = {}
        self.activities: Dict[str, Activity] = {}

        # Seed records are inserted directly and leave no activity behind
        admin = admin_user(self._now())
        self.users[admin.id] = admin
        for form in default_enquiry_forms(self._now()):
            self.enquiry_forms[form.id] = form

    def _now(self) -> datetime:
        """Current UTC time, strictly later than any timestamp issued before."""
        now = datetime.now(timezone.utc)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def _record(self, type: str, action: str, title: str) -> Activity:
        return await self.create_activity(ActivityCreate(type=type, action=action, title=title))

    # Users
    async def get_user(self, id: str) -> Optional[User]:
        return self.users.get(id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.username == username), None)

    async def get_all_users(self) -> List[User]:
        return _newest_first(self.users.values())

    async def create_user(self, user: UserCreate) -> User:
        now = self._now()
        db_user = User(
            **user.model_dump(),
            id=str(uuid4()),
            last_login=None,
            login_count="0",
            created_at=now,
            updated_at=now,
        )
        self.users[db_user.id] = db_user
        logger.info(f"User {db_user.id} created: {db_user.username}")
        await self._record("user", "created", f'New user "{db_user.username}" was created')
        return db_user

    async def update_user(self, id: str, user: UserUpdate) -> Optional[User]:
        existing = self.users.get(id)
        if not existing:
            return None
        changes = user.model_dump(exclude_unset=True, exclude_none=True)
        updated = existing.model_copy(update={**changes, "updated_at": self._now()})
        self.users[id] = updated
        logger.info(f"User {id} updated: {sorted(changes)}")
        await self._record("user", "updated", f'User "{updated.username}" was updated')
        return updated

    async def delete_user(self, id: str) -> bool:
        user = self.users.pop(id, None)
        if not user:
            return False
        logger.info(f"User {id} deleted: {user.username}")
        await self._record("user", "deleted", f'User "{user.username}" was deleted')
        return True

    async def update_user_permissions(self, id: str, permissions: List[str]) -> Optional[User]:
        existing = self.users.get(id)
        if not existing:
            return None
        updated = existing.model_copy(update={"permissions": list(permissions), "updated_at": self._now()})
        self.users[id] = updated
        logger.info(f"User {id} permissions set to {permissions}")
        await self._record("user", "updated", f'Permissions updated for user "{updated.username}"')
        return updated

    async def update_user_status(self, id: str, is_active: bool) -> Optional[User]:
        existing = self.users.get(id)
        if not existing:
            return None
        updated = existing.model_copy(update={"is_active": is_active, "updated_at": self._now()})
        self.users[id] = updated
        state = "activated" if is_active else "deactivated"
        logger.info(f"User {id} {state}")
        await self._record("user", "updated", f'User "{updated.username}" was {state}')
        return updated

    async def update_user_login(
            self, id: str, ip_address: Optional[str] = None, user_agent: Optional[str] = None
    ) -> None:
        existing = self.users.get(id)
        if not existing:
            return
        now = self._now()
        login_count = str(int(existing.login_count or "0") + 1)
        self.users[id] = existing.model_copy(
            update={"last_login": now, "login_count": login_count, "updated_at": now}
        )
        await self.create_login_history(LoginHistoryCreate(
            user_id=id,
            username=existing.username,
            ip_address=ip_address or settings.DEFAULT_IP_ADDRESS,
            user_agent=user_agent or settings.DEFAULT_USER_AGENT,
        ))

    # Login history
    async def get_all_login_history(self) -> List[LoginHistory]:
        return _newest_first(self.login_history.values(), "login_time")

    async def get_user_login_history(self, user_id: str) -> List[LoginHistory]:
        entries = (entry for entry in self.login_history.values() if entry.user_id == user_id)
        return _newest_first(entries, "login_time")

    async def create_login_history(self, login_history: LoginHistoryCreate) -> LoginHistory:
        entry = LoginHistory(**login_history.model_dump(), id=str(uuid4()), login_time=self._now())
        self.login_history[entry.id] = entry
        return entry

    # Blogs
    async def get_all_blogs(self) -> List[Blog]:
        return _newest_first(self.blogs.values())

    async def get_blog(self, id: str) -> Optional[Blog]:
        return self.blogs.get(id)

    async def create_blog(self, blog: BlogCreate) -> Blog:
        now = self._now()
        db_blog = Blog(**blog.model_dump(), id=str(uuid4()), created_at=now, updated_at=now)
        self.blogs[db_blog.id] = db_blog
        logger.info(f"Blog {db_blog.id} created: {db_blog.title}")
        await self._record("blog", "created", f'New blog "{db_blog.title}" was created')
        return db_blog

    async def update_blog(self, id: str, blog: BlogUpdate) -> Optional[Blog]:
        existing = self.blogs.get(id)
        if not existing:
            return None
        changes = blog.model_dump(exclude_unset=True, exclude_none=True)
        updated = existing.model_copy(update={**changes, "updated_at": self._now()})
        self.blogs[id] = updated
        logger.info(f"Blog {id} updated: {sorted(changes)}")
        await self._record("blog", "updated", f'Blog "{updated.title}" was updated')
        return updated

    async def delete_blog(self, id: str) -> bool:
        blog = self.blogs.pop(id, None)
        if not blog:
            return False
        logger.info(f"Blog {id} deleted: {blog.title}")
        await self._record("blog", "deleted", f'Blog "{blog.title}" was deleted')
        return True

    async def search_blogs(self, query: str) -> List[Blog]:
        query = query.lower()
        return [
            blog for blog in self.blogs.values()
            if _matches(query, blog.title, blog.content, blog.category)
        ]

    # Videos
    async def get_all_videos(self) -> List[Video]:
        return _newest_first(self.videos.values())

    async def get_video(self, id: str) -> Optional[Video]:
        return self.videos.get(id)

    async def create_video(self, video: VideoCreate) -> Video:
        db_video = Video(**video.model_dump(), id=str(uuid4()), created_at=self._now())
        self.videos[db_video.id] = db_video
        logger.info(f"Video {db_video.id} created: {db_video.title}")
        await self._record("video", "created", f'New video "{db_video.title}" was added')
        return db_video

    async def update_video(self, id: str, video: VideoUpdate) -> Optional[Video]:
        existing = self.videos.get(id)
        if not existing:
            return None
        changes = video.model_dump(exclude_unset=True, exclude_none=True)
        updated = existing.model_copy(update=changes)
        self.videos[id] = updated
        logger.info(f"Video {id} updated: {sorted(changes)}")
        await self._record("video", "updated", f'Video "{updated.title}" was updated')
        return updated

    async def delete_video(self, id: str) -> bool:
        video = self.videos.pop(id, None)
        if not video:
            return False
        logger.info(f"Video {id} deleted: {video.title}")
        await self._record("video", "deleted", f'Video "{video.title}" was deleted')
        return True

    async def search_videos(self, query: str) -> List[Video]:
        query = query.lower()
        return [
            video for video in self.videos.values()
            if _matches(query, video.title, video.description)
        ]

    # Contacts
    async def get_all_contacts(self) -> List[Contact]:
        return _newest_first(self.contacts.values())

    async def create_contact(self, contact: ContactCreate) -> Contact:
        db_contact = Contact(**contact.model_dump(), id=str(uuid4()), created_at=self._now())
        self.contacts[db_contact.id] = db_contact
        logger.info(f"Contact message {db_contact.id} received from {db_contact.email}")
        await self._record(
            "contact", "created",
            f"New contact message from {db_contact.first_name} {db_contact.last_name}"
        )
        return db_contact

    # Enquiry forms
    async def get_all_enquiry_forms(self) -> List[EnquiryForm]:
        return [form for form in self.enquiry_forms.values() if form.is_active]

    async def get_enquiry_form(self, id: str) -> Optional[EnquiryForm]:
        return self.enquiry_forms.get(id)

    async def create_enquiry_form(self, form: EnquiryFormCreate) -> EnquiryForm:
        db_form = EnquiryForm(**form.model_dump(), id=str(uuid4()), created_at=self._now())
        self.enquiry_forms[db_form.id] = db_form
        logger.info(f"Enquiry form {db_form.id} created: {db_form.title}")
        await self._record("enquiry", "created", f'New enquiry form "{db_form.title}" was created')
        return db_form

    async def update_enquiry_form(self, id: str, form: EnquiryFormUpdate) -> Optional[EnquiryForm]:
        existing = self.enquiry_forms.get(id)
        if not existing:
            return None
        changes = form.model_dump(exclude_unset=True, exclude_none=True)
        updated = existing.model_copy(update=changes)
        self.enquiry_forms[id] = updated
        logger.info(f"Enquiry form {id} updated: {sorted(changes)}")
        await self._record("enquiry", "updated", f'Enquiry form "{updated.title}" was updated')
        return updated

    async def update_enquiry_form_status(self, id: str, is_active: bool) -> Optional[EnquiryForm]:
        existing = self.enquiry_forms.get(id)
        if not existing:
            return None
        updated = existing.model_copy(update={"is_active": is_active})
        self.enquiry_forms[id] = updated
        state = "activated" if is_active else "deactivated"
        logger.info(f"Enquiry form {id} {state}")
        await self._record("enquiry", "updated", f'Enquiry form "{updated.title}" was {state}')
        return updated

    async def delete_enquiry_form(self, id: str) -> bool:
        form = self.enquiry_forms.pop(id, None)
        if not form:
            return False
        logger.info(f"Enquiry form {id} deleted: {form.title}")
        await self._record("enquiry", "deleted", f'Enquiry form "{form.title}" was deleted')
        return True

    # Activities
    async def get_all_activities(self) -> List[Activity]:
        return _newest_first(self.activities.values())[:self.activity_limit]

    async def create_activity(self, activity: ActivityCreate) -> Activity:
        db_activity = Activity(**activity.model_dump(), id=str(uuid4()), created_at=self._now())
        self.activities[db_activity.id] = db_activity
        logger.debug(f"Activity {db_activity.type}/{db_activity.action}: {db_activity.title}")
        return db_activity
