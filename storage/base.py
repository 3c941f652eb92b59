# src/storage/base.py
"""Storage interface shared by every backend.

Lookups signal a missing record with ``None`` (get/update) or ``False``
(delete) and never raise for it. Every successful create/update/delete on
users, blogs, videos, contacts and enquiry forms appends one Activity row.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from auth.models import Activity, LoginHistory, User
from auth.schemas import ActivityCreate, LoginHistoryCreate, UserCreate, UserUpdate
from content.models import Blog, Video
from content.schemas import BlogCreate, BlogUpdate, VideoCreate, VideoUpdate
from enquiry.models import Contact, EnquiryForm
from enquiry.schemas import ContactCreate, EnquiryFormCreate, EnquiryFormUpdate


class Storage(ABC):
    # Users
    @abstractmethod
    async def get_user(self, id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """First user with that exact username. Usernames are not guaranteed unique."""

    @abstractmethod
    async def get_all_users(self) -> List[User]:
        """All users, newest first."""

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User:
        ...

    @abstractmethod
    async def update_user(self, id: str, user: UserUpdate) -> Optional[User]:
        ...

    @abstractmethod
    async def delete_user(self, id: str) -> bool:
        ...

    @abstractmethod
    async def update_user_permissions(self, id: str, permissions: List[str]) -> Optional[User]:
        ...

    @abstractmethod
    async def update_user_status(self, id: str, is_active: bool) -> Optional[User]:
        ...

    @abstractmethod
    async def update_user_login(
            self, id: str, ip_address: Optional[str] = None, user_agent: Optional[str] = None
    ) -> None:
        """Bump the login counter, stamp last_login and append a login history row."""

    # Login history
    @abstractmethod
    async def get_all_login_history(self) -> List[LoginHistory]:
        ...

    @abstractmethod
    async def get_user_login_history(self, user_id: str) -> List[LoginHistory]:
        ...

    @abstractmethod
    async def create_login_history(self, login_history: LoginHistoryCreate) -> LoginHistory:
        ...

    # Blogs
    @abstractmethod
    async def get_all_blogs(self) -> List[Blog]:
        ...

    @abstractmethod
    async def get_blog(self, id: str) -> Optional[Blog]:
        ...

    @abstractmethod
    async def create_blog(self, blog: BlogCreate) -> Blog:
        ...

    @abstractmethod
    async def update_blog(self, id: str, blog: BlogUpdate) -> Optional[Blog]:
        ...

    @abstractmethod
    async def delete_blog(self, id: str) -> bool:
        ...

    @abstractmethod
    async def search_blogs(self, query: str) -> List[Blog]:
        """Case-insensitive substring match on title, content and category."""

    # Videos
    @abstractmethod
    async def get_all_videos(self) -> List[Video]:
        ...

    @abstractmethod
    async def get_video(self, id: str) -> Optional[Video]:
        ...

    @abstractmethod
    async def create_video(self, video: VideoCreate) -> Video:
        ...

    @abstractmethod
    async def update_video(self, id: str, video: VideoUpdate) -> Optional[Video]:
        ...

    @abstractmethod
    async def delete_video(self, id: str) -> bool:
        ...

    @abstractmethod
    async def search_videos(self, query: str) -> List[Video]:
        """Case-insensitive substring match on title and description."""

    # Contacts
    @abstractmethod
    async def get_all_contacts(self) -> List[Contact]:
        ...

    @abstractmethod
    async def create_contact(self, contact: ContactCreate) -> Contact:
        ...

    # Enquiry forms
    @abstractmethod
    async def get_all_enquiry_forms(self) -> List[EnquiryForm]:
        """Active forms only."""

    @abstractmethod
    async def get_enquiry_form(self, id: str) -> Optional[EnquiryForm]:
        ...

    @abstractmethod
    async def create_enquiry_form(self, form: EnquiryFormCreate) -> EnquiryForm:
        ...

    @abstractmethod
    async def update_enquiry_form(self, id: str, form: EnquiryFormUpdate) -> Optional[EnquiryForm]:
        ...

    @abstractmethod
    async def update_enquiry_form_status(self, id: str, is_active: bool) -> Optional[EnquiryForm]:
        ...

    @abstractmethod
    async def delete_enquiry_form(self, id: str) -> bool:
        ...

    # Activities
    @abstractmethod
    async def get_all_activities(self) -> List[Activity]:
        """The most recent activities, newest first."""

    @abstractmethod
    async def create_activity(self, activity: ActivityCreate) -> Activity:
        ...
