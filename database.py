# src/database.py
from typing import TYPE_CHECKING

from fastapi import Request
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from storage.base import Storage


class Base(BaseModel):
    """Base for stored records: immutable, serialized with camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class Schema(BaseModel):
    """Base for request/response schemas using the camelCase wire format."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


def get_storage(request: Request) -> "Storage":
    """Return the storage instance the application was created with."""
    return request.app.state.storage
