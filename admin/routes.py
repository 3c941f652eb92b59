# src/admin/routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from auth.models import Activity, LoginHistory
from auth.schemas import UserCreate, UserPermissionsUpdate, UserResponse, UserStatusUpdate, UserUpdate
from database import get_storage
from storage.base import Storage

router = APIRouter(prefix="/api", tags=["admin"])


@router.get("/users", response_model=List[UserResponse])
async def get_users(storage: Storage = Depends(get_storage)):
    """Retrieve all users, newest first."""
    return [UserResponse.from_model(user) for user in await storage.get_all_users()]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, storage: Storage = Depends(get_storage)):
    user = await storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_model(user)


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, storage: Storage = Depends(get_storage)):
    """Create a user. Usernames are not checked for uniqueness."""
    return UserResponse.from_model(await storage.create_user(user_data))


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, user_data: UserUpdate, storage: Storage = Depends(get_storage)):
    """Apply the supplied fields to a user."""
    user = await storage.update_user(user_id, user_data)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_model(user)


@router.delete("/users/{user_id}")
async def delete_user(user_id: str, storage: Storage = Depends(get_storage)) -> dict:
    """Delete a user. Its login history is kept."""
    if not await storage.delete_user(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User deleted successfully"}


@router.put("/users/{user_id}/permissions", response_model=UserResponse)
async def update_user_permissions(
    user_id: str,
    data: UserPermissionsUpdate,
    storage: Storage = Depends(get_storage)
):
    user = await storage.update_user_permissions(user_id, data.permissions)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_model(user)


@router.put("/users/{user_id}/status", response_model=UserResponse)
async def update_user_status(user_id: str, data: UserStatusUpdate, storage: Storage = Depends(get_storage)):
    """Activate or deactivate a user."""
    user = await storage.update_user_status(user_id, data.is_active)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.from_model(user)


@router.get("/login-history", response_model=List[LoginHistory])
async def get_login_history(
    user_id: Optional[str] = Query(None, alias="userId"),
    storage: Storage = Depends(get_storage)
):
    """Retrieve login history, optionally for a single user."""
    if user_id:
        return await storage.get_user_login_history(user_id)
    return await storage.get_all_login_history()


@router.get("/activities", response_model=List[Activity])
async def get_activities(storage: Storage = Depends(get_storage)):
    """Retrieve the latest activity feed entries."""
    return await storage.get_all_activities()
