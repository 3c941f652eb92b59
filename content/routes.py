# src/content/routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from content.models import Blog, Video
from content.schemas import BlogCreate, BlogUpdate, VideoCreate, VideoUpdate
from database import get_storage
from storage.base import Storage

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/blogs", response_model=List[Blog])
async def get_blogs(search: Optional[str] = None, storage: Storage = Depends(get_storage)) -> List[Blog]:
    """Retrieve blogs, filtered by a search term when one is given."""
    if search:
        return await storage.search_blogs(search)
    return await storage.get_all_blogs()


@router.get("/blogs/{blog_id}", response_model=Blog)
async def get_blog(blog_id: str, storage: Storage = Depends(get_storage)) -> Blog:
    """Retrieve a blog by ID."""
    blog = await storage.get_blog(blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.post("/blogs", response_model=Blog, status_code=status.HTTP_201_CREATED)
async def create_blog(blog_data: BlogCreate, storage: Storage = Depends(get_storage)) -> Blog:
    """Create a blog."""
    return await storage.create_blog(blog_data)


@router.put("/blogs/{blog_id}", response_model=Blog)
async def update_blog(blog_id: str, blog_data: BlogUpdate, storage: Storage = Depends(get_storage)) -> Blog:
    """Update a blog."""
    blog = await storage.update_blog(blog_id, blog_data)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.delete("/blogs/{blog_id}")
async def delete_blog(blog_id: str, storage: Storage = Depends(get_storage)) -> dict:
    """Delete a blog."""
    if not await storage.delete_blog(blog_id):
        raise HTTPException(status_code=404, detail="Blog not found")
    return {"message": "Blog deleted successfully"}


@router.get("/videos", response_model=List[Video])
async def get_videos(search: Optional[str] = None, storage: Storage = Depends(get_storage)) -> List[Video]:
    """Retrieve videos, filtered by a search term when one is given."""
    if search:
        return await storage.search_videos(search)
    return await storage.get_all_videos()


@router.get("/videos/{video_id}", response_model=Video)
async def get_video(video_id: str, storage: Storage = Depends(get_storage)) -> Video:
    """Retrieve a video by ID."""
    video = await storage.get_video(video_id)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.post("/videos", response_model=Video, status_code=status.HTTP_201_CREATED)
async def create_video(video_data: VideoCreate, storage: Storage = Depends(get_storage)) -> Video:
    """Create a video."""
    return await storage.create_video(video_data)


@router.put("/videos/{video_id}", response_model=Video)
async def update_video(video_id: str, video_data: VideoUpdate, storage: Storage = Depends(get_storage)) -> Video:
    """Update a video."""
    video = await storage.update_video(video_id, video_data)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.delete("/videos/{video_id}")
async def delete_video(video_id: str, storage: Storage = Depends(get_storage)) -> dict:
    """Delete a video."""
    if not await storage.delete_video(video_id):
        raise HTTPException(status_code=404, detail="Video not found")
    return {"message": "Video deleted successfully"}
