from content.schemas import BlogCreate, BlogUpdate, VideoCreate, VideoUpdate


async def test_create_blog_and_get(storage):
    blog = await storage.create_blog(BlogCreate(title="A", content="alpha", category="news"))
    assert blog.created_at == blog.updated_at
    assert await storage.get_blog(blog.id) == blog
    activity = (await storage.get_all_activities())[0]
    assert (activity.type, activity.action) == ("blog", "created")
    assert activity.title == 'New blog "A" was created'


async def test_search_blogs_is_case_insensitive(storage):
    blog = await storage.create_blog(BlogCreate(title="A", content="alpha", category="news"))
    assert await storage.search_blogs("AL") == [blog]
    assert await storage.search_blogs("NEWS") == [blog]
    assert await storage.search_blogs("zzz") == []


async def test_search_blogs_empty_query_matches_all_in_insertion_order(storage):
    first = await storage.create_blog(BlogCreate(title="One", content="x", category="c"))
    second = await storage.create_blog(BlogCreate(title="Two", content="y", category="c"))
    assert await storage.search_blogs("") == [first, second]
    assert await storage.get_all_blogs() == [second, first]


async def test_update_blog_partial(storage):
    blog = await storage.create_blog(BlogCreate(title="Old", content="body", category="news"))
    updated = await storage.update_blog(blog.id, BlogUpdate(title="New"))
    assert updated.title == "New"
    assert updated.content == "body"
    assert updated.category == "news"
    assert updated.updated_at > blog.updated_at
    assert (await storage.get_all_activities())[0].title == 'Blog "New" was updated'


async def test_update_blog_ignores_null_fields(storage):
    blog = await storage.create_blog(BlogCreate(title="Keep", content="body", category="news"))
    updated = await storage.update_blog(blog.id, BlogUpdate(title=None, content="changed"))
    assert updated.title == "Keep"
    assert updated.content == "changed"


async def test_missing_blog(storage):
    assert await storage.get_blog("missing") is None
    assert await storage.update_blog("missing", BlogUpdate(title="x")) is None
    assert await storage.delete_blog("missing") is False
    assert await storage.get_all_activities() == []


async def test_delete_blog(storage):
    blog = await storage.create_blog(BlogCreate(title="Bye", content="body", category="news"))
    assert await storage.delete_blog(blog.id) is True
    assert await storage.get_blog(blog.id) is None
    assert (await storage.get_all_activities())[0].title == 'Blog "Bye" was deleted'


async def test_video_lifecycle(storage):
    video = await storage.create_video(VideoCreate(title="Intro", description="Getting started"))
    assert (await storage.get_all_activities())[0].title == 'New video "Intro" was added'

    updated = await storage.update_video(video.id, VideoUpdate(description="Updated"))
    assert updated.title == "Intro"
    assert updated.description == "Updated"
    assert updated.created_at == video.created_at
    assert not hasattr(updated, "updated_at")
    assert (await storage.get_all_activities())[0].title == 'Video "Intro" was updated'

    assert await storage.delete_video(video.id) is True
    assert await storage.get_video(video.id) is None
    assert await storage.delete_video(video.id) is False


async def test_search_videos(storage):
    video = await storage.create_video(VideoCreate(title="Tax basics", description="Filing season tips"))
    await storage.create_video(VideoCreate(title="Other", description="Nothing here"))
    assert await storage.search_videos("SEASON") == [video]
    assert await storage.search_videos("tax") == [video]
    assert await storage.search_videos("zzz") == []


async def test_get_all_videos_newest_first(storage):
    first = await storage.create_video(VideoCreate(title="1", description="d"))
    second = await storage.create_video(VideoCreate(title="2", description="d"))
    assert await storage.get_all_videos() == [second, first]
