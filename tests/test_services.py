import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.category_service import CategoryService
from app.services.video_service import VideoService


@pytest.mark.asyncio
async def test_create_many_keeps_input_order_and_assigns_ids(db_session: AsyncSession):
    cs = CategoryService(db_session)
    cats = await cs.create_many([{"name": "Music"}, {"name": "Education"}])

    assert [c.name for c in cats] == ["Music", "Education"]
    assert all(c.id is not None for c in cats)
    assert cats[0].id != cats[1].id

    found = await cs.get(cats[1].id)
    assert found is not None
    assert found.name == "Education"


@pytest.mark.asyncio
async def test_get_missing_category_returns_none(db_session: AsyncSession):
    assert await CategoryService(db_session).get(9999) is None


@pytest.mark.asyncio
async def test_destroy_all_reports_removed_rows(db_session: AsyncSession):
    cs = CategoryService(db_session)
    vs = VideoService(db_session)
    cats = await cs.create_many([{"name": "Music"}])
    await vs.create_many([
        {"title": "Scales", "categories_id": cats[0].id},
        {"title": "Chords", "categories_id": cats[0].id},
    ])

    assert await vs.destroy_all() == 2
    assert await cs.destroy_all() == 1
    assert await vs.list_all() == []
    assert await cs.list_all() == []


@pytest.mark.asyncio
async def test_destroy_all_on_empty_table(db_session: AsyncSession):
    assert await VideoService(db_session).destroy_all() == 0
    assert await CategoryService(db_session).destroy_all() == 0


@pytest.mark.asyncio
async def test_list_with_category_loads_relationship(db_session: AsyncSession):
    cats = await CategoryService(db_session).create_many([{"name": "Technology"}])
    vs = VideoService(db_session)
    await vs.create_many([{"title": "The Future of AI", "categories_id": cats[0].id}])

    videos = await vs.list_with_category()
    assert len(videos) == 1
    assert videos[0].category.name == "Technology"


@pytest.mark.asyncio
async def test_create_many_failure_rolls_back(db_session: AsyncSession):
    cs = CategoryService(db_session)
    with pytest.raises(IntegrityError):
        await cs.create_many([{"name": "Music"}, {"name": None}])

    # session is usable again and nothing from the failed batch was kept
    assert await cs.list_all() == []


@pytest.mark.asyncio
async def test_video_with_unknown_category_is_rejected(db_session: AsyncSession):
    vs = VideoService(db_session)
    with pytest.raises(IntegrityError):
        await vs.create_many([{"title": "Orphan", "categories_id": 9999}])

    assert await vs.list_all() == []
