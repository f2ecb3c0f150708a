"""
Fixed sample data for development and test databases.

Every run wipes both tables and recreates the same rows, so running it twice
ends in the same state as running it once (ids may differ).
"""
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger
from app.db.models import Category, Video
from app.services.category_service import CategoryService
from app.services.video_service import VideoService

SEED_CATEGORIES = ["Music", "Education", "Entertainment", "Technology"]

# (title, index into SEED_CATEGORIES)
SEED_VIDEOS = [
    ("How to Play Guitar", 0),
    ("Ruby on Rails Tutorial", 1),
    ("Comedy Sketch", 2),
    ("The Future of AI", 3),
]

COMPLETION_MESSAGE = "Seeding completed successfully!"


async def seed(db: AsyncSession) -> tuple[list[Category], list[Video]]:
    cs = CategoryService(db)
    vs = VideoService(db)

    # videos first so no row ever points at a missing category
    removed_videos = await vs.destroy_all()
    removed_cats = await cs.destroy_all()
    logger.info(f"Cleared {removed_videos} videos, {removed_cats} categories")

    categories = await cs.create_many([{"name": name} for name in SEED_CATEGORIES])
    logger.info(f"Created {len(categories)} categories")

    videos = await vs.create_many([
        {"title": title, "categories_id": categories[idx].id}
        for title, idx in SEED_VIDEOS
    ])
    logger.info(f"Created {len(videos)} videos")

    return categories, videos
