from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from app.db.models import Video

class VideoService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Video]:
        q = select(Video).order_by(Video.id.asc())
        res = await self.db.execute(q)
        return list(res.scalars().all())

    async def list_with_category(self) -> list[Video]:
        q = (
            select(Video)
            .options(selectinload(Video.category))
            .order_by(Video.id.asc())
            .execution_options(populate_existing=True)
        )
        res = await self.db.execute(q)
        return list(res.scalars().all())

    async def destroy_all(self) -> int:
        res = await self.db.execute(delete(Video))
        await self.db.commit()
        return res.rowcount or 0

    async def create_many(self, rows: list[dict]) -> list[Video]:
        videos = [Video(title=row["title"], categories_id=row["categories_id"]) for row in rows]
        self.db.add_all(videos)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return videos
