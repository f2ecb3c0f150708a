from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Category

class CategoryService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, category_id: int) -> Category | None:
        q = select(Category).where(Category.id == category_id)
        res = await self.db.execute(q)
        return res.scalar_one_or_none()

    async def list_all(self) -> list[Category]:
        q = select(Category).order_by(Category.id.asc())
        res = await self.db.execute(q)
        return list(res.scalars().all())

    async def destroy_all(self) -> int:
        res = await self.db.execute(delete(Category))
        await self.db.commit()
        return res.rowcount or 0

    async def create_many(self, rows: list[dict]) -> list[Category]:
        """
        Bulk create. Returns the persisted categories in input order, ids populated.
        """
        cats = [Category(name=row["name"]) for row in rows]
        self.db.add_all(cats)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return cats
