from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from app.core.config import settings
from app.db.init import enable_foreign_keys

engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, future=True)
enable_foreign_keys(engine)
SessionLocal = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, class_=AsyncSession)
