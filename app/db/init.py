from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine
from app.db.base import Base
import app.db.models  # noqa: F401  (registers tables on Base.metadata)

def enable_foreign_keys(engine: AsyncEngine):
    """SQLite ignores FOREIGN KEY clauses unless each connection turns them on."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _fk_pragma(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

async def create_all(engine: AsyncEngine):
    """Create every table declared on the metadata. Safe to call repeatedly."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
