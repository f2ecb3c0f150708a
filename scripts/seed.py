import asyncio
import sys
from app.core.logging import setup_logging
from app.db.session import engine, SessionLocal
from app.db.init import create_all
from app.db.seeds import seed, COMPLETION_MESSAGE

async def run():
    await create_all(engine)

    async with SessionLocal() as session:
        await seed(session)
    await engine.dispose()
    print(COMPLETION_MESSAGE)

def main():
    # stdout carries only the completion line
    setup_logging(sys.stderr)
    asyncio.run(run())

if __name__ == "__main__":
    main()
