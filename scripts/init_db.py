import asyncio
import sys
from app.core.logging import setup_logging
from app.db.session import engine
from app.db.init import create_all

async def run():
    await create_all(engine)
    await engine.dispose()
    print("✅ DB initialized")

def main():
    setup_logging(sys.stderr)
    asyncio.run(run())

if __name__ == "__main__":
    main()
