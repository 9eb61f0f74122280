# scripts/init_db.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from sqlalchemy import text
from argus.config.settings import get_settings
from argus.infrastructure.database.session import create_engine, init_models


async def init_db():
    engine = create_engine(get_settings().database_url)
    try:
        async with engine.begin() as conn:
            result = await conn.execute(text("SELECT 1"))
            print("DB Connected:", result.scalar())
        await init_models(engine)
        print("audit_logs table ready")
    finally:
        await engine.dispose()

asyncio.run(init_db())
