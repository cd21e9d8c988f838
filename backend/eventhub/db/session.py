"""
Request-scoped database sessions.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventhub.db.connection import DatabaseConnection, get_database


async def get_db(
    database: DatabaseConnection = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session; anything not committed by the service is rolled back on close."""
    session_factory = await database.sessionmaker()
    async with session_factory() as session:
        yield session
