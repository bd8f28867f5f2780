from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from .config import settings

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
    pool_pre_ping=True,      # check the connection before handing it out
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Async session generator.
    Used as Depends(get_db) in the routers, one session per request.
    """
    async with AsyncSessionLocal() as session:
        yield session


def is_unique_violation(exc, name: str, *columns: str) -> bool:
    """
    True when an IntegrityError comes from the given unique constraint.
    PostgreSQL reports the constraint name, SQLite the constrained columns.
    """
    message = str(getattr(exc, "orig", exc))
    if name in message:
        return True
    return bool(columns) and f"UNIQUE constraint failed: {', '.join(columns)}" in message
