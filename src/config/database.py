import contextlib
import sys
from collections.abc import AsyncIterator

from alembic import command, config
from pydantic.networks import PostgresDsn
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.config.settings import settings


def create_engine(url: str | PostgresDsn, testing: bool = False):
    url = str(url)
    use_echo = settings.LOG_DB
    connect_args = {}
    if "sqlite" in url:
        connect_args = {"timeout": 15}
    kwargs = {}
    if testing:
        # every test runs in its own event loop, so connections must not be pooled
        kwargs["poolclass"] = NullPool
    return create_async_engine(
        url,
        echo=use_echo,
        future=True,  # use the sqlalchemy 2.0 classes
        connect_args=connect_args,
        **kwargs,
    )


def to_sync_dsn(dsn: str | PostgresDsn) -> str:
    """Strip the async driver so the same database can be reached from sync code."""
    return str(dsn).replace("+aiosqlite", "").replace("+asyncpg", "")


engine = create_engine(settings.database_url)
if "pytest" in sys.modules:
    # pin the engine to the testing database
    engine = create_engine(settings.test_database_url, testing=True)


def run_upgrade(connection, cfg):
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(run_upgrade, config.Config("alembic.ini"))


async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


async def get_async_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        yield session


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit=True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    if session_overwrite:
        yield session_overwrite
    else:
        async with async_session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()
